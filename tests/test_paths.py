import copy
import itertools

import pytest

from algolab.paths import (
    DISTANCE_EXAMPLE,
    INF,
    REACHABILITY_EXAMPLE,
    floyd_warshall,
    format_closure,
    format_distances,
    main,
    transitive_closure,
)


def test_floyd_warshall_example():
    assert floyd_warshall(DISTANCE_EXAMPLE) == [
        [0, 10, 3, 4],
        [2, 0, 5, 6],
        [7, 7, 0, 1],
        [6, 16, 9, 0],
    ]


def test_floyd_warshall_triangle_inequality():
    dist = floyd_warshall(DISTANCE_EXAMPLE)
    n = len(dist)
    for i, j, k in itertools.product(range(n), repeat=3):
        assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_never_exceeds_direct_edge():
    dist = floyd_warshall(DISTANCE_EXAMPLE)
    for row, original in zip(dist, DISTANCE_EXAMPLE):
        for found, direct in zip(row, original):
            assert found <= direct


def test_floyd_warshall_does_not_mutate_input():
    before = copy.deepcopy(DISTANCE_EXAMPLE)
    result = floyd_warshall(DISTANCE_EXAMPLE)
    assert result[0][1] == 10
    assert DISTANCE_EXAMPLE == before
    assert result != DISTANCE_EXAMPLE


def test_unreachable_stays_inf():
    assert floyd_warshall([[0, INF], [INF, 0]]) == [[0, INF], [INF, 0]]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1]])
    with pytest.raises(ValueError):
        transitive_closure([[1], [0, 1]])


def test_transitive_closure_example():
    assert transitive_closure(REACHABILITY_EXAMPLE) == [
        [1, 1, 1, 1],
        [0, 1, 1, 1],
        [0, 0, 1, 1],
        [0, 0, 0, 1],
    ]


def test_transitive_closure_idempotent_and_contains_input():
    closure = transitive_closure(REACHABILITY_EXAMPLE)
    assert transitive_closure(closure) == closure
    for row, original in zip(closure, REACHABILITY_EXAMPLE):
        for reach, edge in zip(row, original):
            assert reach >= edge


def test_closure_matches_finite_distances():
    adjacency = [[1 if value != INF else 0 for value in row] for row in DISTANCE_EXAMPLE]
    closure = transitive_closure(adjacency)
    dist = floyd_warshall(DISTANCE_EXAMPLE)
    for crow, drow in zip(closure, dist):
        assert crow == [1 if value != INF else 0 for value in drow]


def test_format_distances():
    assert format_distances([[0, INF], [5, 0]]) == "0\tINF\t\n5\t0\t\n"


def test_format_closure():
    assert format_closure([[1, 0], [0, 1]]) == "1 0 \n0 1 \n"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert format_distances(floyd_warshall(DISTANCE_EXAMPLE)) in out
    assert "Transitive Closure Matrix:\n" + format_closure(
        transitive_closure(REACHABILITY_EXAMPLE)
    ) in out