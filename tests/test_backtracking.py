import pytest

from algolab.backtracking import format_board, main, solve_n_queens, subsets_with_sum


def _queens(board):
    return [row.index(1) for row in board]


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solution_is_valid(n):
    board = solve_n_queens(n)
    assert len(board) == n
    assert all(len(row) == n and sum(row) == 1 for row in board)
    cols = _queens(board)
    assert sorted(cols) == list(range(n))
    for r1 in range(n):
        for r2 in range(r1 + 1, n):
            assert abs(cols[r1] - cols[r2]) != r2 - r1


def test_single_queen():
    assert solve_n_queens(1) == [[1]]


@pytest.mark.parametrize("n", [0, 2, 3])
def test_n_queens_without_solution(n):
    assert solve_n_queens(n) is None


def test_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_eight_queens_first_solution_starts_in_corner():
    assert _queens(solve_n_queens(8))[0] == 0


def test_format_board():
    assert format_board([[1, 0], [0, 1]]) == "1 0 \n0 1 \n"


def test_subsets_order():
    assert list(subsets_with_sum([1, 2, 3], 3)) == [(1, 2), (3,)]


def test_subsets_sum_to_target_and_keep_order():
    values = [12, 4, 5, 6, 7, 2, 3, 8, 9]
    found = list(subsets_with_sum(values, 15))
    assert found
    assert len(set(found)) == len(found)
    for subset in found:
        assert sum(subset) == 15
        positions = [values.index(v) for v in subset]
        assert positions == sorted(positions)


def test_subsets_none_found():
    assert list(subsets_with_sum([10, 20], 5)) == []


def test_subsets_zero_target_yields_empty():
    assert list(subsets_with_sum([1, 2], 0)) == [()]


def test_main_prints_board_and_subsets(capsys):
    assert main(["--queens", "4", "--target", "3", "1", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert "Solution found for 4 queens is :" in out
    assert format_board(solve_n_queens(4)) in out
    assert "Finding subset(s) with sum 3:" in out
    assert "Subset found: { 1 2 }" in out
    assert "Subset found: { 3 }" in out


def test_main_reports_missing_solution(capsys):
    assert main(["--queens", "3", "--target", "100", "1"]) == 0
    out = capsys.readouterr().out
    assert "No solution exists for 3-Queens" in out
    assert "Subset found" not in out