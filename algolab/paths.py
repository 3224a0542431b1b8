"""All-pairs shortest paths and transitive closure of directed graphs."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

INF = math.inf

DISTANCE_EXAMPLE: list[list[float]] = [
    [0, INF, 3, INF],
    [2, 0, INF, INF],
    [INF, 7, 0, 1],
    [6, INF, INF, 0],
]

REACHABILITY_EXAMPLE: list[list[int]] = [
    [1, 1, 0, 1],
    [0, 1, 1, 0],
    [0, 0, 1, 1],
    [0, 0, 0, 1],
]


def _square_copy(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return [list(row) for row in matrix]


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return shortest distances between every pair of vertices; ``INF`` means no path."""
    dist = _square_copy(matrix)
    n = len(dist)
    for k in range(n):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j in range(n):
                candidate = to_k + through[j]
                if candidate < row[j]:
                    row[j] = candidate
    return dist


def transitive_closure(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the reachability matrix (0 or 1) of a graph given by a 0/1 adjacency matrix."""
    closure = [[1 if cell else 0 for cell in row] for row in _square_copy(matrix)]
    n = len(closure)
    for k in range(n):
        through = closure[k]
        for row in closure:
            if row[k]:
                for j in range(n):
                    if through[j]:
                        row[j] = 1
    return closure


def _cell(value: float) -> str:
    return "INF" if value == INF else f"{value}"


def format_distances(dist: Sequence[Sequence[float]]) -> str:
    """Render distances tab-separated, writing unreachable pairs as ``INF``."""
    return "".join("".join(f"{_cell(value)}\t" for value in row) + "\n" for row in dist)


def format_closure(closure: Sequence[Sequence[int]]) -> str:
    """Render a reachability matrix as space-terminated cells."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in closure)


def main(argv: Sequence[str] | None = None) -> int:
    """Print shortest paths and transitive closure of the sample graphs."""
    parser = argparse.ArgumentParser(description="Shortest paths and transitive closure.")
    parser.parse_args(argv)

    print(
        "The following matrix shows the shortest distances between every pair of vertices:"
    )
    print(format_distances(floyd_warshall(DISTANCE_EXAMPLE)), end="")
    print("Transitive Closure Matrix:")
    print(format_closure(transitive_closure(REACHABILITY_EXAMPLE)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())