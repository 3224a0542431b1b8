"""Minimum spanning trees of weighted undirected graphs given as adjacency matrices."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[int]]

KRUSKAL_EXAMPLE: list[list[int]] = [
    [0, 4, 4, 0, 0, 0],
    [4, 0, 2, 0, 0, 0],
    [4, 2, 0, 3, 4, 2],
    [0, 0, 3, 0, 3, 0],
    [0, 0, 4, 3, 0, 3],
    [0, 0, 2, 0, 3, 0],
]

PRIM_EXAMPLE: list[list[int]] = [
    [0, 9, 75, 0, 0],
    [9, 0, 95, 19, 42],
    [75, 95, 0, 51, 66],
    [0, 19, 51, 0, 31],
    [0, 42, 66, 31, 0],
]


@dataclass(frozen=True)
class Edge:
    """A weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int

    def __str__(self) -> str:
        return f"{self.u} - {self.v} : {self.weight}"


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def kruskal(matrix: Matrix) -> list[Edge]:
    """Return the spanning-tree edges chosen by Kruskal's algorithm, in the order chosen.

    Edges are read from the lower triangle (``u > v``); a zero entry means no edge.
    Equal weights keep the order in which the edges were read.
    """
    n = _size(matrix)
    edges = [
        Edge(i, j, matrix[i][j])
        for i in range(1, n)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    edges.sort(key=lambda edge: edge.weight)

    component = list(range(n))
    tree: list[Edge] = []
    for edge in edges:
        keep, absorb = component[edge.u], component[edge.v]
        if keep != absorb:
            tree.append(edge)
            component = [keep if label == absorb else label for label in component]
    return tree


def prim(matrix: Matrix) -> list[Edge]:
    """Return the spanning-tree edges chosen by Prim's algorithm starting from vertex 0.

    Raises ValueError if the graph is not connected.
    """
    n = _size(matrix)
    if n == 0:
        return []
    selected = {0}
    tree: list[Edge] = []
    while len(selected) < n:
        best: Edge | None = None
        for i in range(n):
            if i not in selected:
                continue
            for j, weight in enumerate(matrix[i]):
                if j in selected or not weight:
                    continue
                if best is None or weight < best.weight:
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected.add(best.v)
    return tree


def total_cost(edges: Iterable[Edge]) -> int:
    """Sum of the edge weights."""
    return sum(edge.weight for edge in edges)


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix with each cell right-aligned in three columns."""
    return "".join("".join(f"{cell:3d} " for cell in row) + "\n" for row in matrix)


def main(argv: Sequence[str] | None = None) -> int:
    """Compute minimum spanning trees of the sample graphs with Kruskal and Prim."""
    parser = argparse.ArgumentParser(description="Minimum spanning trees of sample graphs.")
    parser.parse_args(argv)

    print("Input Graph (Adjacency Matrix):")
    print(format_matrix(KRUSKAL_EXAMPLE), end="")
    tree = kruskal(KRUSKAL_EXAMPLE)
    print("\nMinimum Spanning Tree Edges:")
    for edge in tree:
        print(edge)
    print(f"Total cost of MST: {total_cost(tree)}")

    print("Edge : Weight")
    tree = prim(PRIM_EXAMPLE)
    for edge in tree:
        print(edge)
    print(f"Total cost of Minimum Spanning Tree: {total_cost(tree)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())