"""Topological ordering of a directed graph by depth-first search."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence


class Graph:
    """A directed graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative: {vertices}")
        self.vertices = vertices
        self._successors: list[set[int]] = [set() for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self._successors[src].add(dest)

    def _ordered_successors(self, vertex: int) -> Iterator[int]:
        return iter(sorted(self._successors[vertex]))

    def topological_order(self) -> list[int]:
        """Return vertices in reverse depth-first finishing order.

        Roots and successors are visited in increasing vertex number.
        """
        visited = [False] * self.vertices
        finished: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, self._ordered_successors(root))]
            while stack:
                vertex, successors = stack[-1]
                for nxt in successors:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, self._ordered_successors(nxt)))
                        break
                else:
                    stack.pop()
                    finished.append(vertex)
        finished.reverse()
        return finished


def _example() -> Graph:
    graph = Graph(6)
    for src, dest in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
        graph.add_edge(src, dest)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print a topological ordering of the sample graph."""
    parser = argparse.ArgumentParser(description="Topological sort of a sample graph.")
    parser.parse_args(argv)
    order = _example().topological_order()
    print("Topological ordering of vertices: " + "".join(f"{v} " for v in order))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())