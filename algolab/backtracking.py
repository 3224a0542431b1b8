"""Backtracking searches: the n-queens puzzle and subsets with a given sum."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

Board = list[list[int]]

_DEFAULT_SET = [12, 4, 5, 6, 7, 2, 3, 8, 9]


def _is_safe(columns: list[int], column: int) -> bool:
    row = len(columns)
    return all(
        placed != column and abs(placed - column) != row - placed_row
        for placed_row, placed in enumerate(columns)
    )


def _place(columns: list[int], n: int) -> bool:
    for column in range(n):
        if _is_safe(columns, column):
            columns.append(column)
            if len(columns) == n or _place(columns, n):
                return True
            columns.pop()
    return False


def solve_n_queens(n: int) -> Board | None:
    """Return the first n-queens board found (1 marks a queen), or None if none exists."""
    if n < 0:
        raise ValueError(f"board size must not be negative: {n}")
    columns: list[int] = []
    if n == 0 or not _place(columns, n):
        return None
    return [[1 if col == placed else 0 for col in range(n)] for placed in columns]


def format_board(board: Board) -> str:
    """Render a board as rows of space-terminated cells."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in board)


def subsets_with_sum(values: Sequence[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield subsets of ``values`` (in order) summing to ``target``, including items first."""

    def search(index: int, chosen: tuple[int, ...], total: int) -> Iterator[tuple[int, ...]]:
        if total == target:
            yield chosen
            return
        if index >= len(values) or total > target:
            return
        value = values[index]
        yield from search(index + 1, chosen + (value,), total + value)
        yield from search(index + 1, chosen, total)

    return search(0, (), 0)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve an n-queens board and list subsets with a target sum."""
    parser = argparse.ArgumentParser(description="Backtracking demonstrations.")
    parser.add_argument("--queens", type=int, default=8, help="board size")
    parser.add_argument("--target", type=int, default=15, help="subset sum to find")
    parser.add_argument("values", nargs="*", type=int, help="set to search for subsets")
    args = parser.parse_args(argv)

    board = solve_n_queens(args.queens)
    if board is not None:
        print(f"Solution found for {args.queens} queens is :")
        print(format_board(board), end="")
    else:
        print(f"No solution exists for {args.queens}-Queens")

    values = args.values or _DEFAULT_SET
    print(f"Finding subset(s) with sum {args.target}:")
    for subset in subsets_with_sum(values, args.target):
        print("Subset found: { " + "".join(f"{v} " for v in subset) + "}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())