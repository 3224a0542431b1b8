"""Greedy and dynamic-programming solutions to the knapsack problem."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a weight and a value."""

    weight: int
    value: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"item weight must be positive: {self.weight}")

    def density(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def _by_density(items: Iterable[Item]) -> list[Item]:
    return sorted(items, key=Item.density, reverse=True)


def greedy_discrete(items: Iterable[Item], capacity: int) -> int:
    """Take whole items in order of decreasing density while they fit."""
    total = 0
    for item in _by_density(items):
        if capacity <= 0:
            break
        if item.weight <= capacity:
            total += item.value
            capacity -= item.weight
    return total


def greedy_fractional(items: Iterable[Item], capacity: int) -> float:
    """Fill the knapsack by density, taking a fraction of the first item that does not fit."""
    total = 0.0
    for item in _by_density(items):
        if capacity <= 0:
            break
        if item.weight <= capacity:
            total += item.value
            capacity -= item.weight
        else:
            total += capacity * item.density()
            capacity = 0
    return total


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of a subset of items whose weights fit ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


_EXAMPLE = [Item(10, 60), Item(20, 100), Item(30, 120)]


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the sample knapsack problems and print the results."""
    parser = argparse.ArgumentParser(description="Solve sample knapsack problems.")
    parser.add_argument("--capacity", type=int, default=50)
    args = parser.parse_args(argv)

    print("Discrete Knapsack Problem:")
    print(f"Maximum value obtained: {greedy_discrete(_EXAMPLE, args.capacity)}\n")
    print("Continuous Knapsack Problem:")
    print(f"Maximum value obtained: {greedy_fractional(_EXAMPLE, args.capacity):.2f}")
    weights = [item.weight for item in _EXAMPLE]
    values = [item.value for item in _EXAMPLE]
    print(f"Maximum value that can be obtained: {knapsack_01(args.capacity, weights, values)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())