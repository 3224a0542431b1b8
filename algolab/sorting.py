"""Comparison sorts and a small harness that times them on random data."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

CSV_HEADER = "n,Time taken (ms)"
DEFAULT_OUTPUT = "sorting_times.csv"


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quicksort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low
        for j in range(low, high):
            if items[j] < pivot:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        pending.append((boundary + 1, high))
        pending.append((low, boundary - 1))
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def random_values(count: int, low: int, high: int, rng: random.Random) -> list[int]:
    """Return ``count`` random integers in the inclusive range ``low``..``high``."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    return [rng.randint(low, high) for _ in range(count)]


def time_sort(
    sort: Callable[[list[int]], object],
    sizes: Iterable[int],
    low: int,
    high: int,
    rng: random.Random,
) -> Iterator[tuple[int, float]]:
    """Yield ``(size, milliseconds)`` of CPU time spent sorting random data of each size."""
    for size in sizes:
        data = random_values(size, low, high, rng)
        start = time.process_time()
        sort(data)
        elapsed = time.process_time() - start
        yield size, elapsed * 1000.0


def write_timings(timings: Iterable[tuple[int, float]], path: str | Path) -> int:
    """Write timings as CSV to ``path`` and return the number of rows written."""
    rows = 0
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(CSV_HEADER + "\n")
        for size, millis in timings:
            handle.write(f"{size},{millis:.2f}\n")
            rows += 1
    return rows


_ALGORITHMS: dict[str, tuple[Callable[[Iterable[int]], list[int]], range]] = {
    "selection": (selection_sort, range(1000, 10001, 1000)),
    "quick": (quick_sort, range(5000, 10001, 500)),
    "merge": (merge_sort, range(5000, 10001, 500)),
}


def _report(timings: Iterable[tuple[int, float]]) -> Iterator[tuple[int, float]]:
    for size, millis in timings:
        print(f"Time taken to sort {size} elements: {millis:.2f} ms")
        yield size, millis


def main(argv: Sequence[str] | None = None) -> int:
    """Time a sorting algorithm over growing inputs and save the results as CSV."""
    parser = argparse.ArgumentParser(description="Time a sorting algorithm on random data.")
    parser.add_argument("algorithm", nargs="?", choices=sorted(_ALGORITHMS), default="quick")
    parser.add_argument("--start", type=int, help="smallest input size")
    parser.add_argument("--stop", type=int, help="largest input size")
    parser.add_argument("--step", type=int, help="size increment")
    parser.add_argument("--min", dest="low", type=int, default=1)
    parser.add_argument("--max", dest="high", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    sort, default_sizes = _ALGORITHMS[args.algorithm]
    start = args.start if args.start is not None else default_sizes.start
    stop = args.stop if args.stop is not None else default_sizes.stop - 1
    step = args.step if args.step is not None else default_sizes.step
    if step <= 0:
        parser.error("--step must be positive")
    if args.low > args.high:
        parser.error("--min must not exceed --max")

    rng = random.Random(args.seed if args.seed is not None else time.time_ns())
    timings = _report(time_sort(sort, range(start, stop + 1, step), args.low, args.high, rng))
    try:
        write_timings(timings, args.output)
    except OSError:
        print("Error opening file.")
        return 1
    print(f"Data saved to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())