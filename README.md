# algolab

A small collection of classic algorithms. You can use them as a library or run
them as short demonstration commands:

- **Sorting** (`algolab.sorting`): `selection_sort`, `quick_sort` and
  `merge_sort`, each returning a sorted copy, plus `random_values`, `time_sort`
  and `write_timings`. Together they sort random inputs of growing size, measure
  CPU time and write the timings to a CSV file.
- **Knapsack** (`algolab.knapsack`): `Item` with its `density()`, greedy
  whole-item and fractional knapsack by value density (`greedy_discrete`,
  `greedy_fractional`), and the exact dynamic-programming `knapsack_01`.
- **Backtracking** (`algolab.backtracking`): `solve_n_queens` with
  `format_board`, and `subsets_with_sum`, which yields every subset of a list
  that adds up to a target.
- **Spanning trees** (`algolab.spanning_tree`): `kruskal` and `prim` on an
  adjacency matrix, returning `Edge` objects, with `total_cost` and
  `format_matrix`.
- **Paths** (`algolab.paths`): `floyd_warshall` all-pairs shortest distances,
  using `INF` (`math.inf`) for "no path", and `transitive_closure`, with
  `format_distances` and `format_closure`.
- **Topological ordering** (`algolab.topological`): a `Graph` with `add_edge`
  and a depth-first `topological_order`.

It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command runs the demonstration for one topic and prints its results.

| Command             | What it does                                                                 |
|---------------------|------------------------------------------------------------------------------|
| `algolab-sort`      | Times a sort on random inputs of growing size and saves the results as CSV   |
| `algolab-knapsack`  | Solves a sample problem greedily, fractionally and by dynamic programming    |
| `algolab-backtrack` | Prints an N-Queens board and the subsets of a set that sum to a target       |
| `algolab-mst`       | Prints minimum spanning trees of sample graphs (Kruskal, then Prim)          |
| `algolab-paths`     | Prints all-pairs shortest distances and a transitive closure of samples      |
| `algolab-toposort`  | Prints a topological ordering of a sample directed graph                     |

### `algolab-sort`

```
algolab-sort [selection|merge|quick] [--start N] [--stop N] [--step N]
             [--min N] [--max N] [--seed N] [--output FILE]
```

The algorithm defaults to `quick`. Sizes default to 1000 to 10000 in steps of
1000 for `selection`, and 5000 to 10000 in steps of 500 for `quick` and
`merge`. Values are drawn from `--min` to `--max` (default 1 to 10000). Without
`--seed` the random generator is seeded from the clock. Each timing is printed
and the CSV, with header `n,Time taken (ms)`, goes to `--output` (default
`sorting_times.csv`). If the file cannot be written, the command prints
`Error opening file.` and exits with status 1.

### `algolab-knapsack`

```
algolab-knapsack [--capacity N]
```

Uses the items (weight 10, value 60), (20, 100) and (30, 120); the capacity
defaults to 50.

### `algolab-backtrack`

```
algolab-backtrack [--queens N] [--target N] [VALUE ...]
```

The board size defaults to 8 and the target to 15. Without values, the set
searched is `12 4 5 6 7 2 3 8 9`.

`algolab-mst`, `algolab-paths` and `algolab-toposort` take no options.

## Library use

```python
from algolab.sorting import merge_sort, quick_sort, selection_sort
from algolab.knapsack import Item, greedy_discrete, greedy_fractional, knapsack_01
from algolab.backtracking import solve_n_queens, format_board, subsets_with_sum
from algolab.spanning_tree import kruskal, prim, total_cost
from algolab.paths import floyd_warshall, transitive_closure
from algolab.topological import Graph

knapsack_01(50, [10, 20, 30], [60, 100, 120])   # 220

items = [Item(weight=10, value=60), Item(weight=20, value=100), Item(weight=30, value=120)]
greedy_discrete(items, 50)     # 160
greedy_fractional(items, 50)   # 240.0

print(format_board(solve_n_queens(8)), end="")

for subset in subsets_with_sum([12, 4, 5, 6, 7, 2, 3, 8, 9], 15):
    print(subset)

graph = Graph(6)
for src, dest in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    graph.add_edge(src, dest)
print(graph.topological_order())
```

Notes on behaviour:

- `Item` requires a positive weight and raises `ValueError` otherwise.
  `knapsack_01` raises `ValueError` for mismatched lists or a negative capacity.
- `solve_n_queens` returns the first board found as rows of 0 and 1, or `None`
  when there is no solution (and for size 0).
- The spanning tree functions take a square adjacency matrix in which `0` means
  "no edge". `kruskal` reads edges from the lower triangle. `prim` starts from
  vertex 0 and raises `ValueError` if the graph is not connected.
- `Graph.add_edge` raises `IndexError` for a vertex out of range.

## What it does not do

- The commands `algolab-mst`, `algolab-paths` and `algolab-toposort` work only on
  their built-in sample graphs. There is no command for reading a graph from a
  file or from input; use the library functions for your own data.
- `Graph.topological_order` does not detect cycles. On a cyclic graph it still
  returns the reverse depth-first finishing order.