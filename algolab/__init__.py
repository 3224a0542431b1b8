"""Classic algorithms: sorting, knapsack, backtracking, spanning trees, paths and topological ordering."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "knapsack",
    "paths",
    "sorting",
    "spanning_tree",
    "topological",
]