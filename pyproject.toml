[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithms: sorting benchmarks, knapsack, backtracking, spanning trees, shortest paths and topological ordering."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "knapsack",
    "n-queens",
    "subset-sum",
    "kruskal",
    "prim",
    "floyd-warshall",
    "transitive-closure",
    "topological-sort",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-sort = "algolab.sorting:main"
algolab-knapsack = "algolab.knapsack:main"
algolab-backtrack = "algolab.backtracking:main"
algolab-mst = "algolab.spanning_tree:main"
algolab-paths = "algolab.paths:main"
algolab-toposort = "algolab.topological:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
