[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daa_algorithms"
version = "0.1.0"
description = "Classic algorithms (knapsack, sorting, permutations, N-Queens, shortest paths, spanning trees, topological order, transitive closure) as plain functions, with a command that runs them on integers from standard input."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "knapsack",
    "sorting",
    "dijkstra",
    "floyd-warshall",
    "kruskal",
    "prim",
    "topological-sort",
    "n-queens",
    "johnson-trotter",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daa-algorithms = "daa_algorithms.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daa_algorithms"]

[tool.pytest.ini_options]
addopts = "-ra"
