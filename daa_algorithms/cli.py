"""Command-line front end: reads whitespace-separated integers from stdin."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Iterator, Sequence

from daa_algorithms.closure import transitive_closure
from daa_algorithms.knapsack import fractional_knapsack, knapsack_table
from daa_algorithms.permutations import johnson_trotter
from daa_algorithms.queens import n_queens
from daa_algorithms.shortest_paths import dijkstra, floyd
from daa_algorithms.sorting import heap_sort, quick_sort
from daa_algorithms.spanning_trees import SpanningTree, kruskal, prim
from daa_algorithms.topological import topological_sort_dfs

Handler = Callable[["_Tokens", argparse.Namespace], Iterator[str]]


class _Tokens:
    """Integers read one at a time from a block of text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def int(self, what: str) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError(f"missing {what}") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {word!r}") from None

    def count(self, what: str) -> int:
        value = self.int(what)
        if value < 0:
            raise ValueError(f"{what} must not be negative")
        return value

    def ints(self, count: int, what: str) -> list[int]:
        return [self.int(what) for _ in range(count)]

    def matrix(self, what: str) -> list[list[int]]:
        size = self.count("number of vertices")
        return [self.ints(size, what) for _ in range(size)]


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _run_knapsack(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of objects")
    weights = tokens.ints(n, "weight")
    profits = tokens.ints(n, "profit")
    capacity = tokens.int("capacity")
    table = knapsack_table(weights, profits, capacity)
    yield f"Maximum Profit is: {table[-1][-1]}"
    yield ""
    yield "DP Table:"
    for row in table:
        yield " ".join(f"{value:3d}" for value in row)


def _run_fractional(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of items")
    weights = tokens.ints(n, "weight")
    profits = tokens.ints(n, "profit")
    capacity = tokens.int("capacity")
    result = fractional_knapsack(weights, profits, capacity)
    for step in result.steps:
        if step.complete:
            yield (
                f"Added item {step.item} ({step.weight} weight, {step.profit} profit)"
                f" completely. Space left: {int(step.space_left)}"
            )
        else:
            yield (
                f"Added {step.fraction * 100:.2f}% of item {step.item}"
                f" ({step.weight} weight, {step.profit} profit)"
            )
    yield f"Total profit in knapsack = {result.total_value:.2f}"


def _run_heap_sort(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of elements")
    items = tokens.ints(n, "element")
    start = time.perf_counter()
    ordered = heap_sort(items)
    elapsed = time.perf_counter() - start
    yield "Sorted elements:"
    yield _join(ordered)
    yield f"Time taken: {elapsed:f} seconds"


def _run_quick_sort(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of elements")
    rng = random.Random(args.seed)
    items = [rng.randrange(200) for _ in range(n)]
    yield "The randomly generated array is:"
    yield _join(items)
    start = time.perf_counter()
    ordered = quick_sort(items)
    elapsed = time.perf_counter() - start
    yield "The sorted array elements are:"
    yield _join(ordered)
    yield f"Time taken = {elapsed:f} seconds"


def _run_johnson_trotter(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of elements")
    yield "Permutations using Johnson-Trotter Algorithm:"
    for perm in johnson_trotter(n):
        yield _join(perm)


def _run_queens(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    n = tokens.count("number of queens")
    for number, solution in enumerate(n_queens(n), start=1):
        yield f"Solution {number}:"
        for row, column in enumerate(solution, start=1):
            yield f"Row {row} <--> Column {column}"
        yield ""


def _run_dijkstra(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    cost = tokens.matrix("cost")
    source = tokens.int("source vertex")
    if not 1 <= source <= len(cost):
        raise ValueError(f"source vertex must be between 1 and {len(cost)}")
    distances = dijkstra(cost, source - 1)
    yield f"The shortest distance from vertex {source}:"
    for vertex, distance in enumerate(distances, start=1):
        shown = "Unreachable" if distance is None else str(distance)
        yield f"{source} --> {vertex} = {shown}"


def _run_floyd(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    distances = floyd(tokens.matrix("cost"))
    yield "Distance Matrix:"
    for row in distances:
        yield " ".join("INF" if d is None else f"{d:3d}" for d in row)


def _spanning_lines(tree: SpanningTree) -> Iterator[str]:
    yield "Edges of the minimal spanning tree:"
    for u, v in tree.edges:
        yield f"({u}, {v})"
    yield f"Sum of minimal spanning tree: {tree.total}"


def _run_kruskal(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    yield from _spanning_lines(kruskal(tokens.matrix("cost")))


def _run_prim(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    yield from _spanning_lines(prim(tokens.matrix("cost")))


def _run_topological(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    order = topological_sort_dfs(tokens.matrix("adjacency"))
    yield f"Topological Order: {_join(order)}"


def _run_warshall(tokens: _Tokens, args: argparse.Namespace) -> Iterator[str]:
    paths = transitive_closure(tokens.matrix("adjacency"))
    yield "The path matrix is:"
    for row in paths:
        yield _join(row)


_COMMANDS: dict[str, tuple[Handler, str]] = {
    "knapsack": (_run_knapsack, "0/1 knapsack: n, n weights, n profits, capacity"),
    "fractional-knapsack": (
        _run_fractional,
        "fractional knapsack: n, n weights, n profits, capacity",
    ),
    "heap-sort": (_run_heap_sort, "heap sort: n, then n elements"),
    "quick-sort": (_run_quick_sort, "quick sort of n random values below 200"),
    "johnson-trotter": (_run_johnson_trotter, "permutations of 1..n"),
    "n-queens": (_run_queens, "all placements of n queens"),
    "dijkstra": (_run_dijkstra, "n, n x n cost matrix (999 = no edge), source (1-based)"),
    "floyd": (_run_floyd, "n, n x n cost matrix (999 = no edge)"),
    "kruskal": (_run_kruskal, "n, n x n cost matrix"),
    "prim": (_run_prim, "n, n x n cost matrix"),
    "topological": (_run_topological, "n, n x n adjacency matrix"),
    "warshall": (_run_warshall, "n, n x n adjacency matrix"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daa-algorithms",
        description="Run a classic algorithm on integers read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (handler, help_text) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text, description=help_text)
        sub.set_defaults(handler=handler)
        if name == "quick-sort":
            sub.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen algorithm on stdin and print its result; return the exit code."""
    args = _build_parser().parse_args(argv)
    tokens = _Tokens(sys.stdin.read())
    try:
        lines = list(args.handler(tokens, args))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())