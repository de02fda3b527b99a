"""Transitive closure of a directed graph by Warshall's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def transitive_closure(adjacency: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the path matrix: entry (i, j) is set when j can be reached from i.

    The input is copied; entries already set keep their value and newly found
    paths are marked with 1.
    """
    paths = [list(row) for row in adjacency]
    if any(len(row) != len(paths) for row in paths):
        raise ValueError("adjacency matrix must be square")

    for k, through in enumerate(paths):
        for row in paths:
            if row[k]:
                for j, reachable in enumerate(through):
                    if reachable:
                        row[j] = 1
    return paths