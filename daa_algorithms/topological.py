"""Topological ordering by depth-first search and by source removal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _square(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def topological_sort_dfs(adjacency: Iterable[Sequence[int]]) -> list[int]:
    """Order the nodes by reversed depth-first finishing order.

    ``adjacency[u][v] == 1`` marks an edge from ``u`` to ``v``. Nodes are
    started and explored in index order.
    """
    matrix = _square(adjacency)
    size = len(matrix)
    visited = [False] * size
    finished: list[int] = []

    for start in range(size):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(range(size)))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if matrix[node][child] == 1 and not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(range(size))))
                    break
            else:
                stack.pop()
                finished.append(node)

    finished.reverse()
    return finished


def indegrees(adjacency: Iterable[Sequence[int]]) -> list[int]:
    """Return the column sums of the adjacency matrix: each node's in-degree."""
    matrix = _square(adjacency)
    return [sum(column) for column in zip(*matrix)]


def topological_sort_source_removal(adjacency: Iterable[Sequence[int]]) -> list[int]:
    """Order the nodes by repeatedly removing one with no incoming edges.

    Ready nodes are kept on a stack, so the most recently freed one goes next.
    Raises ``ValueError`` if the graph has a cycle.
    """
    matrix = _square(adjacency)
    remaining = indegrees(matrix)
    ready = [node for node, degree in enumerate(remaining) if degree == 0]
    order: list[int] = []

    while ready:
        node = ready.pop()
        order.append(node)
        for target, edge in enumerate(matrix[node]):
            if edge != 0:
                remaining[target] -= 1
                if remaining[target] == 0:
                    ready.append(target)

    if len(order) < len(matrix):
        raise ValueError("graph has a cycle")
    return order