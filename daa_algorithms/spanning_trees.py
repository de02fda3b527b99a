"""Minimum spanning trees by Kruskal's and Prim's algorithms on cost matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from daa_algorithms.shortest_paths import INF


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree, in the order chosen, and their total cost."""

    edges: tuple[tuple[int, int], ...]
    total: int


def _square(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("cost matrix must be square")
    return rows


def kruskal(cost: Iterable[Sequence[int]]) -> SpanningTree:
    """Build a minimum spanning tree by repeatedly taking the cheapest safe edge.

    Entries equal to ``INF`` mean no edge. Among equal costs the first edge in
    row-major order wins. Raises ``ValueError`` if the graph is not connected.
    """
    matrix = _square(cost)
    parent = list(range(len(matrix)))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    edges: list[tuple[int, int]] = []
    total = 0
    while len(edges) < len(matrix) - 1:
        best: tuple[int, int, int] | None = None
        for i, row in enumerate(matrix):
            for j, weight in enumerate(row):
                limit = INF if best is None else best[0]
                if weight < limit and find(i) != find(j):
                    best = (weight, i, j)
        if best is None:
            raise ValueError("graph is not connected")
        weight, u, v = best
        parent[find(u)] = find(v)
        edges.append((u, v))
        total += weight
    return SpanningTree(tuple(edges), total)


def prim(cost: Iterable[Sequence[int]]) -> SpanningTree:
    """Grow a minimum spanning tree from vertex 0.

    Each edge is given as (new vertex, its parent in the tree). Entries equal
    to ``INF`` mean no edge. Raises ``ValueError`` if the graph is not connected.
    """
    matrix = _square(cost)
    if not matrix:
        return SpanningTree((), 0)

    dist = list(matrix[0])
    parent = [0] * len(matrix)
    in_tree = [False] * len(matrix)
    in_tree[0] = True

    edges: list[tuple[int, int]] = []
    total = 0
    for _ in range(len(matrix) - 1):
        candidates = [
            (d, vertex)
            for vertex, (d, taken) in enumerate(zip(dist, in_tree))
            if not taken and d < INF
        ]
        if not candidates:
            raise ValueError("graph is not connected")
        _, nearest = min(candidates)
        edges.append((nearest, parent[nearest]))
        total += matrix[nearest][parent[nearest]]
        in_tree[nearest] = True
        for vertex, weight in enumerate(matrix[nearest]):
            if not in_tree[vertex] and weight < dist[vertex]:
                dist[vertex] = weight
                parent[vertex] = nearest
    return SpanningTree(tuple(edges), total)