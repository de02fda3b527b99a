"""Single-source (Dijkstra) and all-pairs (Floyd) shortest paths on cost matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INF = 999
"""Cost that marks a missing edge in an input matrix."""


def _square(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("cost matrix must be square")
    return rows


def dijkstra(cost: Iterable[Sequence[int]], source: int) -> list[int | None]:
    """Return the shortest distance from ``source`` to every vertex.

    ``cost[u][v]`` is the cost of the edge from ``u`` to ``v``, or ``INF`` when
    there is none. Vertices are numbered from 0. A vertex that cannot be
    reached gets ``None``.
    """
    matrix = _square(cost)
    size = len(matrix)
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex of a {size}-vertex graph")

    dist = list(matrix[source])
    dist[source] = 0
    done = [False] * size
    done[source] = True

    for _ in range(size - 1):
        candidates = [
            (d, vertex)
            for vertex, (d, finished) in enumerate(zip(dist, done))
            if not finished and d < INF
        ]
        if not candidates:
            break
        _, nearest = min(candidates)
        done[nearest] = True
        base = dist[nearest]
        for vertex, edge in enumerate(matrix[nearest]):
            if not done[vertex] and dist[vertex] > base + edge:
                dist[vertex] = base + edge

    return [None if d == INF else d for d in dist]


def floyd(cost: Iterable[Sequence[int]]) -> list[list[int | None]]:
    """Return the matrix of shortest distances between every pair of vertices.

    Entries equal to ``INF`` in ``cost`` mean no edge; a pair with no path
    gets ``None``. The diagonal starts from the diagonal of ``cost``.
    """
    dist = _square(cost)
    size = len(dist)
    for k in range(size):
        through_row = dist[k]
        for row in dist:
            for j in range(size):
                through = row[k] + through_row[j]
                if through < row[j]:
                    row[j] = through
    return [[None if d == INF else d for d in row] for row in dist]