import pytest

from daa_algorithms.shortest_paths import INF, dijkstra, floyd

GRAPH = [
    [0, 4, 1, INF, INF],
    [4, 0, 2, 5, INF],
    [1, 2, 0, 8, 10],
    [INF, 5, 8, 0, 2],
    [INF, INF, 10, 2, 0],
]


def test_worked_example():
    cost = [
        [0, 10, 3],
        [10, 0, 4],
        [3, 4, 0],
    ]
    assert dijkstra(cost, 0) == [0, 7, 3]


@pytest.mark.parametrize("source", range(len(GRAPH)))
def test_source_distance_is_zero(source):
    assert dijkstra(GRAPH, source)[source] == 0


@pytest.mark.parametrize("source", range(len(GRAPH)))
def test_dijkstra_agrees_with_floyd(source):
    assert dijkstra(GRAPH, source) == floyd(GRAPH)[source]


@pytest.mark.parametrize("source", range(len(GRAPH)))
def test_dijkstra_not_above_direct_edge(source):
    result = dijkstra(GRAPH, source)
    for target, edge in enumerate(GRAPH[source]):
        if edge != INF:
            assert result[target] <= edge


def test_unreachable_vertex_is_none():
    cost = [
        [0, 3, INF],
        [3, 0, INF],
        [INF, INF, 0],
    ]
    result = dijkstra(cost, 0)
    assert result[2] is None
    assert result[1] == 3


def test_floyd_satisfies_triangle_inequality():
    dist = floyd(GRAPH)
    size = len(dist)
    for i in range(size):
        for j in range(size):
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_symmetric_for_symmetric_input():
    dist = floyd(GRAPH)
    assert dist == [list(column) for column in zip(*dist)]


def test_floyd_missing_path_is_none():
    cost = [
        [0, 1],
        [INF, 0],
    ]
    assert floyd(cost) == [[0, 1], [None, 0]]


def test_inputs_are_not_modified():
    cost = [row[:] for row in GRAPH]
    floyd(cost)
    dijkstra(cost, 0)
    assert cost == GRAPH


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        floyd([[0, 1], [1]])
    with pytest.raises(ValueError):
        dijkstra([[0, 1, 2], [1, 0, 2]], 0)


@pytest.mark.parametrize("source", [-1, 5])
def test_source_out_of_range_rejected(source):
    with pytest.raises(ValueError):
        dijkstra(GRAPH, source)