import pytest

from daa_algorithms.shortest_paths import INF
from daa_algorithms.spanning_trees import kruskal, prim

GRAPH = [
    [0, 3, INF, 7, 8],
    [3, 0, 4, INF, 5],
    [INF, 4, 0, 6, 2],
    [7, INF, 6, 0, 9],
    [8, 5, 2, 9, 0],
]

DISCONNECTED = [
    [0, 1, INF],
    [1, 0, INF],
    [INF, INF, 0],
]


def _components(size, edges):
    parent = list(range(size))

    def root(vertex):
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    for u, v in edges:
        parent[root(u)] = root(v)
    return {root(vertex) for vertex in range(size)}


def test_both_algorithms_find_same_total():
    assert kruskal(GRAPH).total == prim(GRAPH).total


def test_kruskal_tree_spans_all_vertices():
    tree = kruskal(GRAPH)
    assert len(tree.edges) == len(GRAPH) - 1
    assert len(_components(len(GRAPH), tree.edges)) == 1


def test_prim_tree_spans_all_vertices():
    tree = prim(GRAPH)
    assert len(tree.edges) == len(GRAPH) - 1
    assert len(_components(len(GRAPH), tree.edges)) == 1


def test_kruskal_total_is_sum_of_edge_costs():
    tree = kruskal(GRAPH)
    assert tree.total == sum(GRAPH[u][v] for u, v in tree.edges)


def test_prim_total_is_sum_of_edge_costs():
    tree = prim(GRAPH)
    assert tree.total == sum(GRAPH[u][v] for u, v in tree.edges)


def test_triangle_worked_example():
    cost = [
        [0, 1, 3],
        [1, 0, 2],
        [3, 2, 0],
    ]
    assert kruskal(cost).edges == ((0, 1), (1, 2))
    assert kruskal(cost).total == 3
    assert prim(cost).edges == ((1, 0), (2, 1))


def test_kruskal_first_edge_is_cheapest():
    tree = kruskal(GRAPH)
    u, v = tree.edges[0]
    cheapest = min(
        weight for i, row in enumerate(GRAPH) for j, weight in enumerate(row) if i != j
    )
    assert GRAPH[u][v] == cheapest


def test_prim_starts_from_vertex_zero():
    tree = prim(GRAPH)
    assert tree.edges[0][1] == 0


def test_kruskal_disconnected_graph_rejected():
    with pytest.raises(ValueError):
        kruskal(DISCONNECTED)


def test_prim_disconnected_graph_rejected():
    with pytest.raises(ValueError):
        prim(DISCONNECTED)


def test_kruskal_single_vertex_has_empty_tree():
    tree = kruskal([[0]])
    assert tree.edges == ()
    assert tree.total == 0


def test_prim_single_vertex_has_empty_tree():
    tree = prim([[0]])
    assert tree.edges == ()
    assert tree.total == 0


def test_kruskal_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1, 0, 2]])


def test_prim_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        prim([[0, 1], [1, 0, 2]])