import pytest
from hypothesis import given
from hypothesis import strategies as st

from classic_algos.bfs import ListGraph, matrix_breadth_first


@st.composite
def edge_lists(draw):
    size = draw(st.integers(min_value=1, max_value=8))
    vertex = st.integers(min_value=0, max_value=size - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex), max_size=20))
    return size, edges


def _build(size, edges):
    graph = ListGraph(size)
    for v, u in edges:
        graph.add_edge(v, u)
    return graph


def _matrix(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for v, u in edges:
        matrix[v][u] = 1
        matrix[u][v] = 1
    return matrix


def test_matrix_follows_directed_edges():
    matrix = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    assert matrix_breadth_first(matrix, 0) == [0, 1, 2]
    assert matrix_breadth_first(matrix, 2) == [2]


def test_matrix_explores_neighbours_in_index_order():
    matrix = [[0, 0, 0, 0] for _ in range(4)]
    matrix[0][3] = 1
    matrix[0][1] = 1
    assert matrix_breadth_first(matrix, 0) == [0, 1, 3]


def test_matrix_rejects_bad_input():
    with pytest.raises(ValueError):
        matrix_breadth_first([[0, 1]], 0)
    with pytest.raises(ValueError):
        matrix_breadth_first([[0]], 1)


def test_list_graph_keeps_insertion_order():
    graph = ListGraph(3)
    graph.add_edge(0, 2)
    graph.add_edge(0, 1)
    assert graph.neighbours(0) == [2, 1]
    assert graph.neighbours(1) == [0]
    assert graph.breadth_first(0) == [0, 2, 1]


def test_list_graph_rejects_bad_vertices():
    graph = ListGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)
    with pytest.raises(ValueError):
        graph.neighbours(-1)
    with pytest.raises(ValueError):
        graph.breadth_first(5)
    with pytest.raises(ValueError):
        ListGraph(-1)


def test_even_cycle_is_bipartite():
    graph = _build(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert graph.is_bipartite(0) is True


def test_odd_cycle_is_not_bipartite():
    graph = _build(3, [(0, 1), (1, 2), (2, 0)])
    assert graph.is_bipartite(0) is False


def test_self_loop_is_not_bipartite():
    graph = _build(2, [(1, 1), (0, 1)])
    assert graph.is_bipartite(0) is False


@given(edge_lists())
def test_breadth_first_visits_exactly_the_component(data):
    size, edges = data
    graph = _build(size, edges)
    order = graph.breadth_first(0)
    assert order[0] == 0
    assert len(order) == len(set(order))
    visited = set(order)
    for vertex in order:
        assert set(graph.neighbours(vertex)) <= visited
    for position, vertex in enumerate(order[1:], start=1):
        assert any(vertex in graph.neighbours(earlier) for earlier in order[:position])


@given(edge_lists())
def test_list_and_matrix_reach_the_same_vertices(data):
    size, edges = data
    graph = _build(size, edges)
    assert set(graph.breadth_first(0)) == set(matrix_breadth_first(_matrix(size, edges), 0))


@given(edge_lists())
def test_edges_between_parities_are_bipartite(data):
    size, edges = data
    graph = _build(size, [(v, u) for v, u in edges if v % 2 != u % 2])
    assert graph.is_bipartite(0) is True