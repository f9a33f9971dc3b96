import pytest
from hypothesis import given
from hypothesis import strategies as st

from classic_algos.spanning_tree import format_mst, prim_mst

EXAMPLE = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


@st.composite
def connected_graphs(draw):
    size = draw(st.integers(min_value=1, max_value=7))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            if j == i + 1:
                weight = draw(st.integers(min_value=1, max_value=30))
            else:
                weight = draw(st.integers(min_value=0, max_value=30))
            matrix[i][j] = matrix[j][i] = weight
    return matrix


def _total(parents, matrix):
    return sum(matrix[v][p] for v, p in enumerate(parents) if p is not None)


def test_worked_example_parents():
    assert prim_mst(EXAMPLE) == [None, 0, 1, 0, 1]


def test_worked_example_weight():
    assert _total(prim_mst(EXAMPLE), EXAMPLE) == 16


def test_format_worked_example():
    assert format_mst(prim_mst(EXAMPLE), EXAMPLE) == (
        "Edge \tWeight\n0 - 1 \t2 \n1 - 2 \t3 \n0 - 3 \t6 \n1 - 4 \t5 \n"
    )


def test_single_vertex_and_empty():
    assert prim_mst([[0]]) == [None]
    assert prim_mst([]) == []
    assert format_mst([None], [[0]]) == "Edge \tWeight\n"


def test_disconnected_graph_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 0], [0, 0]])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1]])


def test_format_rejects_missing_parent():
    with pytest.raises(ValueError):
        format_mst([None, None], [[0, 1], [1, 0]])


@given(connected_graphs())
def test_parents_form_a_tree_of_real_edges(matrix):
    parents = prim_mst(matrix)
    assert parents[0] is None
    for vertex in range(1, len(matrix)):
        parent = parents[vertex]
        assert parent is not None
        assert matrix[vertex][parent] != 0
        steps = 0
        current = vertex
        while current != 0:
            current = parents[current]
            steps += 1
            assert steps < len(matrix)


@given(connected_graphs())
def test_weight_no_more_than_the_path_tree(matrix):
    parents = prim_mst(matrix)
    path_weight = sum(matrix[i][i + 1] for i in range(len(matrix) - 1))
    assert _total(parents, matrix) <= path_weight


@given(connected_graphs(), st.randoms(use_true_random=False))
def test_weight_is_independent_of_labelling(matrix, rng):
    order = list(range(len(matrix)))
    rng.shuffle(order)
    relabelled = [[matrix[order[i]][order[j]] for j in order and range(len(order))] for i in range(len(order))]
    assert _total(prim_mst(relabelled), relabelled) == _total(prim_mst(matrix), matrix)


@given(connected_graphs())
def test_format_has_one_line_per_edge(matrix):
    text = format_mst(prim_mst(matrix), matrix)
    assert len(text.splitlines()) == len(matrix)