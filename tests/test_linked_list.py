import pytest
from hypothesis import given
from hypothesis import strategies as st

from classic_algos.linked_list import LinkedList


def _driver_list():
    linked = LinkedList()
    for value in (20, 4, 15, 35):
        linked.push(value)
    return linked


def test_push_adds_to_front():
    assert list(_driver_list()) == [35, 15, 4, 20]
    assert len(_driver_list()) == 4


def test_fourth_from_last_is_head():
    assert _driver_list().nth_from_last(4) == 35


def test_last_is_first_pushed():
    assert _driver_list().nth_from_last(1) == 20


def test_position_beyond_length_raises():
    with pytest.raises(IndexError):
        _driver_list().nth_from_last(5)


def test_non_positive_position_raises():
    with pytest.raises(IndexError):
        _driver_list().nth_from_last(0)


def test_empty_list_raises():
    with pytest.raises(IndexError):
        LinkedList().nth_from_last(1)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_nth_from_last_matches_push_order(pushed, data):
    linked = LinkedList()
    for value in pushed:
        linked.push(value)
    n = data.draw(st.integers(min_value=1, max_value=len(pushed)))
    assert linked.nth_from_last(n) == pushed[n - 1]
    assert list(linked) == pushed[::-1]