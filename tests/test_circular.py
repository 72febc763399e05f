import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.circular import CircularLinkedList

ints = st.lists(st.integers(-50, 50), max_size=12)


def test_source_walkthrough():
    cll = CircularLinkedList([2, 3, 4])
    cll.insert_front(5)
    assert list(cll) == [5, 2, 3, 4]
    cll.insert_end(6)
    assert list(cll) == [5, 2, 3, 4, 6]
    cll.insert_at(5, 2)
    assert list(cll) == [5, 5, 2, 3, 4, 6]
    assert cll.delete_first() == 5
    assert list(cll) == [5, 2, 3, 4, 6]
    cll.delete_value(3)
    assert list(cll) == [5, 2, 4, 6]
    assert 4 in cll
    assert 3 not in cll


@given(ints)
def test_round_trip_and_len(values):
    cll = CircularLinkedList(values)
    assert list(cll) == values
    assert len(cll) == len(values)


def test_empty_list():
    cll = CircularLinkedList()
    assert list(cll) == []
    assert len(cll) == 0
    assert 1 not in cll


@given(ints, st.integers())
def test_insert_front_and_end(values, data):
    front = CircularLinkedList(values)
    front.insert_front(data)
    assert list(front) == [data] + values
    end = CircularLinkedList(values)
    end.insert_end(data)
    assert list(end) == values + [data]


@given(ints, st.data())
def test_insert_at_matches_list_insert(values, data):
    pos = data.draw(st.integers(1, len(values) + 1))
    cll = CircularLinkedList(values)
    cll.insert_at(99, pos)
    expected = list(values)
    expected.insert(pos - 1, 99)
    assert list(cll) == expected


def test_insert_at_end_updates_last():
    cll = CircularLinkedList([1, 2])
    cll.insert_at(7, 3)
    cll.insert_end(8)
    assert list(cll) == [1, 2, 7, 8]


@pytest.mark.parametrize("pos", [0, -1, 5, 9])
def test_insert_at_invalid_position(pos):
    cll = CircularLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        cll.insert_at(7, pos)
    assert list(cll) == [1, 2, 3]


def test_insert_at_on_empty():
    cll = CircularLinkedList()
    with pytest.raises(IndexError):
        cll.insert_at(7, 2)
    cll.insert_at(7, 1)
    assert list(cll) == [7]


@given(st.lists(st.integers(), min_size=1, max_size=10))
def test_delete_first_and_last(values):
    first = CircularLinkedList(values)
    assert first.delete_first() == values[0]
    assert list(first) == values[1:]
    last = CircularLinkedList(values)
    assert last.delete_last() == values[-1]
    assert list(last) == values[:-1]


def test_delete_from_empty_raises():
    cll = CircularLinkedList()
    with pytest.raises(IndexError):
        cll.delete_first()
    with pytest.raises(IndexError):
        cll.delete_last()
    with pytest.raises(IndexError):
        cll.delete_value(1)


@given(st.lists(st.integers(0, 5), min_size=1, max_size=10), st.integers(0, 5))
def test_delete_value_matches_list_remove(values, key):
    cll = CircularLinkedList(values)
    expected = list(values)
    if key in expected:
        expected.remove(key)
        cll.delete_value(key)
        assert list(cll) == expected
    else:
        with pytest.raises(ValueError):
            cll.delete_value(key)
        assert list(cll) == values


def test_delete_last_node_then_append():
    cll = CircularLinkedList([1, 2, 3])
    cll.delete_value(3)
    cll.insert_end(4)
    assert list(cll) == [1, 2, 4]