import pytest
from hypothesis import given, strategies as st

from dsalgos.singly import SinglyLinkedList

ints = st.lists(st.integers(-100, 100), max_size=30)


@given(ints)
def test_round_trip(values):
    linked = SinglyLinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = SinglyLinkedList()
    assert list(linked) == []
    assert len(linked) == 0


def test_prepend_and_append():
    linked = SinglyLinkedList([2, 3])
    linked.prepend(1)
    linked.append(4)
    assert list(linked) == [1, 2, 3, 4]


@given(ints, st.data())
def test_insert_matches_list(values, data):
    position = data.draw(st.integers(1, len(values) + 1))
    linked = SinglyLinkedList(values)
    linked.insert(position, 999)
    expected = list(values)
    expected.insert(position - 1, 999)
    assert list(linked) == expected
    assert len(linked) == len(expected)


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_out_of_range(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert(position, 7)
    assert list(linked) == [1, 2, 3]


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=30), st.data())
def test_delete_matches_list(values, data):
    position = data.draw(st.integers(1, len(values)))
    linked = SinglyLinkedList(values)
    removed = linked.delete(position)
    expected = list(values)
    assert removed == expected.pop(position - 1)
    assert list(linked) == expected


def test_delete_last_then_append_keeps_tail():
    linked = SinglyLinkedList([1, 2, 3])
    linked.delete(3)
    linked.append(9)
    assert list(linked) == [1, 2, 9]


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete(1)


@pytest.mark.parametrize("position", [0, 4])
def test_delete_out_of_range(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.delete(position)


@given(ints)
def test_sort_matches_sorted(values):
    linked = SinglyLinkedList(values)
    linked.sort()
    assert list(linked) == sorted(values)


@given(ints)
def test_reverse(values):
    linked = SinglyLinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.append(1000)
    assert list(linked) == values[::-1] + [1000]


@given(ints, ints)
def test_extend(first, second):
    linked = SinglyLinkedList(first)
    linked.extend(SinglyLinkedList(second))
    assert list(linked) == first + second
    assert len(linked) == len(first) + len(second)


def test_extend_with_itself():
    linked = SinglyLinkedList([1, 2])
    linked.extend(linked)
    assert list(linked) == [1, 2, 1, 2]


@given(ints, st.integers(-100, 100))
def test_contains(values, probe):
    assert (probe in SinglyLinkedList(values)) == (probe in values)