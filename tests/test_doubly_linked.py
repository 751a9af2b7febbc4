import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.doubly_linked import DoublyLinkedList


def assert_matches(dll, expected):
    assert list(dll) == expected
    assert list(dll.backward()) == expected[::-1]
    assert len(dll) == len(expected)


def test_construction_preserves_order():
    dll = DoublyLinkedList([1, 2, 3])
    assert_matches(dll, [1, 2, 3])


def test_empty_list():
    dll = DoublyLinkedList()
    assert_matches(dll, [])
    assert 1 not in dll


def test_contains():
    dll = DoublyLinkedList([4, 5, 6])
    assert 5 in dll
    assert 7 not in dll


def test_insert_first_and_end():
    dll = DoublyLinkedList([2, 3])
    dll.insert_first(1)
    dll.insert_end(4)
    assert_matches(dll, [1, 2, 3, 4])


def test_insert_into_empty():
    dll = DoublyLinkedList()
    dll.insert_first(7)
    assert_matches(dll, [7])
    dll2 = DoublyLinkedList()
    dll2.insert_end(7)
    assert_matches(dll2, [7])


@pytest.mark.parametrize("position", [1, 2, 3])
def test_insert_after_position(position):
    values = [10, 20, 30]
    dll = DoublyLinkedList(values)
    dll.insert_after_position(position, 99)
    expected = list(values)
    expected.insert(position, 99)
    assert_matches(dll, expected)


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_before_position(position):
    values = [10, 20, 30]
    dll = DoublyLinkedList(values)
    dll.insert_before_position(position, 99)
    assert list(dll)[position - 1] == 99
    assert list(dll.backward())[::-1] == list(dll)
    assert len(dll) == len(values) + 1


@pytest.mark.parametrize("position", [0, 4, -1])
def test_insert_after_position_out_of_range(position):
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.insert_after_position(position, 9)
    assert_matches(dll, [1, 2, 3])


def test_insert_before_position_out_of_range():
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.insert_before_position(5, 9)


@pytest.mark.parametrize("key", [1, 2, 3])
def test_insert_after_key(key):
    values = [1, 2, 3]
    dll = DoublyLinkedList(values)
    dll.insert_after_key(key, 99)
    result = list(dll)
    assert result[result.index(key) + 1] == 99
    assert list(dll.backward()) == result[::-1]


@pytest.mark.parametrize("key", [1, 2, 3])
def test_insert_before_key(key):
    values = [1, 2, 3]
    dll = DoublyLinkedList(values)
    dll.insert_before_key(key, 99)
    result = list(dll)
    assert result[result.index(key) - 1] == 99
    assert list(dll.backward()) == result[::-1]


def test_key_operations_use_first_occurrence():
    dll = DoublyLinkedList([5, 1, 5])
    dll.insert_after_key(5, 8)
    assert_matches(dll, [5, 8, 1, 5])
    dll.delete_key(5)
    assert list(dll)[-1] == 5
    assert len(dll) == 3


def test_missing_key_raises():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(ValueError):
        dll.insert_after_key(9, 0)
    with pytest.raises(ValueError):
        dll.insert_before_key(9, 0)
    with pytest.raises(ValueError):
        dll.delete_key(9)
    assert_matches(dll, [1, 2])


def test_delete_first_and_last():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.delete_first() == 1
    assert dll.delete_last() == 3
    assert_matches(dll, [2])
    assert dll.delete_last() == 2
    assert_matches(dll, [])


def test_delete_from_empty_raises():
    dll = DoublyLinkedList()
    with pytest.raises(IndexError):
        dll.delete_first()
    with pytest.raises(IndexError):
        dll.delete_last()
    with pytest.raises(IndexError):
        dll.delete_middle()


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_delete_position(position):
    values = [10, 20, 30, 40]
    dll = DoublyLinkedList(values)
    assert dll.delete_position(position) == values[position - 1]
    expected = values[: position - 1] + values[position:]
    assert_matches(dll, expected)


def test_delete_position_out_of_range():
    dll = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        dll.delete_position(2)
    with pytest.raises(IndexError):
        dll.delete_position(0)


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5, 6]])
def test_delete_middle(values):
    dll = DoublyLinkedList(values)
    removed = dll.delete_middle()
    assert removed == values[len(values) // 2]
    expected = list(values)
    expected.remove(removed)
    assert_matches(dll, expected)


@given(st.lists(st.integers()))
def test_backward_is_reverse_of_forward(values):
    dll = DoublyLinkedList(values)
    assert list(dll.backward()) == values[::-1]
    assert len(dll) == len(values)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_delete_then_reinsert_round_trip(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    dll = DoublyLinkedList(values)
    removed = dll.delete_position(position)
    dll.insert_before_position(position, removed)
    assert_matches(dll, values)