"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    prev: Optional["_Node[T]"] = field(default=None, repr=False)
    next: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """A chain of nodes, each linking to both its neighbours.

    Positions are counted from 1, as node numbers. Operations keyed on a
    value act on its first occurrence and raise ValueError when it is absent.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        """Node at the zero-based ``index``, which must be in range."""
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def _link_before(self, successor: Optional[_Node[T]], value: T) -> None:
        """Insert ``value`` before ``successor``; None means at the end."""
        predecessor = self._tail if successor is None else successor.prev
        node = _Node(value, predecessor, successor)
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        if successor is None:
            self._tail = node
        else:
            successor.prev = node
        self._size += 1

    def _insert_at(self, index: int, value: T) -> None:
        successor = None if index == self._size else self._node_at(index)
        self._link_before(successor, value)

    def _unlink(self, node: _Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def _find(self, key: Any) -> _Node[T]:
        for node in self._nodes():
            if node.value == key:
                return node
        raise ValueError(f"{key!r} is not present in the list")

    def _check_position(self, position: int, last: int) -> None:
        if not 1 <= position <= last:
            raise IndexError(f"node {position} is out of range 1..{last}")

    def _require_nonempty(self) -> None:
        if self._head is None:
            raise IndexError("delete from an empty list")

    def insert_first(self, value: T) -> None:
        """Make ``value`` the new first node."""
        self._link_before(self._head, value)

    def insert_end(self, value: T) -> None:
        """Append ``value`` as the last node."""
        self._link_before(None, value)

    def insert_after_position(self, position: int, value: T) -> None:
        """Insert ``value`` right after node number ``position``."""
        self._check_position(position, self._size)
        self._insert_at(position, value)

    def insert_before_position(self, position: int, value: T) -> None:
        """Insert ``value`` so that it becomes node number ``position``."""
        self._check_position(position, self._size + 1)
        self._insert_at(position - 1, value)

    def insert_after_key(self, key: Any, value: T) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        self._link_before(self._find(key).next, value)

    def insert_before_key(self, key: Any, value: T) -> None:
        """Insert ``value`` right before the first node holding ``key``."""
        self._link_before(self._find(key), value)

    def delete_first(self) -> T:
        """Remove and return the first value."""
        self._require_nonempty()
        assert self._head is not None
        return self._unlink(self._head)

    def delete_last(self) -> T:
        """Remove and return the last value."""
        self._require_nonempty()
        assert self._tail is not None
        return self._unlink(self._tail)

    def delete_position(self, position: int) -> T:
        """Remove and return the value of node number ``position``."""
        self._check_position(position, self._size)
        return self._unlink(self._node_at(position - 1))

    def delete_key(self, key: Any) -> T:
        """Remove and return the first value equal to ``key``."""
        return self._unlink(self._find(key))

    def delete_middle(self) -> T:
        """Remove and return the node that follows the first half of the nodes."""
        self._require_nonempty()
        return self._unlink(self._node_at(self._size // 2))

    def backward(self) -> Iterator[T]:
        """Yield the values from the last node to the first."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: Any) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"