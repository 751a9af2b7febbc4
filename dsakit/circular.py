"""Circular singly and doubly linked lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _SingleNode(Generic[T]):
    value: T
    next: Optional["_SingleNode[T]"] = field(default=None, repr=False)


@dataclass(eq=False)
class _DoubleNode(Generic[T]):
    value: T
    prev: Optional["_DoubleNode[T]"] = field(default=None, repr=False)
    next: Optional["_DoubleNode[T]"] = field(default=None, repr=False)


class CircularSinglyLinkedList(Generic[T]):
    """A ring of nodes in which the last node links back to the first.

    Positions are counted from 1, as node numbers. Operations keyed on a
    value act on its first occurrence and raise ValueError when it is absent.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: Optional[_SingleNode[T]] = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[_SingleNode[T]]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node
            node = node.next

    def _node_at(self, index: int) -> _SingleNode[T]:
        """Node at the zero-based ``index``, which must be in range."""
        assert self._tail is not None
        node = self._tail.next
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _insert_at(self, index: int, value: T) -> None:
        node = _SingleNode(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            predecessor = self._tail if index == 0 else self._node_at(index - 1)
            node.next = predecessor.next
            predecessor.next = node
            if index == self._size:
                self._tail = node
        self._size += 1

    def _index_of(self, key: Any) -> int:
        for index, node in enumerate(self._nodes()):
            if node.value == key:
                return index
        raise ValueError(f"{key!r} is not present in the list")

    def _check_position(self, position: int, last: int) -> None:
        if not 1 <= position <= last:
            raise IndexError(f"node {position} is out of range 1..{last}")

    def insert_first(self, value: T) -> None:
        """Make ``value`` the new first node."""
        self._insert_at(0, value)

    def insert_end(self, value: T) -> None:
        """Append ``value`` as the last node, linking it back to the first."""
        self._insert_at(self._size, value)

    def insert_after_key(self, key: Any, value: T) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        self._insert_at(self._index_of(key) + 1, value)

    def insert_before_key(self, key: Any, value: T) -> None:
        """Insert ``value`` right before the first node holding ``key``."""
        self._insert_at(self._index_of(key), value)

    def insert_after_position(self, position: int, value: T) -> None:
        """Insert ``value`` right after node number ``position``."""
        self._check_position(position, self._size)
        self._insert_at(position, value)

    def insert_before_position(self, position: int, value: T) -> None:
        """Insert ``value`` so that it becomes node number ``position``."""
        self._check_position(position, self._size + 1)
        self._insert_at(position - 1, value)

    def __contains__(self, value: Any) -> bool:
        return any(node.value == value for node in self._nodes())

    def __iter__(self) -> Iterator[T]:
        """Iterate once around the ring, starting at the first node."""
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularSinglyLinkedList({list(self)!r})"


class CircularDoublyLinkedList(Generic[T]):
    """A ring of nodes linked both ways; the first and last nodes are joined."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_DoubleNode[T]] = None
        self._size = 0
        for value in values:
            self.insert_end(value)

    def _append(self, value: T) -> _DoubleNode[T]:
        node = _DoubleNode(value)
        if self._head is None:
            node.prev = node.next = node
            self._head = node
        else:
            last = self._head.prev
            assert last is not None
            node.prev = last
            node.next = self._head
            last.next = node
            self._head.prev = node
        self._size += 1
        return node

    def _walk(self, forward: bool) -> Iterator[T]:
        if self._head is None:
            return
        node = self._head if forward else self._head.prev
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next if forward else node.prev

    def insert_first(self, value: T) -> None:
        """Make ``value`` the new first node."""
        self._head = self._append(value)

    def insert_end(self, value: T) -> None:
        """Append ``value`` as the last node, just before the first."""
        self._append(value)

    def backward(self) -> Iterator[T]:
        """Yield the values once around the ring, from the last to the first."""
        return self._walk(forward=False)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self._walk(forward=True))

    def __iter__(self) -> Iterator[T]:
        """Iterate once around the ring, starting at the first node."""
        return self._walk(forward=True)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"