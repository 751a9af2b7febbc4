"""Bounded, unbounded and two-ended stacks."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack(Generic[T]):
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack(Generic[T]):
    """An unbounded stack; initial values are pushed in order."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class TwinStack(Generic[T]):
    """Two stacks growing toward each other inside one shared capacity."""

    def __init__(self, capacity: int = 9) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._a: list[T] = []
        self._b: list[T] = []

    def _check_room(self) -> None:
        if len(self._a) + len(self._b) >= self.capacity:
            raise StackOverflowError("stack is full")

    def push_a(self, value: T) -> None:
        self._check_room()
        self._a.append(value)

    def push_b(self, value: T) -> None:
        self._check_room()
        self._b.append(value)

    def pop_a(self) -> T:
        if not self._a:
            raise StackUnderflowError("stack A is empty")
        return self._a.pop()

    def pop_b(self) -> T:
        if not self._b:
            raise StackUnderflowError("stack B is empty")
        return self._b.pop()

    def stack_a(self) -> list[T]:
        """Contents of stack A, top first."""
        return self._a[::-1]

    def stack_b(self) -> list[T]:
        """Contents of stack B, top first."""
        return self._b[::-1]


def stack_until_nonpositive(values: Iterable[int]) -> LinkedStack[int]:
    """Push values until the first one that is not positive, which is dropped."""
    stack: LinkedStack[int] = LinkedStack()
    for value in values:
        if value <= 0:
            break
        stack.push(value)
    return stack