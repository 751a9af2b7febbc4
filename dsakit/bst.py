"""An unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


class BinarySearchTree(Generic[T]):
    """A binary search tree; equal items go into the right subtree."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def insert(self, item: T) -> None:
        node = _Node(item)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        parent = self._root
        while True:
            if item < parent.value:  # type: ignore[operator]
                if parent.left is None:
                    parent.left = node
                    return
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    return
                parent = parent.right

    def inorder(self) -> list[T]:
        """Items in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        """Yield items by an in-order walk."""
        pending: list[_Node[T]] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Any) -> bool:
        node = self._root
        while node is not None:
            if item == node.value:
                return True
            node = node.left if item < node.value else node.right
        return False