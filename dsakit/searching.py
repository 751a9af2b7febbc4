"""Linear and binary search."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable, Optional, Sequence


def linear_search(items: Iterable[Any], target: Any) -> bool:
    """Return whether ``target`` occurs anywhere in ``items``."""
    return any(item == target for item in items)


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    index = bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None