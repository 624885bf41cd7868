"""Linear and binary search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["linear_search", "binary_search"]


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None