"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list,
leaving the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "quick_sort",
    "counting_sort",
    "radix_sort",
    "shell_sort",
]


def _check_non_negative(items: list[int], name: str) -> None:
    for value in items:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} sorts integers only, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} sorts non-negative integers only, got {value}")


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping once a pass makes no swap."""
    items = list(values)
    for step in range(len(items) - 1):
        swapped = False
        for i in range(len(items) - step - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each step."""
    items = list(values)
    for step in range(len(items) - 1):
        min_idx = min(range(step, len(items)), key=items.__getitem__)
        items[step], items[min_idx] = items[min_idx], items[step]
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element of each range as the pivot."""
    items = list(values)

    def partition(low: int, high: int) -> int:
        pivot = items[high]
        store = low
        for i in range(low, high + 1):
            if not items[i] > pivot:
                items[i], items[store] = items[store], items[i]
                store += 1
        return store - 1

    def sort_range(low: int, high: int) -> None:
        # Recurse into the smaller side and loop over the larger one.
        while low < high:
            pos = partition(low, high)
            if pos - low < high - pos:
                sort_range(low, pos - 1)
                low = pos + 1
            else:
                sort_range(pos + 1, high)
                high = pos - 1

    sort_range(0, len(items) - 1)
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items, "counting_sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers, base 10."""
    items = list(values)
    if not items:
        return []
    _check_non_negative(items, "radix_sort")
    largest = max(items)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // place) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= 10
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps starting at (n - 1) // 2 and halving each round."""
    items = list(values)
    size = len(items)
    gap = max((size - 1) // 2, 1) if size > 1 else 0
    while gap > 0:
        for current in range(gap, size):
            held = items[current]
            position = current - gap
            while position >= 0 and held < items[position]:
                items[position + gap] = items[position]
                position -= gap
            items[position + gap] = held
        gap //= 2
    return items