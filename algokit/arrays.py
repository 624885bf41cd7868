"""Array puzzles: pair and triple sums, mountains, subarrays, rain water, Josephus."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate, combinations

__all__ = [
    "two_sum_pairs",
    "three_sum",
    "longest_mountain",
    "max_sum_subarray",
    "smallest_subarray_sum",
    "trap_rain_water",
    "josephus",
]


def two_sum_pairs(values: Iterable[int], target: int) -> list[tuple[int, int]]:
    """All index pairs ``(i, j)`` with ``i < j`` whose values add up to ``target``."""
    items = list(values)
    return [
        (i, j)
        for i, j in combinations(range(len(items)), 2)
        if items[i] + items[j] == target
    ]


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Distinct ascending triples of values that sum to zero."""
    items = sorted(nums)
    last = len(items) - 1
    triples: list[list[int]] = []
    for i, first in enumerate(items):
        if i > 0 and first == items[i - 1]:
            continue
        lo, hi = i + 1, last
        while lo < hi:
            total = first + items[lo] + items[hi]
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                triples.append([first, items[lo], items[hi]])
                while lo < hi and items[lo] == items[lo + 1]:
                    lo += 1
                while lo < hi and items[hi] == items[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
    return triples


def longest_mountain(values: Iterable[int]) -> int:
    """Length of the longest strictly rising then strictly falling run, or 0."""
    items = list(values)
    size = len(items)
    largest = 0
    i = 1
    while i < size - 1:
        if items[i] > items[i - 1] and items[i] > items[i + 1]:
            length = 1
            j = i - 1
            while j >= 0 and items[j] < items[j + 1]:
                length += 1
                j -= 1
            i += 1
            while i < size and items[i] < items[i - 1]:
                length += 1
                i += 1
            largest = max(largest, length)
        else:
            i += 1
    return largest


def max_sum_subarray(values: Iterable[int]) -> list[int]:
    """The shortest contiguous run ending at the best end point with maximum sum."""
    items = list(values)
    if not items:
        raise ValueError("max_sum_subarray needs at least one value")
    current = best = items[0]
    end = 0
    for index, value in enumerate(items[1:], start=1):
        current = max(value, value + current)
        if current > best:
            best, end = current, index
    start = end
    remaining = best
    while True:
        remaining -= items[start]
        if remaining == 0 or start == 0:
            break
        start -= 1
    return items[start : end + 1]


def smallest_subarray_sum(values: Iterable[int]) -> int:
    """The smallest sum of any non-empty contiguous run."""
    smallest: int | None = None
    running = 0
    for value in values:
        running = running + value if running <= 0 else value
        smallest = running if smallest is None else min(smallest, running)
    if smallest is None:
        raise ValueError("smallest_subarray_sum needs at least one value")
    return smallest


def trap_rain_water(heights: Iterable[int]) -> int:
    """Units of water held between bars of the given heights."""
    items = list(heights)
    left = accumulate(items, max)
    right = list(accumulate(reversed(items), max))[::-1]
    return sum(min(lwall, rwall) - h for lwall, rwall, h in zip(left, right, items))


def josephus(n: int, k: int) -> int:
    """Survivor (numbered from 1) when every k-th of n people in a circle is removed."""
    if n < 1:
        raise ValueError(f"need at least one person, got {n}")
    if k < 1:
        raise ValueError(f"step must be positive, got {k}")
    people = list(range(1, n + 1))
    step = k - 1
    index = 0
    while len(people) > 1:
        index = (index + step) % len(people)
        del people[index]
    return people[0]