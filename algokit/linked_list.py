"""Singly linked lists: building, cycle detection and k-way merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count
from typing import Any

__all__ = ["ListNode", "build_list", "to_list", "append", "has_cycle", "merge_k_lists"]


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Link the values in order; None for no values."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """The values of an acyclic list in order."""
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def append(head: ListNode | None, value: Any) -> ListNode:
    """Add ``value`` at the tail and return the head of the list."""
    node = ListNode(value)
    if head is None:
        return node
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Floyd's tortoise and hare: True if following ``next`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Relink several ascending lists into one ascending list."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    sentinel = ListNode(None)
    tail = sentinel
    while heap:
        _, _, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
        tail.next = node
        tail = node
    return sentinel.next