"""A linked stack and a bounded FIFO queue with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedStack", "BoundedQueue", "main", "DEFAULT_CAPACITY"]

DEFAULT_CAPACITY = 50


@dataclass
class _StackNode:
    value: Any
    below: _StackNode | None = None


class LinkedStack:
    """A last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _StackNode | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _StackNode(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """The top value, left in place."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Values from the top down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size


class BoundedQueue:
    """A FIFO queue over a fixed number of slots.

    Slots freed at the front are reclaimed only once the queue empties,
    as in a linear array queue.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def insert(self, item: Any) -> None:
        if self._slots_used == self.capacity:
            raise OverflowError("queue is full")
        self._items.append(item)
        self._slots_used += 1

    def delete(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("queue empty")
        item = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return item

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


_MENU = "\n 1: insert \n\n 2: delete \n\n 3: display \n\n 4: exit \n"


def _read_line() -> str | None:
    line = sys.stdin.readline()
    return line.strip() if line else None


def main(argv: Sequence[str] | None = None) -> int:
    """Drive a bounded queue from a numbered menu read on standard input."""
    parser = argparse.ArgumentParser(description="Interactive bounded queue.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be positive")
    queue = BoundedQueue(args.capacity)

    while True:
        print(_MENU)
        print("enter your choice")
        choice = _read_line()
        if choice is None or choice == "4":
            return 0
        if choice == "1":
            print("enter the element to be inserted")
            text = _read_line()
            if text is None:
                return 0
            try:
                queue.insert(int(text))
            except ValueError:
                print("incorrect element")
            except OverflowError:
                print("queue is full")
        elif choice == "2":
            try:
                print(f"the element deleted is ={queue.delete()}")
            except IndexError:
                print("queue empty")
        elif choice == "3":
            if queue.is_empty():
                print("queue empty")
            else:
                print("the elements of queue are " + " ".join(map(str, queue)))
        else:
            print("incorrect choice")