"""Unbalanced binary search trees built from plain linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Node",
    "insert",
    "search",
    "delete",
    "min_value_node",
    "inorder",
    "preorder",
    "from_preorder",
    "is_bst",
    "from_sorted",
]


@dataclass(eq=False)
class Node:
    """A binary search tree node."""

    data: Any
    left: Node | None = None
    right: Node | None = None


def insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` and return the root; equal values go to the right."""
    if root is None:
        return Node(value)
    if value < root.data:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def search(root: Node | None, key: Any) -> Node | None:
    """The node holding ``key``, or None."""
    while root is not None and root.data != key:
        root = root.left if key < root.data else root.right
    return root


def min_value_node(root: Node | None) -> Node | None:
    """The leftmost node of the tree, or None for an empty tree."""
    current = root
    while current is not None and current.left is not None:
        current = current.left
    return current


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove one node holding ``key`` and return the new root.

    A node with two children takes the value of its inorder successor.
    A missing key leaves the tree unchanged.
    """
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_value_node(root.right)
        assert successor is not None
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def inorder(root: Node | None) -> list[Any]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Node | None) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def from_preorder(preorder: Iterable[Any]) -> Node | None:
    """Rebuild a tree from its preorder listing.

    Values are consumed while they fit the bounds of the position being
    filled; once one does not fit anywhere, it and the rest are ignored.
    """
    items = list(preorder)
    position = 0

    def build(low: Any, high: Any) -> Node | None:
        nonlocal position
        if position >= len(items):
            return None
        key = items[position]
        if (low is not None and not key > low) or (high is not None and not key < high):
            return None
        node = Node(key)
        position += 1
        node.left = build(low, key)
        node.right = build(key, high)
        return node

    return build(None, None)


def is_bst(root: Node | None) -> bool:
    """True if every value lies strictly between the bounds its ancestors set."""

    def valid(node: Node | None, low: Node | None, high: Node | None) -> bool:
        if node is None:
            return True
        if low is not None and node.data <= low.data:
            return False
        if high is not None and node.data >= high.data:
            return False
        return valid(node.left, low, node) and valid(node.right, node, high)

    return valid(root, None, None)


def from_sorted(values: Sequence[Any]) -> Node | None:
    """A height-balanced tree from an ascending sequence, middle value at the root."""
    items = list(values)

    def build(start: int, end: int) -> Node | None:
        if start > end:
            return None
        mid = (start + end) // 2
        return Node(items[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(items) - 1)