"""Self-balancing AVL trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "AVLNode",
    "height",
    "balance_factor",
    "rotate_left",
    "rotate_right",
    "insert",
    "preorder",
]


@dataclass(eq=False)
class AVLNode:
    """An AVL tree node carrying the height of its subtree."""

    data: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def height(node: AVLNode | None) -> int:
    """Height of the subtree, 0 for an empty one."""
    return 0 if node is None else node.height


def balance_factor(node: AVLNode | None) -> int:
    """Left height minus right height."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_left(node: AVLNode) -> AVLNode:
    """Lift the right child above ``node`` and return it."""
    pivot = node.right
    if pivot is None:
        raise ValueError("rotate_left needs a right child")
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def rotate_right(node: AVLNode) -> AVLNode:
    """Lift the left child above ``node`` and return it."""
    pivot = node.left
    if pivot is None:
        raise ValueError("rotate_right needs a left child")
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def insert(root: AVLNode | None, value: Any) -> AVLNode:
    """Insert ``value``, rebalancing on the way up; duplicates are ignored."""
    if root is None:
        return AVLNode(value)
    if value < root.data:
        root.left = insert(root.left, value)
    elif value > root.data:
        root.right = insert(root.right, value)
    else:
        return root

    _refresh(root)
    balance = balance_factor(root)
    if balance > 1:
        assert root.left is not None
        if value > root.left.data:
            root.left = rotate_left(root.left)
        return rotate_right(root)
    if balance < -1:
        assert root.right is not None
        if value < root.right.data:
            root.right = rotate_right(root.right)
        return rotate_left(root)
    return root


def preorder(root: AVLNode | None) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)