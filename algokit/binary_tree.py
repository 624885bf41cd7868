"""Binary trees read in level order: right view and per-node child listing."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = ["BinaryTreeNode", "right_view", "build_level_order", "describe_levels"]

_ABSENT = -1


@dataclass(eq=False)
class BinaryTreeNode:
    """A binary tree node."""

    data: Any
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


def right_view(root: BinaryTreeNode | None) -> list[Any]:
    """The rightmost value on each level, from the root down."""
    view: list[Any] = []

    def visit(node: BinaryTreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.data)
        visit(node.right, level + 1)
        visit(node.left, level + 1)

    visit(root, 0)
    return view


def build_level_order(values: Iterable[int]) -> BinaryTreeNode | None:
    """Build a tree from level-order values where -1 marks a missing node.

    The first value is the root; then each node in turn takes a left and a
    right value. Values left over once the tree is complete are ignored.
    """
    stream = iter(values)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("level-order input ended early") from None

    root_data = take()
    if root_data == _ABSENT:
        return None
    root = BinaryTreeNode(root_data)
    pending = deque([root])
    while pending:
        current = pending.popleft()
        left = take()
        if left != _ABSENT:
            current.left = BinaryTreeNode(left)
            pending.append(current.left)
        right = take()
        if right != _ABSENT:
            current.right = BinaryTreeNode(right)
            pending.append(current.right)
    return root


def describe_levels(root: BinaryTreeNode | None) -> list[str]:
    """One line per node in level order: ``data:L:left,R:right`` with -1 for none."""
    lines: list[str] = []
    if root is None:
        return lines
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = node.left.data if node.left is not None else _ABSENT
        right = node.right.data if node.right is not None else _ABSENT
        lines.append(f"{node.data}:L:{left},R:{right}")
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return lines