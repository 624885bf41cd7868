"""Trees with any number of children per node."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["TreeNode", "parse_level_order", "are_identical", "max_node"]


@dataclass(eq=False)
class TreeNode:
    """A tree node with an ordered list of children."""

    data: Any
    children: list[TreeNode] = field(default_factory=list)


def parse_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from level-order input.

    The first value is the root; then each node in turn gives its child
    count followed by that many child values.
    """
    stream = iter(values)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("level-order input ended early") from None

    root = TreeNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        child_count = take()
        if child_count < 0:
            raise ValueError(f"child count must not be negative, got {child_count}")
        for _ in range(child_count):
            child = TreeNode(take())
            node.children.append(child)
            pending.append(child)
    return root


def are_identical(first: TreeNode | None, second: TreeNode | None) -> bool:
    """True if both trees have the same shape and the same values in place."""
    if first is None or second is None:
        return first is second
    if first.data != second.data or len(first.children) != len(second.children):
        return False
    return all(are_identical(a, b) for a, b in zip(first.children, second.children))


def max_node(root: TreeNode | None) -> TreeNode | None:
    """The node with the largest value; the first found wins a tie."""
    if root is None:
        return None
    best = root
    for child in root.children:
        candidate = max_node(child)
        if candidate is not None and candidate.data > best.data:
            best = candidate
    return best