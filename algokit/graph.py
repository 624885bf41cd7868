"""Undirected graphs and their articulation points."""

from __future__ import annotations

from itertools import count
from typing import Iterator

__all__ = ["Graph"]


class Graph:
    """An undirected graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must not be negative, got {vertex_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` with an undirected edge."""
        self._check(u)
        self._check(v)
        self._adjacency[v].append(u)
        self._adjacency[u].append(v)

    def articulation_points(self) -> list[int]:
        """Vertices whose removal disconnects their component, in ascending order."""
        size = len(self._adjacency)
        discovery: list[int | None] = [None] * size
        low = [0] * size
        parent: list[int | None] = [None] * size
        points: set[int] = set()
        timer = count(1)

        for root in range(size):
            if discovery[root] is not None:
                continue
            discovery[root] = low[root] = next(timer)
            root_children = 0
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    seen = discovery[v]
                    if seen is None:
                        parent[v] = u
                        discovery[v] = low[v] = next(timer)
                        if u == root:
                            root_children += 1
                        stack.append((v, iter(self._adjacency[v])))
                        break
                    if v != parent[u]:
                        low[u] = min(low[u], seen)
                else:
                    stack.pop()
                    above = parent[u]
                    if stack and above is not None:
                        low[above] = min(low[above], low[u])
                        if above != root and low[u] >= discovery[above]:
                            points.add(above)
            if root_children > 1:
                points.add(root)
        return sorted(points)