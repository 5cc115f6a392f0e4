"""Breadth-first and depth-first traversal of a graph given as an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_start(adjacency: Matrix, start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise IndexError(f"vertex {start} out of range")


def _neighbours(adjacency: Matrix, vertex: int) -> list[int]:
    return [other for other, edge in enumerate(adjacency[vertex]) if edge]


def bfs(adjacency: Matrix, start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in _neighbours(adjacency, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Vertices reachable from ``start`` in depth-first order."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    stack = [iter(_neighbours(adjacency, start))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(_neighbours(adjacency, neighbour)))
                break
        else:
            stack.pop()
    return order