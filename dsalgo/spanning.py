"""Minimum-cost spanning tree of a weighted graph by Prim's method."""

from __future__ import annotations

import math
from collections.abc import Sequence

INF = math.inf


class SpanningTree:
    """Minimum spanning tree of a graph given as a symmetric cost matrix.

    A cost of ``INF`` marks a missing edge.
    """

    def __init__(self, adjacency: Sequence[Sequence[float]]) -> None:
        matrix = [list(row) for row in adjacency]
        size = len(matrix)
        if any(len(row) != size for row in matrix):
            raise ValueError("adjacency matrix must be square")
        self._matrix = matrix
        self._edges = self._build()

    def _build(self) -> list[tuple[int, int]]:
        matrix = self._matrix
        size = len(matrix)
        if size < 2:
            return []

        best = INF
        first: tuple[int, int] | None = None
        for row in range(size):
            for col in range(row + 1, size):
                if matrix[row][col] < best:
                    best = matrix[row][col]
                    first = (row, col)
        if first is None:
            raise ValueError("graph is not connected")

        u, v = first
        edges = [first]
        nearest = {
            w: (u if matrix[w][u] < matrix[w][v] else v)
            for w in range(size)
            if w not in first
        }
        while nearest:
            vertex = min(nearest, key=lambda w: matrix[w][nearest[w]])
            if matrix[vertex][nearest[vertex]] == INF:
                raise ValueError("graph is not connected")
            edges.append((vertex, nearest.pop(vertex)))
            for other, near in nearest.items():
                if matrix[other][vertex] < matrix[other][near]:
                    nearest[other] = vertex
        return edges

    def edges(self) -> list[tuple[int, int]]:
        """Tree edges in the order they were chosen."""
        return list(self._edges)

    def cost(self) -> float:
        """Total cost of the tree edges."""
        return sum(self._matrix[u][v] for u, v in self._edges)

    def describe(self) -> str:
        """One line per edge with the running total cost."""
        lines = []
        total = 0
        for u, v in self._edges:
            total += self._matrix[u][v]
            lines.append(f"[{u}] -----> [{v}]\tcost : {total}")
        return "\n".join(lines)