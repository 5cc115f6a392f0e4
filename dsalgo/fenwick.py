"""Binary indexed (Fenwick) tree for prefix sums."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Prefix sums over a list of integers with point updates in O(log n)."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        items = list(values)
        self._values = [0] * len(items)
        self._tree = [0] * (len(items) + 1)
        for index, value in enumerate(items):
            self.update(value, index)

    def update(self, value: int, index: int) -> None:
        """Set the element at ``index`` to ``value``."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        delta = value - self._values[index]
        self._values[index] = value
        position = index + 1
        while position < len(self._tree):
            self._tree[position] += delta
            position += position & -position

    def prefix_sum(self, count: int) -> int:
        """Sum of the first ``count`` elements."""
        if not 0 <= count <= len(self._values):
            raise IndexError(f"count {count} out of range")
        total = 0
        while count > 0:
            total += self._tree[count]
            count -= count & -count
        return total

    def tree(self) -> list[int]:
        """The internal one-based array; position 0 is always zero."""
        return list(self._tree)