"""Binary heaps: a max-heap container and in-place heap building and sorting."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator

_Order = Callable[[int, int], bool]


def _sift_up(items: list[int], index: int, above: _Order) -> None:
    value = items[index]
    while index > 0:
        parent = (index - 1) // 2
        if not above(value, items[parent]):
            break
        items[index] = items[parent]
        index = parent
    items[index] = value


def _sift_down(items: list[int], index: int, end: int, above: _Order) -> None:
    while True:
        child = 2 * index + 1
        if child >= end:
            return
        if child + 1 < end and above(items[child + 1], items[child]):
            child += 1
        if not above(items[child], items[index]):
            return
        items[index], items[child] = items[child], items[index]
        index = child


def _build_by_insertion(values: Iterable[int], above: _Order) -> list[int]:
    items = list(values)
    for index in range(1, len(items)):
        _sift_up(items, index, above)
    return items


def _sort_by_deletion(values: Iterable[int], above: _Order) -> list[int]:
    items = _build_by_insertion(values, above)
    for last in range(len(items) - 1, 0, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, 0, last, above)
    return items


class MaxHeap:
    """A priority queue that always yields its largest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Add a value."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1, operator.gt)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            _sift_down(items, 0, len(items), operator.gt)
        return top

    def peek(self) -> int:
        """The largest value, left in place."""
        if not self._items:
            raise IndexError("peek into an empty heap")
        return self._items[0]

    def items(self) -> list[int]:
        """The heap array in level order."""
        return list(self._items)

    def drain(self) -> Iterator[int]:
        """Pop every value, largest first."""
        while self._items:
            yield self.pop()

    def __len__(self) -> int:
        return len(self._items)


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Arrange values as a max-heap by inserting them one at a time."""
    return _build_by_insertion(values, operator.gt)


def build_min_heap(values: Iterable[int]) -> list[int]:
    """Arrange values as a min-heap by inserting them one at a time."""
    return _build_by_insertion(values, operator.lt)


def heapify(values: Iterable[int]) -> list[int]:
    """Arrange values as a max-heap by sifting down from the last parent."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, index, len(items), operator.gt)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Values in ascending order, sorted through a max-heap."""
    return _sort_by_deletion(values, operator.gt)


def heap_sort_descending(values: Iterable[int]) -> list[int]:
    """Values in descending order, sorted through a min-heap."""
    return _sort_by_deletion(values, operator.lt)