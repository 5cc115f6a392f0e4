"""A fixed-capacity integer array with the classic array operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class BoundedArray:
    """A sequence of integers that may never grow beyond a fixed capacity."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} values do not fit in a capacity of {capacity}"
            )
        self.capacity = capacity
        self._items = items

    def __repr__(self) -> str:
        return f"BoundedArray({self.capacity}, {self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")

    def append(self, value: int) -> None:
        """Add a value after the last element."""
        self._ensure_room()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert a value at ``index``, shifting later elements right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._ensure_room()
        self._items.insert(index, value)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def insert_sorted(self, value: int) -> None:
        """Insert a value into an ascending array, keeping it ascending."""
        self._ensure_room()
        position = len(self._items)
        while position > 0 and self._items[position - 1] > value:
            position -= 1
        self._items.insert(position, value)

    def linear_search(self, key: int) -> int | None:
        """Return the index of the first occurrence of ``key``, or None."""
        return next(
            (index for index, item in enumerate(self._items) if item == key),
            None,
        )

    def search_move_to_front(self, key: int) -> int | None:
        """Find ``key`` and swap it with the first element.

        Returns the index at which the key was found, or None.
        """
        index = self.linear_search(key)
        if index is not None:
            items = self._items
            items[0], items[index] = items[index], items[0]
        return index

    def search_transpose(self, key: int) -> int | None:
        """Find ``key`` and swap it one place towards the front.

        Returns the index at which the key was found, or None.
        """
        index = self.linear_search(key)
        if index:
            items = self._items
            items[index - 1], items[index] = items[index], items[index - 1]
        return index

    def total(self) -> int:
        """Sum of all elements."""
        return sum(self._items)

    def _require_elements(self) -> None:
        if not self._items:
            raise ValueError("array is empty")

    def average(self) -> float:
        """Arithmetic mean of the elements."""
        self._require_elements()
        return self.total() / len(self._items)

    def maximum(self) -> int:
        """Largest element."""
        self._require_elements()
        return max(self._items)

    def minimum(self) -> int:
        """Smallest element."""
        self._require_elements()
        return min(self._items)

    def is_sorted(self) -> bool:
        """True when the elements are in non-decreasing order."""
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def reverse(self) -> None:
        """Reverse the elements in place by swapping from both ends."""
        items = self._items
        left, right = 0, len(items) - 1
        while left < right:
            items[left], items[right] = items[right], items[left]
            left += 1
            right -= 1

    def rotate_left(self) -> None:
        """Shift every element one place left; the first becomes the last."""
        if self._items:
            self._items.append(self._items.pop(0))

    def partition_signs(self) -> None:
        """Move negative values before non-negative ones, in place."""
        items = self._items
        left, right = 0, len(items) - 1
        while left < right:
            while left < right and items[left] < 0:
                left += 1
            while left < right and items[right] >= 0:
                right -= 1
            if left < right:
                items[left], items[right] = items[right], items[left]

    def first_missing(self, first: int) -> int | None:
        """First value missing from a run of consecutive integers from ``first``."""
        for index, item in enumerate(self._items):
            if item - index != first:
                return index + first
        return None


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Iterative binary search over an ascending sequence."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(values: Sequence[int], key: int) -> int | None:
    """Recursive binary search over an ascending sequence."""

    def search(low: int, high: int) -> int | None:
        if low > high:
            return None
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(values) - 1)


def backwards(values: Sequence[int]) -> Iterator[int]:
    """Yield the values from last to first."""
    yield from reversed(values)


def square_series_sum(values: Iterable[int]) -> int:
    """Sum of ``5 * x * x + 1`` over all values."""
    return sum(5 * x * x + 1 for x in values)