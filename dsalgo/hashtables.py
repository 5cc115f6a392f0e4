"""Integer hash tables: separate chaining and three open-addressing schemes."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterator


class TableFullError(Exception):
    """Raised when an open-addressing table has no free slot for a value."""


def is_prime(value: int) -> bool:
    """True when ``value`` is a prime number."""
    if value <= 1:
        return False
    return all(value % factor for factor in range(2, int(value**0.5) + 1))


class ChainedHashTable:
    """Hash table whose buckets hold their keys in ascending order."""

    def __init__(self, buckets: int = 10) -> None:
        if buckets <= 0:
            raise ValueError("a table needs at least one bucket")
        self._buckets: list[list[int]] = [[] for _ in range(buckets)]

    def _hash(self, key: int) -> int:
        return key % len(self._buckets)

    def insert(self, key: int) -> None:
        """Add a key to its bucket, keeping the bucket sorted."""
        insort(self._buckets[self._hash(key)], key)

    def search(self, key: int) -> int | None:
        """Return the key if it is stored, otherwise None."""
        return key if key in self._buckets[self._hash(key)] else None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def bucket(self, index: int) -> tuple[int, ...]:
        """The keys held in bucket ``index``, in ascending order."""
        return tuple(self._buckets[index])


class _OpenAddressingTable:
    """Common behaviour of tables that resolve collisions by probing."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[int | None] = [None] * size

    @property
    def size(self) -> int:
        return len(self._slots)

    def _hash(self, value: int) -> int:
        return value % self.size

    def _probe(self, value: int) -> Iterator[int]:
        raise NotImplementedError

    def _store(self, value: int) -> None:
        for index in self._probe(value):
            if self._slots[index] is None:
                self._slots[index] = value
                return
        raise TableFullError(f"no free slot for {value}")

    def _locate(self, value: int) -> int | None:
        for index in self._probe(value):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == value:
                return index
        return None

    def _remove(self, value: int) -> None:
        index = self._locate(value)
        if index is None:
            raise KeyError(value)
        self._slots[index] = None

    def delete(self, value: int) -> None:
        """Empty the slot holding ``value``."""
        self._remove(value)

    def _snapshot(self) -> list[int | None]:
        return list(self._slots)


class LinearProbingTable(_OpenAddressingTable):
    """Open addressing with probe sequence ``h(x) + i``."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def _probe(self, value: int) -> Iterator[int]:
        start = self._hash(value)
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, value: int) -> None:
        """Store ``value`` in the first free slot of its probe sequence."""
        self._store(value)

    def search(self, value: int) -> int | None:
        """Index of the slot holding ``value``, or None if it is absent."""
        return self._locate(value)

    def delete(self, value: int) -> None:
        """Empty the slot holding ``value``."""
        self._remove(value)

    def slots(self) -> list[int | None]:
        """Contents of every slot; None marks an empty one."""
        return self._snapshot()


class QuadraticProbingTable(_OpenAddressingTable):
    """Open addressing with probe sequence ``h(x) + i * i``."""

    def __init__(self, size: int) -> None:
        super().__init__(size)

    def _probe(self, value: int) -> Iterator[int]:
        start = self._hash(value)
        for step in range(self.size):
            yield (start + step * step) % self.size

    def insert(self, value: int) -> None:
        """Store ``value`` in the first free slot of its probe sequence."""
        self._store(value)

    def search(self, value: int) -> int | None:
        """Index of the slot holding ``value``, or None if it is absent."""
        return self._locate(value)

    def delete(self, value: int) -> None:
        """Empty the slot holding ``value``."""
        self._remove(value)

    def slots(self) -> list[int | None]:
        """Contents of every slot; None marks an empty one."""
        return self._snapshot()


class DoubleHashingTable(_OpenAddressingTable):
    """Open addressing with probe sequence ``h1(x) + i * h2(x)``.

    ``h2(x) = p - x % p`` where ``p`` is the largest prime not above the size.
    """

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self._prime = next(
            (key for key in range(size, 1, -1) if is_prime(key)), None
        )
        if self._prime is None:
            raise ValueError("double hashing needs a table size of at least 2")

    def _second_hash(self, value: int) -> int:
        return self._prime - value % self._prime

    def _probe(self, value: int) -> Iterator[int]:
        start = self._hash(value)
        stride = self._second_hash(value)
        for step in range(self.size):
            yield (start + step * stride) % self.size

    def insert(self, value: int) -> None:
        """Store ``value`` in the first free slot of its probe sequence."""
        self._store(value)

    def search(self, value: int) -> int | None:
        """Index of the slot holding ``value``, or None if it is absent."""
        return self._locate(value)

    def slots(self) -> list[int | None]:
        """Contents of every slot; None marks an empty one."""
        return self._snapshot()