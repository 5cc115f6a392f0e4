"""Merging and set operations on integer sequences."""

from __future__ import annotations

from collections.abc import Iterable


def merge(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    a, b = list(first), list(second)
    i = j = 0
    result: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        else:
            result.append(b[j])
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Union of two ascending sequences; equal pairs appear once."""
    a, b = list(first), list(second)
    i = j = 0
    result: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif a[i] > b[j]:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Elements common to two ascending sequences."""
    a, b = list(first), list(second)
    i = j = 0
    result: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def difference(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Elements of the first ascending sequence absent from the second."""
    a, b = list(first), list(second)
    i = j = 0
    result: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            i += 1
            j += 1
    result.extend(a[i:])
    return result


def union_unsorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """All of ``first``, then the elements of ``second`` not yet present."""
    result = list(first)
    seen = set(result)
    for value in second:
        if value not in seen:
            result.append(value)
            seen.add(value)
    return result