"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list. The input
is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "bubble_sort_adaptive",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
]


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort, always making every pass."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_adaptive(items: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort, stopping after the first pass without swaps."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        element = result[i]
        j = i - 1
        while j >= 0 and result[j] > element:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = element
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with a stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = len(result) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], first: int, last: int) -> int:
    """Partition around values[first]; return the pivot's final index."""
    pivot = first
    i, j = first, last
    while i < j:
        while values[i] <= values[pivot] and i < last:
            i += 1
        while values[j] > values[pivot]:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[pivot], values[j] = values[j], values[pivot]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the first element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        first, last = pending.pop()
        if first < last:
            split = _partition(result, first, last)
            pending.append((first, split - 1))
            pending.append((split + 1, last))
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers with least-significant-digit radix sort.

    Raises ValueError for negative numbers.
    """
    result = list(items)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort handles non-negative integers only")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result