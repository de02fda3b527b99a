"""Heap sort, merge sort and quick sort over lists of comparable values."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def heapify(items: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``items[root]`` down so the subtree in ``items[:size]`` is a max-heap."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using a max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        heapify(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


def _merge(items: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    left = items[low : mid + 1]
    right = items[mid + 1 : high + 1]
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[low : high + 1] = merged


def _merge_sort(items: MutableSequence[Any], low: int, high: int) -> None:
    if low < high:
        mid = (low + high) // 2
        _merge_sort(items, low, mid)
        _merge_sort(items, mid + 1, high)
        _merge(items, low, mid, high)


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, by merging halves."""
    result = list(items)
    _merge_sort(result, 0, len(result) - 1)
    return result


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high+1]`` around ``items[low]`` and return its final index.

    Afterwards everything before the returned index is not greater than the
    pivot and everything after it is greater.
    """
    key = items[low]
    i = low + 1
    j = high
    while i <= j:
        while i <= high and items[i] <= key:
            i += 1
        while items[j] > key:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            items[j], items[low] = items[low], items[j]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, by partitioning."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            mid = partition(result, low, high)
            pending.append((mid + 1, high))
            pending.append((low, mid - 1))
    return result