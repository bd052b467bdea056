"""Comparison sorts, a three-way partition and a binary min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def exchange_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, swapping each position with any smaller later item."""
    result = list(items)
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            if result[i] > result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy built by inserting each item into a sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
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
    """Return a stable sorted copy by recursive halving and merging."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def sort_012(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of a sequence holding only 0, 1 and 2.

    Uses a single three-way partitioning pass. Raises ValueError for any
    other value.
    """
    result = list(items)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        value = result[mid]
        if value == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        elif value == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            raise ValueError(f"value {value!r} is not 0, 1 or 2")
    return result


class MinHeap:
    """A binary min-heap built from an initial collection of items."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = list(items)
        heapq.heapify(self._items)

    def extract_min(self) -> Any:
        """Remove and return the smallest item; IndexError if empty."""
        if not self._items:
            raise IndexError("extract_min from an empty heap")
        return heapq.heappop(self._items)

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy by draining a min-heap."""
    heap = MinHeap(items)
    return [heap.extract_min() for _ in range(len(heap))]