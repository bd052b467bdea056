"""Array problems: intersections, duplicates, subarrays, intervals and rotations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any


def common_elements(
    first: Sequence[Any], second: Sequence[Any], third: Sequence[Any]
) -> list[Any]:
    """Return the values shared by three ascending sequences, in order.

    The three sequences are walked together, advancing whichever cursor
    points at the smallest value until one of them is exhausted.
    """
    common: list[Any] = []
    i = j = k = 0
    while i < len(first) and j < len(second) and k < len(third):
        a, b, c = first[i], second[j], third[k]
        if a == b == c:
            common.append(a)
            i += 1
            j += 1
            k += 1
        elif a < b:
            i += 1
        elif b < c:
            j += 1
        else:
            k += 1
    return common


def find_duplicate(items: Iterable[Any]) -> Any | None:
    """Return the smallest value that occurs more than once, or None."""
    ordered = sorted(items)
    return next(
        (left for left, right in zip(ordered, ordered[1:]) if left == right),
        None,
    )


def unique_paths(rows: int, cols: int) -> int:
    """Count the monotone paths from the top-left to the bottom-right of a grid.

    Each step moves one cell right or one cell down. Raises ValueError if
    either dimension is smaller than one.
    """
    if rows < 1 or cols < 1:
        raise ValueError("grid dimensions must be at least 1")
    return math.comb(rows + cols - 2, rows - 1)


def max_subarray_sum(items: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``items``.

    Raises ValueError for an empty sequence.
    """
    if not items:
        raise ValueError("max_subarray_sum of an empty sequence")
    best = running = items[0]
    for value in items[1:]:
        running += value
        if running > best:
            best = running
        if running < value:
            running = value
        if best < value:
            best = value
    return best


def kth_smallest(items: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest item, counting from 1.

    Raises IndexError if ``k`` is outside ``1..len(items)``.
    """
    ordered = sorted(items)
    if not 1 <= k <= len(ordered):
        raise IndexError(f"k={k} is outside 1..{len(ordered)}")
    return ordered[k - 1]


def longest_zero_sum_subarray(items: Iterable[int]) -> int:
    """Return the length of the longest contiguous run summing to zero."""
    first_seen: dict[int, int] = {}
    longest = 0
    total = 0
    for index, value in enumerate(items):
        total += value
        if total == 0:
            longest = max(longest, index + 1)
        if total in first_seen:
            longest = max(longest, index - first_seen[total])
        else:
            first_seen[total] = index
    return longest


def min_max(items: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(smallest, largest)``; ValueError for an empty input."""
    values = list(items)
    if not values:
        raise ValueError("min_max of an empty sequence")
    return min(values), max(values)


def merge_intervals(
    intervals: Iterable[Sequence[Any]],
) -> list[tuple[Any, Any]]:
    """Merge overlapping or touching closed intervals.

    Returns the merged intervals as ``(start, end)`` tuples in ascending
    order of start.
    """
    ordered = sorted((start, end) for start, end in intervals)
    merged: list[tuple[Any, Any]] = []
    for start, end in ordered:
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def merge_sorted_in_place(first: list[Any], second: list[Any]) -> None:
    """Redistribute two ascending lists so that together they are sorted.

    Afterwards ``first`` holds the smallest ``len(first)`` values and
    ``second`` the rest, each ascending. Both lists are modified in place.
    """
    i, j = len(first) - 1, 0
    while i >= 0 and j < len(second) and first[i] >= second[j]:
        first[i], second[j] = second[j], first[i]
        i -= 1
        j += 1
    first.sort()
    second.sort()


def negatives_first(items: Iterable[int]) -> list[int]:
    """Return the values with all negatives before the non-negatives.

    The arrangement is ascending order.
    """
    return sorted(items)


def reverse_range(items: Iterable[Any], start: int, end: int) -> list[Any]:
    """Return a copy with the items from ``start`` to ``end`` inclusive reversed.

    Nothing changes when ``start >= end``. Raises IndexError when the range
    lies outside the sequence.
    """
    result = list(items)
    if start >= end:
        return result
    if start < 0 or end >= len(result):
        raise IndexError(f"range {start}..{end} is outside 0..{len(result) - 1}")
    result[start : end + 1] = result[start : end + 1][::-1]
    return result


def rotate_right(items: Iterable[Any]) -> list[Any]:
    """Return a copy rotated one place to the right: the last item comes first."""
    result = list(items)
    if not result:
        return result
    return result[-1:] + result[:-1]