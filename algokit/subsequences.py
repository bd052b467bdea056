"""Subsequence and substring problems solved by dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def _lcs_table(first: Sequence[Any], second: Sequence[Any]) -> list[list[int]]:
    """Return the table whose cell ``[i][j]`` is the LCS length of the prefixes."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        row, above = table[i], table[i - 1]
        for j, b in enumerate(second, start=1):
            if a == b:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def longest_common_subsequence_length(
    first: Sequence[Any], second: Sequence[Any]
) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    return _lcs_table(first, second)[len(first)][len(second)]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    picked: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Return the length of the longest contiguous run shared by both sequences."""
    longest = 0
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0] * (len(second) + 1)
        for j, b in enumerate(second, start=1):
            if a == b:
                current[j] = previous[j - 1] + 1
                longest = max(longest, current[j])
        previous = current
    return longest


def longest_increasing_subsequence(nums: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[Any] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def longest_repeating_subsequence(text: Sequence[Any]) -> int:
    """Return the length of the longest subsequence occurring twice.

    The two occurrences may share no position of ``text``.
    """
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if text[i - 1] == text[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])
    return table[n][n]


def shortest_common_supersequence_length(
    first: Sequence[Any], second: Sequence[Any]
) -> int:
    """Return the length of the shortest sequence holding both as subsequences."""
    return len(first) + len(second) - longest_common_subsequence_length(first, second)


def shortest_common_supersequence(first: str, second: str) -> str:
    """Return one shortest string that has both strings as subsequences."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    built: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            built.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            built.append(second[j - 1])
            j -= 1
        else:
            built.append(first[i - 1])
            i -= 1
    built.extend(reversed(first[:i]))
    built.extend(reversed(second[:j]))
    return "".join(reversed(built))


def is_interleaving(first: str, second: str, combined: str) -> bool:
    """Tell whether ``combined`` is an interleaving of ``first`` and ``second``.

    Both strings must appear in ``combined`` in their own order, and every
    character of ``combined`` must come from exactly one of them.
    """
    m, n = len(first), len(second)
    if m + n != len(combined):
        return False
    ok = [[False] * (n + 1) for _ in range(m + 1)]
    ok[0][0] = True
    for j in range(1, n + 1):
        ok[0][j] = ok[0][j - 1] and second[j - 1] == combined[j - 1]
    for i in range(1, m + 1):
        ok[i][0] = ok[i - 1][0] and first[i - 1] == combined[i - 1]
        for j in range(1, n + 1):
            target = combined[i + j - 1]
            ok[i][j] = (ok[i][j - 1] and second[j - 1] == target) or (
                ok[i - 1][j] and first[i - 1] == target
            )
    return ok[m][n]