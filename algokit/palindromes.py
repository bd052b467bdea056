"""Palindromic subsequences, edits and partitions."""

from __future__ import annotations

from algokit.subsequences import longest_common_subsequence_length


def longest_palindromic_subsequence(text: str) -> int:
    """Return the length of the longest palindromic subsequence of ``text``."""
    return longest_common_subsequence_length(text, text[::-1])


def min_deletions_to_palindrome(text: str) -> int:
    """Return the fewest characters to delete so that ``text`` reads the same reversed."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: str) -> int:
    """Return the fewest characters to insert so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_palindrome_cuts(text: str) -> int:
    """Return the fewest cuts splitting ``text`` into palindromic pieces."""
    length = len(text)
    if length == 0:
        return 0
    # is_pal[i][j]: text[i..j] inclusive is a palindrome, filled by gap.
    is_pal = [[False] * length for _ in range(length)]
    for gap in range(length):
        for i in range(length - gap):
            j = i + gap
            if gap == 0:
                is_pal[i][j] = True
            elif gap == 1:
                is_pal[i][j] = text[i] == text[j]
            else:
                is_pal[i][j] = text[i] == text[j] and is_pal[i + 1][j - 1]

    cuts = [0] * length
    for j in range(1, length):
        if is_pal[0][j]:
            cuts[j] = 0
        else:
            cuts[j] = 1 + min(cuts[i - 1] for i in range(1, j + 1) if is_pal[i][j])
    return cuts[-1]