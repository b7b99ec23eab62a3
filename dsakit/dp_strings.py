"""Dynamic programming over strings: palindromes, edit distance and LCS."""

from __future__ import annotations

from typing import Iterator


def _palindromic_spans(s: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, stop)`` of every palindromic substring.

    Spans come shortest first, and left to right within one length.
    """
    n = len(s)
    is_palindrome = [[False] * n for _ in range(n)]
    for i in range(n):
        is_palindrome[i][i] = True
        yield i, i + 1
    for width in range(2, n + 1):
        for i in range(n - width + 1):
            j = i + width - 1
            if s[i] == s[j] and (width == 2 or is_palindrome[i + 1][j - 1]):
                is_palindrome[i][j] = True
                yield i, j + 1


def _subsequence_table(s: str) -> list[list[int]]:
    """Return ``t`` where ``t[i][j]`` is the longest palindromic subsequence of ``s[i:j+1]``."""
    n = len(s)
    table = [[0] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        table[i][i] = 1
        for j in range(i + 1, n):
            if s[i] == s[j]:
                table[i][j] = 2 + table[i + 1][j - 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j - 1])
    return table


def count_palindromic_substrings(s: str) -> int:
    """Return how many substrings of ``s`` (counted by position) are palindromes."""
    return sum(1 for _ in _palindromic_spans(s))


def edit_distance(a: str, b: str) -> int:
    """Return the fewest insertions, deletions and substitutions turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    if not text1 or not text2:
        return 0
    previous = [0] * (len(text2) + 1)
    for char_a in text1:
        current = [0]
        for j, char_b in enumerate(text2, start=1):
            if char_a == char_b:
                current.append(1 + previous[j - 1])
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(s: str) -> int:
    """Return the length of the longest palindromic subsequence of ``s``."""
    if len(s) <= 1:
        return len(s)
    return _subsequence_table(s)[0][-1]


def longest_palindromic_substring(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on a tie."""
    if len(s) <= 1:
        return s
    start, stop = max(_palindromic_spans(s), key=lambda span: span[1] - span[0])
    return s[start:stop]


def longest_palindrome_from_subsequences(word1: str, word2: str) -> int:
    """Return the longest palindrome built from a non-empty subsequence of
    ``word1`` followed by a non-empty subsequence of ``word2``; 0 if none."""
    s = word1 + word2
    if not s:
        return 0
    table = _subsequence_table(s)
    offset = len(word1)
    return max(
        (
            table[i][offset + j]
            for i, char_a in enumerate(word1)
            for j, char_b in enumerate(word2)
            if char_a == char_b
        ),
        default=0,
    )