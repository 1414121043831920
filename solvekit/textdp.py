"""Dynamic-programming routines over strings."""

from __future__ import annotations

from collections.abc import Iterable


def is_match(text: str, pattern: str) -> bool:
    """Return whether ``pattern`` matches all of ``text``.

    In the pattern ``?`` matches any single character and ``*`` matches any
    sequence of characters, the empty one included.
    """
    if not pattern:
        return not text

    # prev[j]: does the text consumed so far match pattern[:j]?
    prev = [True]
    for ch in pattern:
        prev.append(prev[-1] and ch == "*")
    all_stars = prev[-1]

    for t in text:
        curr = [all_stars]
        for j, p in enumerate(pattern, start=1):
            if p == "?" or p == t:
                curr.append(prev[j - 1])
            elif p == "*":
                curr.append(prev[j] or curr[j - 1])
            else:
                curr.append(False)
        prev = curr
    return prev[-1]


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance (insert, delete, replace) between two words."""
    prev = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        curr = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                curr.append(prev[j - 1])
            else:
                curr.append(1 + min(curr[j - 1], prev[j], prev[j - 1]))
        prev = curr
    return prev[-1]


def num_distinct(s: str, t: str) -> int:
    """Return the number of distinct subsequences of ``s`` equal to ``t``."""
    ways = [1] + [0] * len(t)
    positions = list(enumerate(t, start=1))
    for ch in s:
        # Walk backwards so each character of ``s`` is used at most once.
        for j, target in reversed(positions):
            if target == ch:
                ways[j] += ways[j - 1]
    return ways[-1]


def min_cut(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromes.

    An empty string yields -1: zero pieces less one.
    """
    n = len(s)
    palindrome = [[False] * n for _ in range(n)]
    for i in reversed(range(n)):
        for j in range(i, n):
            if s[i] == s[j] and (j - i <= 2 or palindrome[i + 1][j - 1]):
                palindrome[i][j] = True

    pieces = [0] * (n + 1)
    for i in reversed(range(n)):
        pieces[i] = 1 + min(pieces[j + 1] for j in range(i, n) if palindrome[i][j])
    return pieces[0] - 1


def _is_predecessor(shorter: str, longer: str) -> bool:
    """Return whether ``longer`` is ``shorter`` with one character inserted."""
    if len(longer) != len(shorter) + 1:
        return False
    remaining = iter(longer)
    return all(ch in remaining for ch in shorter)


def longest_str_chain(words: Iterable[str]) -> int:
    """Return the length of the longest word chain built from ``words``.

    Each word in a chain is the previous one with a single letter inserted.
    An empty collection yields 1.
    """
    ordered = sorted(words, key=len)
    chain: list[int] = []
    for i, word in enumerate(ordered):
        best = max(
            (
                length
                for shorter, length in zip(ordered[:i], chain)
                if _is_predecessor(shorter, word)
            ),
            default=0,
        )
        chain.append(best + 1)
    return max(chain, default=1)