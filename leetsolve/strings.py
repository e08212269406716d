"""Character-level string questions."""

from __future__ import annotations

from collections import Counter


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the same characters as ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    window_start = -1
    best = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None:
            window_start = max(window_start, previous)
        last_seen[char] = index
        best = max(best, index - window_start)
    return best