"""String matching built on the prefix function."""

from __future__ import annotations


def prefix_function(text: str) -> list[int]:
    """Return, for each prefix of ``text``, the length of its longest proper border."""
    lps = [0] * len(text)
    for i in range(1, len(text)):
        j = lps[i - 1]
        while j > 0 and text[i] != text[j]:
            j = lps[j - 1]
        if text[i] == text[j]:
            j += 1
        lps[i] = j
    return lps


def borders(text: str) -> list[int]:
    """Return the lengths of all proper borders of ``text`` in increasing order."""
    if not text:
        return []
    lps = prefix_function(text)
    found = []
    length = lps[-1]
    while length > 0:
        found.append(length)
        length = lps[length - 1]
    return found[::-1]


def count_occurrences(text: str, pattern: str) -> int:
    """Return how many times ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matched = 0
    count = 0
    for ch in text:
        while matched and ch != pattern[matched]:
            matched = lps[matched - 1]
        if ch == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            count += 1
            matched = lps[matched - 1]
    return count