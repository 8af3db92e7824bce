"""String algorithms: prefix function, substring search, palindromes."""

from __future__ import annotations


def lps_table(pattern: str) -> list[int]:
    """Return, for each prefix of ``pattern``, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    prefix, suffix = 0, 1
    while suffix < len(pattern):
        if pattern[prefix] == pattern[suffix]:
            lps[suffix] = prefix + 1
            prefix += 1
            suffix += 1
        elif prefix == 0:
            suffix += 1
        else:
            prefix = lps[prefix - 1]
    return lps


def longest_prefix_suffix(text: str) -> int:
    """Return the length of the longest proper prefix of ``text`` that is also its suffix."""
    table = lps_table(text)
    return table[-1] if table else 0


def find_brute_force(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack`` by direct comparison, or -1."""
    width = len(needle)
    for start in range(len(haystack) - width + 1):
        if all(haystack[start + k] == char for k, char in enumerate(needle)):
            return start
    return -1


def find(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack`` with Knuth-Morris-Pratt, or -1."""
    lps = lps_table(needle)
    first = second = 0
    while second < len(needle) and first < len(haystack):
        if haystack[first] == needle[second]:
            first += 1
            second += 1
        elif second == 0:
            first += 1
        else:
            second = lps[second - 1]
    return first - second if second == len(needle) else -1


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    start, end = 0, len(text) - 1
    while start < end:
        if text[start] != text[end]:
            return False
        start += 1
        end -= 1
    return True


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]