"""Small numeric and sequence routines built on simple recurrences."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

_VOWELS = frozenset("aeiou")


def _require_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers, got {n}")


def nth_stair(n: int) -> int:
    """Return the number of ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 1:
        raise ValueError(f"number of stairs must be at least 1, got {n}")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def count_down(n: int) -> list[int]:
    """Return ``n, n-1, ..., 1``; empty when ``n`` is not positive."""
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return ``1, 2, ..., n``; empty when ``n`` is not positive."""
    return list(range(1, n + 1))


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    _require_non_negative(n, "factorial")
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    _require_non_negative(n, "fibonacci")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    _require_non_negative(n, "sum of the first n numbers")
    return sum(range(1, n + 1))


def sum_of_squares(n: int) -> int:
    """Return ``1² + 2² + ... + n²``."""
    _require_non_negative(n, "sum of squares")
    return sum(k * k for k in range(1, n + 1))


def array_sum(items: Sequence[Any]) -> Any:
    """Return the sum of ``items`` (0 for an empty sequence)."""
    return sum(items)


def min_element(items: Sequence[Any]) -> Any:
    """Return the smallest element of a non-empty sequence."""
    if not items:
        raise ValueError("min_element() of an empty sequence")
    return min(items)


def max_element(items: Sequence[Any]) -> Any:
    """Return the largest element of a non-empty sequence."""
    if not items:
        raise ValueError("max_element() of an empty sequence")
    return max(items)


def reversed_items(items: Sequence[Any]) -> list[Any]:
    """Return the elements of ``items`` from last to first."""
    return list(reversed(items))


def count_vowels(text: str) -> int:
    """Count the lowercase vowels ``a e i o u`` in ``text``."""
    return sum(1 for char in text if char in _VOWELS)


def to_upper(text: str) -> str:
    """Turn every lowercase ASCII letter of ``text`` into its capital."""
    return "".join(
        chr(ord(char) - ord("a") + ord("A")) if "a" <= char <= "z" else char
        for char in text
    )