"""Enumeration of parenthesisations, permutations and subsets, and subset-sum counts."""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Iterator, Sequence
from typing import Any


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in lexicographic order."""

    def extend(prefix: str, opened: int, closed: int) -> Iterator[str]:
        if opened + closed == 2 * n:
            yield prefix
            return
        if opened < n:
            yield from extend(prefix + "(", opened + 1, closed)
        if closed < opened:
            yield from extend(prefix + ")", opened, closed + 1)

    return list(extend("", 0, 0))


def permutations(items: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``items``, in order of the positions chosen."""
    return [list(order) for order in itertools.permutations(items)]


def permutations_by_swap(items: Sequence[Any]) -> list[list[Any]]:
    """Return every ordering of ``items`` generated by swapping each element into place."""
    work = list(items)
    result: list[list[Any]] = []

    def place(index: int) -> None:
        if index == len(work):
            result.append(list(work))
            return
        for i in range(index, len(work)):
            work[i], work[index] = work[index], work[i]
            place(index + 1)
            work[i], work[index] = work[index], work[i]

    place(0)
    return result


def _choices(items: Sequence[Any]) -> Iterator[list[Any]]:
    """Yield every subsequence, leaving an element out before taking it in."""
    if not items:
        yield []
        return
    first = items[0]
    rest = list(_choices(items[1:]))
    yield from rest
    for tail in rest:
        yield [first, *tail]


def subsequences(items: Sequence[Any]) -> list[list[Any]]:
    """Return all ``2**len(items)`` subsequences of ``items``."""
    return list(_choices(list(items)))


def subsets(text: str) -> list[str]:
    """Return all subsequences of the characters of ``text`` as strings."""
    return ["".join(chars) for chars in _choices(text)]


def subset_sums(items: Sequence[Any]) -> list[Any]:
    """Return the sum of each subsequence, in the order of :func:`subsequences`."""
    return [sum(chosen) for chosen in _choices(list(items))]


def count_subsets_with_sum(items: Sequence[int], target: int) -> int:
    """Count the subsets of ``items`` (by position) whose sum is ``target``."""
    ways: Counter[int] = Counter({0: 1})
    for value in items:
        shifted = Counter({total + value: count for total, count in ways.items()})
        ways.update(shifted)
    return ways[target]


def has_target_sum(items: Sequence[int], target: int) -> bool:
    """Tell whether some subset of ``items`` sums to ``target``, abandoning branches that overshoot."""

    def search(index: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if index == len(items) or remaining < 0:
            return False
        return search(index + 1, remaining) or search(index + 1, remaining - items[index])

    return search(0, target)


def count_combinations_with_repetition(items: Sequence[int], target: int) -> int:
    """Count the multisets drawn from ``items`` (each reusable) whose sum is ``target``."""
    if any(value <= 0 for value in items):
        raise ValueError("items must all be positive when elements may repeat")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for value in items:
        for total in range(value, target + 1):
            ways[total] += ways[total - value]
    return ways[target]