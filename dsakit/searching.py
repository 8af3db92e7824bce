"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``items``, or -1 if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = start + (end - start) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first ``target`` in ``items``, or -1 if absent."""
    return next((index for index, value in enumerate(items) if value == target), -1)