"""Classic comparison sorts operating in place on mutable sequences."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, stopping early once a pass makes no swap."""
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly moving the minimum forward."""
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    items[:] = _merge_sorted(list(items))


def partition(items: MutableSequence[Any], start: int, end: int) -> int:
    """Partition ``items[start:end + 1]`` around ``items[end]``; return the pivot's final index."""
    pivot = items[end]
    pos = start
    for i in range(start, end + 1):
        if items[i] <= pivot:
            items[i], items[pos] = items[pos], items[i]
            pos += 1
    return pos - 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort using the last element as pivot."""
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))