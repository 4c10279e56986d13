"""In-place merge sort and quick sort over mutable sequences."""

from __future__ import annotations

import heapq
from typing import Any, MutableSequence


def merge_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with a stable top-down merge sort."""
    _merge_sort(values, 0, len(values))


def _merge_sort(values: MutableSequence[Any], lo: int, hi: int) -> None:
    size = hi - lo
    if size <= 1:
        return
    mid = lo + size // 2
    _merge_sort(values, lo, mid)
    _merge_sort(values, mid, hi)
    _merge(values, lo, mid, hi)


def _merge(values: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    # heapq.merge is stable: on ties the element from the left run comes first.
    values[lo:hi] = list(heapq.merge(values[lo:mid], values[mid:hi]))


def merge(values: MutableSequence[Any], left_size: int) -> None:
    """Merge the sorted runs ``values[:left_size]`` and ``values[left_size:]`` in place."""
    if not 0 <= left_size <= len(values):
        raise ValueError(f"left_size {left_size} is outside 0..{len(values)}")
    _merge(values, 0, left_size, len(values))


def quick_sort(values: MutableSequence[Any], low: int, high: int) -> None:
    """Sort ``values[low:high + 1]`` in place using Lomuto partitioning."""
    if low < high:
        pivot = partition(values, low, high)
        quick_sort(values, low, pivot - 1)
        quick_sort(values, pivot + 1, high)


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition around ``values[high]`` and return the pivot's final index."""
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1