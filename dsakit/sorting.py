"""Searching and sorting over sequences of comparable values."""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending ``items``, or -1 if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        # "<=" keeps equal values in their original order.
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Sequence[Any]) -> list:
    """Return a new ascending list of ``items``, sorted stably by merging halves."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))