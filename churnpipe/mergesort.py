"""Stable merge sort of records by descending tenure."""

from __future__ import annotations

from typing import Any, Sequence


def _merge_sorted(items: Sequence[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    left = _merge_sorted(items[:mid])
    right = _merge_sorted(items[mid:])

    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i].tenure >= right[j].tenure:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort_desc(records: list[Any]) -> None:
    """Sort ``records`` in place by ``tenure``, highest first; equal tenures keep their order."""
    records[:] = _merge_sorted(records)