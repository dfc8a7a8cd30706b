"""Rotations, reorderings and set-like merges of number sequences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def left_rotate(arr: Sequence[int]) -> list[int]:
    """Return a copy rotated one place to the left."""
    return left_rotate_by(arr, 1)


def left_rotate_by(arr: Sequence[int], d: int) -> list[int]:
    """Return a copy rotated d places to the left."""
    items = list(arr)
    if not items:
        return items
    d %= len(items)
    return items[d:] + items[:d]


def right_rotate_by(arr: Sequence[int], d: int) -> list[int]:
    """Return a copy rotated d places to the right."""
    items = list(arr)
    if not items:
        return items
    return left_rotate_by(items, -d)


def move_zeros(arr: Sequence[int]) -> list[int]:
    """Return a copy with all zeros moved to the end, others in order."""
    non_zero = [value for value in arr if value != 0]
    return non_zero + [0] * (len(arr) - len(non_zero))


def remove_duplicates(arr: Sequence[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(arr))


def sort_012(arr: Sequence[int]) -> list[int]:
    """Return a sorted copy of a sequence holding only 0, 1 and 2."""
    counts = Counter(arr)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"values other than 0, 1, 2: {sorted(unexpected)}")
    return [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def union(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Return the sorted distinct values found in either sequence."""
    return sorted(set(arr1) | set(arr2))