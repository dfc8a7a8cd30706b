"""Searching and selection over sequences of numbers."""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence


def is_sorted(arr: Sequence[int]) -> bool:
    """Return True if the sequence is in non-decreasing order."""
    return all(a <= b for a, b in zip(arr, arr[1:]))


def largest_element(arr: Sequence[int]) -> int:
    """Return the largest element; raise ValueError for an empty sequence."""
    if not arr:
        raise ValueError("largest_element() of an empty sequence")
    return max(arr)


def second_largest_element(arr: Sequence[int]) -> Optional[int]:
    """Return the largest value strictly below the maximum, or None if there is none."""
    if not arr:
        raise ValueError("second_largest_element() of an empty sequence")
    largest: Optional[int] = None
    second: Optional[int] = None
    for value in arr:
        if largest is None or value > largest:
            second, largest = largest, value
        elif value < largest and (second is None or value > second):
            second = value
    return second


def kth_largest_element(arr: Sequence[int], k: int) -> int:
    """Return the k-th largest element (1-based, duplicates counted)."""
    if not 1 <= k <= len(arr):
        raise ValueError(f"k must be between 1 and {len(arr)}, got {k}")
    return sorted(arr)[len(arr) - k]


def linear_search(arr: Sequence[int], num: int) -> int:
    """Return the index of the first occurrence of num, or -1 if absent."""
    return next((i for i, value in enumerate(arr) if value == num), -1)


def missing_number(arr: Sequence[int]) -> int:
    """Return the first number missing from a sorted run starting at 1."""
    for expected, value in enumerate(arr, start=1):
        if value != expected:
            return expected
    return len(arr) + 1


def single_element(arr: Sequence[int]) -> int:
    """Return the first element that occurs exactly once."""
    counts = Counter(arr)
    for value in arr:
        if counts[value] == 1:
            return value
    raise ValueError("no element occurs exactly once")