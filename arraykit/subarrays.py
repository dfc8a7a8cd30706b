"""Questions about contiguous runs and subarrays of number sequences."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Sequence


def longest_subarray_with_sum(arr: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous subarray summing to k, or 0."""
    first_seen = {0: 0}
    best = 0
    total = 0
    for end, value in enumerate(arr, start=1):
        total += value
        start = first_seen.get(total - k)
        if start is not None:
            best = max(best, end - start)
        first_seen.setdefault(total, end)
    return best


def max_consecutive_ones(arr: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(arr) if key == 1),
        default=0,
    )


def count_subarrays_with_sum(nums: Sequence[int], k: int) -> int:
    """Return how many contiguous subarrays sum to k."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in nums:
        total += value
        count += seen[total - k]
        seen[total] += 1
    return count


def max_subarray(arr: Sequence[int]) -> tuple[int, list[int]]:
    """Return the largest subarray sum and the earliest subarray reaching it."""
    if not arr:
        raise ValueError("max_subarray() of an empty sequence")
    best = current = arr[0]
    start = end = candidate = 0
    for i, value in enumerate(arr[1:], start=1):
        if value > current + value:
            current = value
            candidate = i
        else:
            current += value
        if current > best:
            best = current
            start, end = candidate, i
    return best, list(arr[start:end + 1])


def longest_consecutive_sequence(arr: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    values = set(arr)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        length = 1
        while value + length in values:
            length += 1
        longest = max(longest, length)
    return longest


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sale, or 0."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best