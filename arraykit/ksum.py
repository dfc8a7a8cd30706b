"""Distinct pairs, triplets and quadruplets adding up to a target."""

from __future__ import annotations

from typing import Iterator, Sequence


def _pairs(nums: list[int], lo: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted nums[lo:] summing to target."""
    left, right = lo, len(nums) - 1
    while left < right:
        total = nums[left] + nums[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            yield nums[left], nums[right]
            left += 1
            right -= 1
            while left < right and nums[left] == nums[left - 1]:
                left += 1
            while left < right and nums[right] == nums[right + 1]:
                right -= 1


def two_sum_pairs(arr: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return the distinct ascending pairs of elements summing to target."""
    return list(_pairs(sorted(arr), 0, target))


def three_sum(arr: Sequence[int], target: int) -> list[tuple[int, int, int]]:
    """Return the distinct ascending triplets of elements summing to target."""
    nums = sorted(arr)
    result = []
    for i, first in enumerate(nums):
        if i > 0 and first == nums[i - 1]:
            continue
        result.extend((first, *pair) for pair in _pairs(nums, i + 1, target - first))
    return result


def four_sum(arr: Sequence[int], target: int) -> list[tuple[int, int, int, int]]:
    """Return the distinct ascending quadruplets of elements summing to target."""
    nums = sorted(arr)
    result = []
    for i, first in enumerate(nums):
        if i > 0 and first == nums[i - 1]:
            continue
        for j in range(i + 1, len(nums)):
            second = nums[j]
            if j > i + 1 and second == nums[j - 1]:
                continue
            rest = target - first - second
            result.extend((first, second, *pair) for pair in _pairs(nums, j + 1, rest))
    return result