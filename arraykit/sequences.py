"""Leaders, majority votes, permutations and sign interleaving."""

from __future__ import annotations

from typing import Optional, Sequence


def leaders(arr: Sequence[int]) -> list[int]:
    """Return the elements greater than everything to their right, in order."""
    found: list[int] = []
    for value in reversed(arr):
        if not found or value > found[-1]:
            found.append(value)
    found.reverse()
    return found


def majority_element(arr: Sequence[int]) -> Optional[int]:
    """Return the element occurring more than len(arr) // 2 times, or None."""
    candidate = None
    count = 0
    for value in arr:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if count and sum(1 for value in arr if value == candidate) > len(arr) // 2:
        return candidate
    return None


def next_permutation(arr: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest."""
    items = list(arr)
    pivot = len(items) - 2
    while pivot >= 0 and items[pivot] >= items[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        swap = len(items) - 1
        while items[swap] <= items[pivot]:
            swap -= 1
        items[pivot], items[swap] = items[swap], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def rearrange_by_sign(arr: Sequence[int]) -> list[int]:
    """Interleave positives (even positions) and the rest (odd), keeping order."""
    positives = [value for value in arr if value > 0]
    negatives = [value for value in arr if value <= 0]
    if len(positives) != len(negatives):
        raise ValueError(
            f"need as many positives as negatives, got {len(positives)} and {len(negatives)}"
        )
    return [value for pair in zip(positives, negatives) for value in pair]