"""Array algorithms: next permutation and reverse-pair counting."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import MutableSequence, Sequence
from heapq import merge


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps around to the first (ascending order).
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot >= 0:
        swap = next(j for j in range(n - 1, pivot, -1) if nums[j] > nums[pivot])
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def _sort_and_count(values: Sequence[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return list(values), 0
    middle = len(values) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    cross = sum(len(left) - bisect_right(left, 2 * value) for value in right)
    return list(merge(left, right)), left_count + right_count + cross


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``nums[i] > 2 * nums[j]``."""
    return _sort_and_count(list(nums))[1]