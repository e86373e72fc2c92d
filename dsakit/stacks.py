"""Stack-based algorithms: bracket matching, nearest smaller and greater elements."""

from __future__ import annotations

from collections.abc import Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` consists only of correctly nested brackets."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS and stack and stack[-1] == _CLOSERS[ch]:
            stack.pop()
        else:
            return False
    return not stack


def previous_smaller_indices(heights: Sequence[int]) -> list[int]:
    """For each position, the index of the nearest strictly smaller value to the left, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def next_smaller_indices(heights: Sequence[int]) -> list[int]:
    """For each position, the index of the nearest strictly smaller value to the right, or ``len(heights)``."""
    n = len(heights)
    result = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    previous = previous_smaller_indices(heights)
    following = next_smaller_indices(heights)
    return max(
        (
            height * (right - left - 1)
            for height, left, right in zip(heights, previous, following)
        ),
        default=0,
    )


def next_greater(nums: Sequence[int]) -> list[int]:
    """For each value, the first strictly greater value to its right, or -1."""
    result = [-1] * len(nums)
    stack: list[int] = []
    for i in reversed(range(len(nums))):
        value = nums[i]
        while stack and stack[-1] <= value:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Look up, for each value of ``nums1``, its next greater element within ``nums2``.

    Values absent from ``nums2`` map to -1; for repeated values in ``nums2``
    the last occurrence wins.
    """
    greater = dict(zip(nums2, next_greater(nums2)))
    return [greater.get(value, -1) for value in nums1]


def next_greater_elements_circular(nums: Sequence[int]) -> list[int]:
    """Like :func:`next_greater`, but the search wraps around to the start."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        index = i % n
        value = nums[index]
        while stack and stack[-1] <= value:
            stack.pop()
        result[index] = stack[-1] if stack else -1
        stack.append(value)
    return result