"""Dynamic-programming problems on grids, stairs, triangles, houses and coins."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an ``m`` x ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError(f"grid dimensions must be positive, got {m}x{n}")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths through ``grid`` avoiding cells equal to 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    above = [0] * len(grid[0])
    for i, cells in enumerate(grid):
        row: list[int] = []
        left = 0
        for j, (cell, up) in enumerate(zip(cells, above)):
            if cell == 1:
                count = 0
            elif i == 0 and j == 0:
                count = 1
            else:
                count = up + left
            row.append(count)
            left = count
        above = row
    return above[-1]


def climb_stairs(n: int) -> int:
    """Count ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError(f"number of stairs must be non-negative, got {n}")
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the minimum top-to-bottom path sum through a triangle."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [
            value + min(down, diag)
            for value, down, diag in zip(row, best, best[1:])
        ]
    return best[0]


def rob(nums: Sequence[int]) -> int:
    """Return the most that can be robbed from houses in a row without taking neighbours."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(value + before, best)
    return best


def _rob_span(nums: Sequence[int]) -> int:
    take_or_skip, skipped = 0, 0
    for value in nums:
        take_or_skip, skipped = max(value + skipped, take_or_skip), take_or_skip
    return take_or_skip


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_span(nums[:-1]), _rob_span(nums[1:]))


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 when it cannot be made."""
    if not coins:
        raise ValueError("at least one coin denomination is required")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin denominations must be positive")
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] >= unreachable else best[amount]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting at step 0 or step 1."""
    from_next, from_after = 0, 0
    for step_cost in reversed(cost):
        from_next, from_after = step_cost + min(from_next, from_after), from_next
    return min(from_next, from_after)