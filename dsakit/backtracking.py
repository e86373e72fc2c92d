"""Backtracking searches: word search on a grid and digit combinations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_MAX_DIGIT = 9


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent, unused cells."""
    if not board or not board[0] or not word:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def search(index: int, r: int, c: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        if (r, c) in used or board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(
            search(index + 1, r + dr, c + dc)
            for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0))
        )
        used.discard((r, c))
        return found

    return any(
        search(0, r, c)
        for r in range(rows)
        for c in range(cols)
        if board[r][c] == word[0]
    )


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return all sets of ``k`` distinct digits 1-9 that sum to ``n``.

    Combinations are increasing and listed in lexicographic order.
    """

    def search(target: int, digit: int, chosen: list[int]) -> Iterator[list[int]]:
        if target == 0 and len(chosen) == k:
            yield list(chosen)
            return
        if digit > _MAX_DIGIT or target < 0 or len(chosen) > k:
            return
        chosen.append(digit)
        yield from search(target - digit, digit + 1, chosen)
        chosen.pop()
        yield from search(target, digit + 1, chosen)

    return list(search(n, 1, []))