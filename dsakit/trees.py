"""Binary trees and their level-wise and vertical traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    @classmethod
    def from_level_order(cls, values: Iterable[int | None]) -> TreeNode | None:
        """Build a tree from level-order values, ``None`` marking missing children."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending = deque([root])
        while pending:
            parent = pending.popleft()
            for side in ("left", "right"):
                try:
                    value = next(items)
                except StopIteration:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(parent, side, child)
                    pending.append(child)
        return root


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Group values by column, left to right.

    Within a column values are ordered by depth, and values at the same
    depth by value.
    """
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, depth = queue.popleft()
        columns[column][depth].append(node.val)
        if node.left is not None:
            queue.append((node.left, column - 1, depth + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, depth + 1))
    return [
        [value for depth in sorted(levels) for value in sorted(levels[depth])]
        for _, levels in sorted(columns.items())
    ]