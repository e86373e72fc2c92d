"""Classic data-structure and algorithm routines: linked lists, binary trees,
stacks, dynamic programming, arrays and backtracking."""

__version__ = "0.1.0"

__all__ = ["arrays", "backtracking", "dynamic", "linked_list", "stacks", "trees"]