# dsakit

A small library of classic data-structure and algorithm routines, written as
plain functions over Python sequences and two simple node classes. It has no
dependencies outside the standard library.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.linked_list`

- `ListNode(val=0, next=None)`: a singly linked list node. Iterating over a
  node yields the values from that node to the end of the list.
- `ListNode.from_values(values)`: builds a list from an iterable; returns
  `None` for an empty iterable.
- `to_values(head)`: the list's values as a Python list (`[]` for `None`).
- `add_two_numbers(l1, l2)`: adds two numbers stored least significant digit
  first and returns a new list holding the sum.
- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end and
  returns the head; raises `ValueError` if `n` is outside `1..len`. An empty
  list gives `None`.
- `merge_two_lists(a, b)`: splices two sorted lists into one sorted list,
  reusing their nodes; on equal values the node from `a` comes first.
- `reverse_list(head)`: reverses the list in place and returns the new head.
- `delete_node(node)`: removes a node without access to the head by taking
  over its successor's value and link; raises `ValueError` for the tail.

### `dsakit.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `TreeNode.from_level_order(values)`: builds a tree from level-order values,
  with `None` marking a missing child.
- `level_order(root)`: values level by level, left to right.
- `vertical_traversal(root)`: values grouped by column from left to right;
  within a column ordered by depth, and by value at equal depth.

### `dsakit.stacks`

- `is_valid_parentheses(s)`: whether `s` is made only of correctly nested
  `()`, `[]` and `{}`.
- `previous_smaller_indices(heights)` / `next_smaller_indices(heights)`: index
  of the nearest strictly smaller value to the left (or `-1`) / to the right
  (or `len(heights)`).
- `largest_rectangle_area(heights)`: largest rectangle under a histogram
  (`0` when empty).
- `next_greater(nums)`: first strictly greater value to the right, or `-1`.
- `next_greater_element(nums1, nums2)`: next greater element in `nums2` of
  each value in `nums1`; values missing from `nums2` give `-1`.
- `next_greater_elements_circular(nums)`: as `next_greater`, wrapping around.

### `dsakit.dynamic`

- `unique_paths(m, n)`: right/down paths across an `m` x `n` grid.
- `unique_paths_with_obstacles(grid)`: the same, avoiding cells equal to 1.
- `climb_stairs(n)`: ways to climb `n` stairs by steps of one or two.
- `minimum_total(triangle)`: minimum top-to-bottom path sum.
- `rob(nums)` / `rob_circular(nums)`: most loot from houses in a row / a
  circle without robbing neighbours.
- `coin_change(coins, amount)`: fewest coins making `amount`, or `-1`.
- `min_cost_climbing_stairs(cost)`: cheapest way past the top step, starting
  from step 0 or 1.

Invalid arguments (non-positive grid sizes, negative stair counts or amounts,
empty grids, triangles or coin lists, non-positive coins) raise `ValueError`.

### `dsakit.arrays`

- `next_permutation(nums)`: rearranges the list in place into the next
  lexicographic permutation, wrapping from the last to the first.
- `reverse_pairs(nums)`: counts pairs `i < j` with `nums[i] > 2 * nums[j]`.

### `dsakit.backtracking`

- `word_exists(board, word)`: whether `word` can be traced through
  horizontally or vertically adjacent cells, each used at most once.
- `combination_sum3(k, n)`: all sets of `k` distinct digits 1-9 summing to
  `n`, each increasing, in lexicographic order.

## Examples

```python
from dsakit.linked_list import ListNode, add_two_numbers, to_values
from dsakit.trees import TreeNode, level_order
from dsakit.dynamic import coin_change
from dsakit.stacks import is_valid_parentheses

# 342 + 465 = 807, digits stored in reverse order
total = add_two_numbers(ListNode.from_values([2, 4, 3]), ListNode.from_values([5, 6, 4]))
print(to_values(total))                # [7, 0, 8]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
print(level_order(root))               # [[3], [9, 20], [15, 7]]

print(coin_change([1, 2, 5], 11))      # 3
print(is_valid_parentheses("()[]{}"))  # True
```

## Mutation

`next_permutation`, `reverse_list`, `merge_two_lists`, `remove_nth_from_end`
and `delete_node` change the lists or nodes they are given. The remaining
functions leave their arguments untouched and return new values.

## Scope

This is a library only: it has no command-line tool.