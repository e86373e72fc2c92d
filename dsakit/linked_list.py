"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding ``values`` in order; ``None`` when empty."""
        dummy = cls()
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as least-significant-digit-first lists."""

    def digits() -> Iterator[int]:
        carry = 0
        for a, b in zip_longest(to_values(l1), to_values(l2), fillvalue=0):
            carry, digit = divmod(a + b + carry, 10)
            yield digit
        if carry > 0:
            yield carry

    return ListNode.from_values(digits())


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node from the end and return the new head."""
    if head is None:
        return None
    nodes = list(_nodes(head))
    size = len(nodes)
    if not 1 <= n <= size:
        raise ValueError(f"n must be between 1 and {size}, got {n}")
    if n == size:
        return head.next
    before = nodes[size - n - 1]
    before.next = before.next.next if before.next is not None else None
    return head


def merge_two_lists(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; ties take from ``a`` first."""
    dummy = ListNode(-1)
    tail = dummy
    while a is not None and b is not None:
        if a.val <= b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = b if a is None else a
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head.

    The node takes over the value and link of its successor, so it must
    not be the tail.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the tail node")
    node.val = successor.val
    node.next = successor.next