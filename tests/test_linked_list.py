import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import (
    ListNode,
    add_two_numbers,
    delete_node,
    merge_two_lists,
    remove_nth_from_end,
    reverse_list,
    to_values,
)

ints = st.lists(st.integers(-1000, 1000), max_size=30)
digit_lists = st.lists(st.integers(0, 9), min_size=1, max_size=15)


def _as_int(digits):
    return sum(d * 10**i for i, d in enumerate(digits))


@given(ints)
def test_from_values_round_trip(values):
    assert to_values(ListNode.from_values(values)) == values


def test_empty_list():
    assert ListNode.from_values([]) is None
    assert to_values(None) == []


@given(digit_lists, digit_lists)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = to_values(add_two_numbers(ListNode.from_values(a), ListNode.from_values(b)))
    assert _as_int(result) == _as_int(a) + _as_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_numbers_final_carry():
    result = add_two_numbers(ListNode.from_values([9, 9]), ListNode.from_values([1]))
    assert to_values(result) == [0, 0, 1]


def test_add_two_numbers_both_empty():
    assert add_two_numbers(None, None) is None


@given(st.lists(st.integers(), min_size=1, max_size=20), st.data())
def test_remove_nth_from_end(values, data):
    n = data.draw(st.integers(1, len(values)))
    head = remove_nth_from_end(ListNode.from_values(values), n)
    index = len(values) - n
    assert to_values(head) == values[:index] + values[index + 1 :]


def test_remove_nth_from_end_empty():
    assert remove_nth_from_end(None, 1) is None


@pytest.mark.parametrize("n", [0, 4, -1])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(ListNode.from_values([1, 2, 3]), n)


@given(ints, ints)
def test_merge_two_lists_sorted(a, b):
    a, b = sorted(a), sorted(b)
    head_a, head_b = ListNode.from_values(a), ListNode.from_values(b)
    original = {id(node) for head in (head_a, head_b) for node in _walk(head)}
    merged = merge_two_lists(head_a, head_b)
    assert to_values(merged) == sorted(a + b)
    assert {id(node) for node in _walk(merged)} == original


def _walk(head):
    while head is not None:
        yield head
        head = head.next


def test_merge_ties_take_first_list():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is first
    assert merged.next is second


@given(ints)
def test_reverse_list(values):
    assert to_values(reverse_list(ListNode.from_values(values))) == values[::-1]


@given(ints)
def test_reverse_twice_is_identity(values):
    head = ListNode.from_values(values)
    assert to_values(reverse_list(reverse_list(head))) == values


@given(st.lists(st.integers(), min_size=2, max_size=20), st.data())
def test_delete_node(values, data):
    index = data.draw(st.integers(0, len(values) - 2))
    head = ListNode.from_values(values)
    node = head
    for _ in range(index):
        node = node.next
    delete_node(node)
    assert to_values(head) == values[:index] + values[index + 1 :]


def test_delete_tail_raises():
    with pytest.raises(ValueError):
        delete_node(ListNode(5))