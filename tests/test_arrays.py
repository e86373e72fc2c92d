from itertools import permutations

from hypothesis import given, settings
from hypothesis import strategies as st

from dsakit.arrays import next_permutation, reverse_pairs


def _advanced(values):
    nums = list(values)
    next_permutation(nums)
    return nums


def test_next_permutation_simple():
    assert _advanced([1, 2, 3]) == [1, 3, 2]


def test_next_permutation_wraps_last_to_first():
    assert _advanced([3, 2, 1]) == [1, 2, 3]


def test_next_permutation_with_duplicates():
    assert _advanced([1, 1, 5]) == [1, 5, 1]


def test_next_permutation_trivial_lists():
    assert _advanced([]) == []
    assert _advanced([7]) == [7]


def test_next_permutation_returns_none_and_mutates():
    nums = [1, 3, 2]
    assert next_permutation(nums) is None
    assert nums == [2, 1, 3]


@settings(max_examples=50)
@given(st.lists(st.integers(0, 3), max_size=5))
def test_next_permutation_walks_all_permutations(values):
    ordered = sorted(set(permutations(values)))
    current = sorted(values)
    seen = []
    for _ in ordered:
        seen.append(tuple(current))
        next_permutation(current)
    assert seen == ordered
    assert current == sorted(values)


@given(st.lists(st.integers(-10, 10), max_size=8))
def test_next_permutation_preserves_multiset(values):
    assert sorted(_advanced(values)) == sorted(values)


def test_reverse_pairs_examples():
    assert reverse_pairs([1, 3, 2, 3, 1]) == 2
    assert reverse_pairs([2, 4, 3, 5, 1]) == 3


@given(st.integers(0, 12))
def test_reverse_pairs_all_pairs_count(length):
    nums = [3**k for k in reversed(range(length))]
    assert reverse_pairs(nums) == length * (length - 1) // 2


@given(st.lists(st.integers(0, 1000), max_size=30))
def test_reverse_pairs_sorted_non_negative_has_none(nums):
    assert not reverse_pairs(sorted(nums))


@given(st.lists(st.integers(-(2**31), 2**31 - 1), max_size=30))
def test_reverse_pairs_bounded_and_input_untouched(nums):
    original = list(nums)
    count = reverse_pairs(nums)
    assert 0 <= count <= len(nums) * (len(nums) - 1) // 2
    assert nums == original


@given(st.lists(st.integers(-100, 100), max_size=20), st.integers(-100, 100))
def test_reverse_pairs_monotone_when_appending(nums, extra):
    assert reverse_pairs(nums + [extra]) >= reverse_pairs(nums)
    assert reverse_pairs([extra] + nums) >= reverse_pairs(nums)