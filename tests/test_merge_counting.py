from hypothesis import given
from hypothesis import strategies as st

from algodrills.merge_counting import (
    inversion_count,
    reverse_pairs,
    small_sum,
    small_sum_brute_force,
)


def test_reverse_pairs_examples():
    assert reverse_pairs([1, 3, 2, 3, 1]) == 2
    assert reverse_pairs([2, 4, 3, 5, 1]) == 3


def test_reverse_pairs_large_values_do_not_count():
    assert reverse_pairs([2147483647] * 5) == 0


def test_empty_inputs():
    assert reverse_pairs([]) == 0
    assert inversion_count([]) == 0
    assert small_sum([]) == 0


@given(st.lists(st.integers(-1000, 1000), max_size=60))
def test_inversion_count_of_sorted_is_zero(values):
    assert inversion_count(sorted(values)) == 0


@given(st.sets(st.integers(-1000, 1000), max_size=60))
def test_inversions_of_list_and_reverse_cover_all_pairs(values):
    items = list(values)
    n = len(items)
    assert inversion_count(items) + inversion_count(items[::-1]) == n * (n - 1) // 2


@given(st.lists(st.integers(0, 1000), max_size=60))
def test_reverse_pairs_bounded_by_inversions_for_nonnegative(values):
    assert reverse_pairs(values) <= inversion_count(values)


@given(st.lists(st.integers(-10, 10), max_size=40))
def test_small_sum_matches_brute_force(values):
    assert small_sum(values) == small_sum_brute_force(values)


def test_small_sum_leaves_input_untouched():
    nums = [2, 6, -10, 5, 1]
    copy = list(nums)
    result = small_sum(nums)
    assert nums == copy
    assert result == small_sum_brute_force(copy)


@given(st.lists(st.integers(-1000, 1000), max_size=40))
def test_counts_do_not_mutate(values):
    copy = list(values)
    reverse_pairs(values)
    inversion_count(values)
    assert values == copy