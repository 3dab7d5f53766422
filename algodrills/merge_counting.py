"""Pair-counting problems solved by merge-sort divide and conquer."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence

_CrossCount = Callable[[Sequence[int], Sequence[int]], int]


def _sort_and_count(items: list[int], cross: _CrossCount) -> tuple[list[int], int]:
    """Sort items, summing cross(left, right) over every merge of sorted halves."""
    if len(items) < 2:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid], cross)
    right, right_count = _sort_and_count(items[mid:], cross)
    total = left_count + right_count + cross(left, right)
    return list(heapq.merge(left, right)), total


def _count_doubled(left: Sequence[int], right: Sequence[int]) -> int:
    total = j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        total += j
    return total


def _count_inversions(left: Sequence[int], right: Sequence[int]) -> int:
    total = j = 0
    for value in left:
        while j < len(right) and value > right[j]:
            j += 1
        total += j
    return total


def _sum_smaller(left: Sequence[int], right: Sequence[int]) -> int:
    total = running = i = 0
    for value in right:
        while i < len(left) and left[i] <= value:
            running += left[i]
            i += 1
        total += running
    return total


def reverse_pairs(nums: Iterable[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count(list(nums), _count_doubled)[1]


def inversion_count(record: Iterable[int]) -> int:
    """Count pairs i < j with record[i] > record[j]."""
    return _sort_and_count(list(record), _count_inversions)[1]


def small_sum(nums: Iterable[int]) -> int:
    """Sum, over every position, the earlier values that are <= the value there."""
    return _sort_and_count(list(nums), _sum_smaller)[1]


def small_sum_brute_force(nums: Sequence[int]) -> int:
    """Quadratic reference for small_sum."""
    return sum(
        earlier
        for i, current in enumerate(nums)
        for earlier in nums[:i]
        if earlier <= current
    )