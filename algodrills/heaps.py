"""Greedy problems driven by heaps: line overlap, interval merging, halving a sum."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

_SCALE_BITS = 20


def max_cover(lines: Iterable[Sequence[int]]) -> int:
    """Largest number of segments [start, end] that overlap in more than a point."""
    ends: list[int] = []
    best = 0
    for start, end in sorted(lines, key=lambda line: line[0]):
        while ends and ends[0] <= start:
            heapq.heappop(ends)
        heapq.heappush(ends, end)
        best = max(best, len(ends))
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping intervals and return them sorted by start."""
    ordered = sorted([list(interval) for interval in intervals])
    if not ordered:
        return []
    merged: list[list[int]] = []
    low, high = ordered[0]
    for start, end in ordered:
        if start > high:
            merged.append([low, high])
            low, high = start, end
        elif end >= high:
            high = end
    merged.append([low, high])
    return merged


def halve_array(nums: Iterable[int]) -> int:
    """Fewest halvings of elements needed to cut the sum at least in half.

    Values are scaled to fixed point so that no floating-point error creeps in.
    """
    scaled = [value << _SCALE_BITS for value in nums]
    if any(value < 0 for value in scaled):
        raise ValueError("numbers must be non-negative")
    heap = [-value for value in scaled]
    heapq.heapify(heap)
    goal = sum(scaled) // 2
    reduced = 0
    steps = 0
    while reduced < goal:
        half = -heapq.heappop(heap) // 2
        heapq.heappush(heap, -half)
        reduced += half
        steps += 1
    return steps