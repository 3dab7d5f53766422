"""Structures fed by a stream of values: a frequency stack and a running median."""

from __future__ import annotations

import heapq
from collections import defaultdict


class FreqStack:
    """Stack whose pop returns the most frequent value, latest pushed on ties."""

    def __init__(self) -> None:
        self._counts: defaultdict[int, int] = defaultdict(int)
        self._levels: dict[int, list[int]] = {}
        self._top = 0

    def push(self, val: int) -> None:
        self._counts[val] += 1
        level = self._counts[val]
        self._top = max(self._top, level)
        self._levels.setdefault(level, []).append(val)

    def pop(self) -> int:
        """Remove and return the most frequent value; IndexError when empty."""
        if self._top == 0:
            raise IndexError("pop from an empty stack")
        stack = self._levels[self._top]
        value = stack.pop()
        self._counts[value] -= 1
        if not stack:
            del self._levels[self._top]
            self._top -= 1
        return value


class MedianFinder:
    """Running median kept with a max-heap of the low half and a min-heap of the high."""

    def __init__(self) -> None:
        self._low: list[int] = []
        self._high: list[int] = []

    def add_num(self, num: int) -> None:
        if not self._low or num <= -self._low[0]:
            heapq.heappush(self._low, -num)
        else:
            heapq.heappush(self._high, num)
        if len(self._low) - len(self._high) == 2:
            heapq.heappush(self._high, -heapq.heappop(self._low))
        elif len(self._high) - len(self._low) == 2:
            heapq.heappush(self._low, -heapq.heappop(self._high))

    def find_median(self) -> float:
        """Median of all numbers added so far; ValueError when none were added."""
        if not self._low and not self._high:
            raise ValueError("no numbers added")
        if len(self._low) == len(self._high):
            return (-self._low[0] + self._high[0]) / 2
        if len(self._low) > len(self._high):
            return float(-self._low[0])
        return float(self._high[0])