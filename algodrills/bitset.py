"""Bit maps: a plain set of small integers and a flippable fixed-size bitset."""

from __future__ import annotations


def _check_index(index: int, size: int) -> None:
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for size {size}")


class BitMap:
    """Set of the integers 0..n-1, one bit per member."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.size = n
        self._bits = 0

    def add(self, num: int) -> None:
        _check_index(num, self.size)
        self._bits |= 1 << num

    def remove(self, num: int) -> None:
        _check_index(num, self.size)
        self._bits &= ~(1 << num)

    def toggle(self, num: int) -> None:
        _check_index(num, self.size)
        self._bits ^= 1 << num

    def contains(self, num: int) -> bool:
        _check_index(num, self.size)
        return bool((self._bits >> num) & 1)


class Bitset:
    """Fixed-size bitset whose flip runs in constant time."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._bits = 0
        self._inverted = False
        self._ones = 0

    def _is_set(self, idx: int) -> bool:
        _check_index(idx, self.size)
        return bool((self._bits >> idx) & 1) != self._inverted

    def fix(self, idx: int) -> None:
        """Set bit idx to 1."""
        if not self._is_set(idx):
            self._bits ^= 1 << idx
            self._ones += 1

    def unfix(self, idx: int) -> None:
        """Set bit idx to 0."""
        if self._is_set(idx):
            self._bits ^= 1 << idx
            self._ones -= 1

    def flip(self) -> None:
        """Invert every bit."""
        self._inverted = not self._inverted
        self._ones = self.size - self._ones

    def all(self) -> bool:
        return self._ones == self.size

    def one(self) -> bool:
        return self._ones > 0

    def count(self) -> int:
        return self._ones

    def __str__(self) -> str:
        return "".join("1" if self._is_set(i) else "0" for i in range(self.size))