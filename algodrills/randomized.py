"""Sets and multisets supporting insert, remove and uniform random pick in O(1)."""

from __future__ import annotations

import random
from typing import Optional


class RandomizedSet:
    """A set of integers with constant-time insert, remove and random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._positions: dict[int, int] = {}
        self._values: list[int] = []

    def insert(self, val: int) -> bool:
        """Add val; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove val; return False if it was absent."""
        index = self._positions.pop(val, None)
        if index is None:
            return False
        last = self._values.pop()
        if index < len(self._values):
            self._values[index] = last
            self._positions[last] = index
        return True

    def get_random(self) -> int:
        """Return a member chosen uniformly; IndexError when empty."""
        if not self._values:
            raise IndexError("cannot choose from an empty set")
        return self._rng.choice(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions


class RandomizedCollection:
    """A multiset of integers with constant-time insert, remove and random choice."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._indices: dict[int, set[int]] = {}
        self._values: list[int] = []

    def insert(self, val: int) -> bool:
        """Add one copy of val; return True if it was not present before."""
        slots = self._indices.setdefault(val, set())
        slots.add(len(self._values))
        self._values.append(val)
        return len(slots) == 1

    def remove(self, val: int) -> bool:
        """Remove one copy of val; return False if it was absent."""
        slots = self._indices.get(val)
        if not slots:
            return False
        index = slots.pop()
        last_index = len(self._values) - 1
        last = self._values[last_index]
        self._values[index] = last
        self._indices[last].discard(last_index)
        if index < last_index:
            self._indices[last].add(index)
        if not self._indices[val]:
            del self._indices[val]
        self._values.pop()
        return True

    def get_random(self) -> int:
        """Return an element; each copy is equally likely. IndexError when empty."""
        if not self._values:
            raise IndexError("cannot choose from an empty collection")
        return self._rng.choice(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._indices