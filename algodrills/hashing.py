"""Problems solved with hash sets and hash maps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return (i, j) with nums[i] + nums[j] == target, where j < i is the earlier index.

    Raises ValueError if no such pair exists.
    """
    positions: dict[int, int] = {}
    for i, value in enumerate(nums):
        partner = target - value
        if partner in positions:
            return i, positions[partner]
        positions[value] = i
    raise ValueError(f"no two numbers sum to {target}")