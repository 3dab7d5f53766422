"""Binary search variants and a divide-and-conquer maximum."""

from __future__ import annotations

from collections.abc import Sequence


def find_num(sorted_arr: Sequence[int], num: int) -> int:
    """Return an index of num in an ascending sequence, or -1 if it is absent."""
    low, high = 0, len(sorted_arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = sorted_arr[mid]
        if value == num:
            return mid
        if value > num:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_left(sorted_arr: Sequence[int], num: int) -> int:
    """Return the first index whose value is >= num, or -1 if there is none."""
    low, high = 0, len(sorted_arr) - 1
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if sorted_arr[mid] >= num:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def find_right(sorted_arr: Sequence[int], num: int) -> int:
    """Return the last index whose value is <= num, or -1 if there is none."""
    low, high = 0, len(sorted_arr) - 1
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if sorted_arr[mid] <= num:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element strictly greater than its neighbours.

    Positions outside the sequence count as negative infinity. Raises
    ValueError for an empty sequence or when no strict peak is found.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("cannot find a peak in an empty sequence")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid - 1]:
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError("sequence has no strict peak")


def recursive_max(arr: Sequence[int]) -> int:
    """Return the maximum by splitting the range in halves recursively."""
    if not arr:
        raise ValueError("cannot take the maximum of an empty sequence")

    def _max(low: int, high: int) -> int:
        if low == high:
            return arr[low]
        mid = low + (high - low) // 2
        left = _max(low, mid)
        right = _max(mid + 1, high)
        return left if left > right else right

    return _max(0, len(arr) - 1)