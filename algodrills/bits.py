"""Bit manipulation tricks over 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
_MASK32 = 0xFFFFFFFF


def _to_signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value > INT_MAX else value


def to_binary32(x: int) -> str:
    """Return the 32-bit two's-complement bit string of x."""
    return format(x & _MASK32, "032b")


def single_number(nums: Iterable[int]) -> int:
    """Return the value occurring once when every other value occurs twice."""
    return reduce(xor, nums, 0)


def single_number_pair(nums: Sequence[int]) -> tuple[int, int]:
    """Return the two values occurring once when every other value occurs twice."""
    xor_all = single_number(nums)
    low_bit = xor_all & -xor_all
    first = single_number(value for value in nums if value & low_bit == 0)
    return first, xor_all ^ first


def single_number_among(nums: Iterable[int], m: int) -> int:
    """Return the one value seen fewer than m times when all others appear m times."""
    if m < 2:
        raise ValueError(f"m must be at least 2, got {m}")
    counts = [0] * 32
    for value in nums:
        for bit in range(32):
            counts[bit] += (value >> bit) & 1
    answer = 0
    for bit, count in enumerate(counts):
        if count % m:
            answer |= 1 << bit
    return _to_signed32(answer)


def missing_number(nums: Sequence[int]) -> int:
    """Return the value from 0..len(nums) that is absent from nums."""
    return reduce(xor, range(len(nums) + 1), 0) ^ single_number(nums)


def bigger_of(a: int, b: int) -> int:
    """Return the larger of a and b using the sign bit of their difference."""
    diff = a - b
    sign = (diff >> diff.bit_length()) & 1
    return sign * b + (1 - sign) * a


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Return (b, a), exchanged through three XORs."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def count_ones(n: int) -> int:
    """Count the set bits of n seen as a 32-bit word."""
    n &= _MASK32
    n = (n & 0x55555555) + ((n >> 1) & 0x55555555)
    n = (n & 0x33333333) + ((n >> 2) & 0x33333333)
    n = (n & 0x0F0F0F0F) + ((n >> 4) & 0x0F0F0F0F)
    n = (n & 0x00FF00FF) + ((n >> 8) & 0x00FF00FF)
    n = (n & 0x0000FFFF) + ((n >> 16) & 0x0000FFFF)
    return n


def hamming_distance(x: int, y: int) -> int:
    """Number of bit positions in which x and y differ."""
    return count_ones(x ^ y)


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer in [left, right]."""
    if not 0 <= left <= right:
        raise ValueError("need 0 <= left <= right")
    while left < right:
        right -= right & -right
    return right


def near_power_of_two(n: int) -> int:
    """Smallest power of two >= n; INT_MIN if it does not fit in a 32-bit int."""
    if n <= 0:
        return 1
    result = 1 << (n - 1).bit_length()
    return INT_MIN if result > INT_MAX else result


def is_power_of_two(n: int) -> bool:
    """True if n is a positive power of two."""
    return n > 0 and n & -n == n


def is_power_of_three(n: int) -> bool:
    """True if n is a positive power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def reverse_bits(n: int) -> int:
    """Reverse the bit order of an unsigned 32-bit integer."""
    if not 0 <= n <= _MASK32:
        raise ValueError(f"value must be an unsigned 32-bit integer, got {n}")
    n = ((n & 0xAAAAAAAA) >> 1) | ((n & 0x55555555) << 1)
    n = ((n & 0xCCCCCCCC) >> 2) | ((n & 0x33333333) << 2)
    n = ((n & 0xF0F0F0F0) >> 4) | ((n & 0x0F0F0F0F) << 4)
    n = ((n & 0xFF00FF00) >> 8) | ((n & 0x00FF00FF) << 8)
    n = ((n >> 16) | (n << 16)) & _MASK32
    return n