"""Counting super-palindromes: palindromes that are squares of palindromes."""

from __future__ import annotations

from math import isqrt


def even_palindrome(x: int) -> int:
    """Mirror x into a palindrome with an even digit count (123 -> 123321)."""
    result = x
    while x > 0:
        result = result * 10 + x % 10
        x //= 10
    return result


def odd_palindrome(x: int) -> int:
    """Mirror x around its last digit into an odd-length palindrome (123 -> 12321)."""
    result = x // 10
    while x > 0:
        result = result * 10 + x % 10
        x //= 10
    return result


def is_palindrome_number(x: int) -> bool:
    """True if the decimal digits of x read the same both ways."""
    digits = str(x)
    return digits == digits[::-1]


def superpalindromes_in_range(left: str, right: str) -> int:
    """Count palindromes in [left, right] that are squares of palindromes."""
    low, high = int(left), int(right)
    if low < 0 or high < 0:
        raise ValueError("bounds must be non-negative")
    root_limit = isqrt(high)

    def _counts(candidate: int) -> bool:
        square = candidate * candidate
        return low <= square <= high and is_palindrome_number(square)

    total = 0
    seed = 1
    while True:
        total += _counts(even_palindrome(seed))
        odd = odd_palindrome(seed)
        total += _counts(odd)
        seed += 1
        if odd > root_limit:
            return total