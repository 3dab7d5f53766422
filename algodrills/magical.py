"""The n-th positive integer divisible by a or b."""

from __future__ import annotations

MOD = 1_000_000_007


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a // gcd(a, b) * b


def nth_magical_number(n: int, a: int, b: int) -> int:
    """Return the n-th number divisible by a or b, modulo 1_000_000_007."""
    if n < 1 or a < 1 or b < 1:
        raise ValueError("n, a and b must all be positive")
    both = lcm(a, b)
    low, high = 1, min(a, b) * n
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if mid // a + mid // b - mid // both >= n:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer % MOD