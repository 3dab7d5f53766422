"""Arithmetic on 32-bit signed integers using only bitwise operations."""

from __future__ import annotations

from algodrills.bits import INT_MAX, INT_MIN

_MASK32 = 0xFFFFFFFF


def _wrap(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value > INT_MAX else value


def _check(*values: int) -> None:
    for value in values:
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"{value} is not a 32-bit signed integer")


def add(a: int, b: int) -> int:
    """a + b, wrapping around like a 32-bit signed integer."""
    _check(a, b)
    total, carry = a & _MASK32, b & _MASK32
    while carry:
        total, carry = (total ^ carry) & _MASK32, ((total & carry) << 1) & _MASK32
    return _wrap(total)


def negate(x: int) -> int:
    """-x as two's complement: invert the bits and add one."""
    _check(x)
    return add(~x, 1)


def minus(a: int, b: int) -> int:
    """a - b, wrapping around like a 32-bit signed integer."""
    return add(a, negate(b))


def multiply(a: int, b: int) -> int:
    """a * b by shifting and adding, wrapping around like a 32-bit signed integer."""
    _check(a, b)
    result = 0
    multiplier = b & _MASK32
    while multiplier:
        if multiplier & 1:
            result = add(result, a)
        multiplier >>= 1
        a = _wrap(a << 1)
    return result


def _div(a: int, b: int) -> int:
    """Truncating division for operands other than INT_MIN."""
    x = negate(a) if a < 0 else a
    y = negate(b) if b < 0 else b
    quotient = 0
    for shift in range(30, -1, -1):
        if (x >> shift) >= y:
            quotient |= 1 << shift
            x = minus(x, y << shift)
    return negate(quotient) if (a < 0) != (b < 0) else quotient


def divide(a: int, b: int) -> int:
    """a / b truncated toward zero; INT_MIN / -1 gives INT_MAX."""
    _check(a, b)
    if b == 0:
        raise ZeroDivisionError("division by zero")
    if a == INT_MIN and b == INT_MIN:
        return 1
    if a != INT_MIN and b != INT_MIN:
        return _div(a, b)
    if b == INT_MIN:
        return 0
    if b == negate(1):
        return INT_MAX
    shifted = add(a, b if b > 0 else negate(b))
    offset = negate(1) if b > 0 else 1
    return add(_div(shifted, b), offset)