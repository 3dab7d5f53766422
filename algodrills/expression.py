"""Recursive parsers: an integer calculator, a string decoder and a formula counter."""

from __future__ import annotations

from collections import Counter

_DIGITS = "0123456789"


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _push(nums: list[int], ops: list[str], current: int, op: str) -> None:
    """Queue current with the operator that follows it, folding * and / at once."""
    if not ops or ops[-1] in "+-":
        nums.append(current)
        ops.append(op)
    else:
        if ops[-1] == "*":
            nums[-1] *= current
        else:
            nums[-1] = _truncating_div(nums[-1], current)
        ops[-1] = op


def _evaluate(s: str, pos: int) -> tuple[int, int]:
    """Evaluate from pos up to a closing ')' or the end; return value and stop index."""
    nums: list[int] = []
    ops: list[str] = []
    current = 0
    i = pos
    while i < len(s) and s[i] != ")":
        ch = s[i]
        if ch in _DIGITS:
            current = current * 10 + int(ch)
            i += 1
        elif ch == "(":
            current, i = _evaluate(s, i + 1)
            if i >= len(s):
                raise ValueError("unbalanced parenthesis")
            i += 1
        elif ch in "+-*/":
            _push(nums, ops, current, ch)
            current = 0
            i += 1
        else:
            raise ValueError(f"unexpected character {ch!r}")
    _push(nums, ops, current, "+")
    result = nums[0]
    for op, value in zip(ops, nums[1:]):
        result = result + value if op == "+" else result - value
    return result, i


def calculate(expr: str) -> int:
    """Evaluate an integer expression with + - * / and parentheses.

    Division truncates toward zero; spaces are ignored.
    """
    s = expr.replace(" ", "")
    value, end = _evaluate(s, 0)
    if end != len(s):
        raise ValueError("unbalanced parenthesis")
    return value


def _decode(s: str, pos: int) -> tuple[str, int]:
    parts: list[str] = []
    times = 0
    i = pos
    while i < len(s) and s[i] != "]":
        ch = s[i]
        if ch in _DIGITS:
            times = times * 10 + int(ch)
            i += 1
        elif ch == "[":
            inner, i = _decode(s, i + 1)
            parts.append(inner * times)
            times = 0
        else:
            parts.append(ch)
            i += 1
    return "".join(parts), i + 1


def decode_string(s: str) -> str:
    """Expand k[text] groups, which may nest, into text repeated k times."""
    return _decode(s, 0)[0]


def _settle(
    totals: Counter[str], element: str, group: Counter[str], times: int
) -> None:
    times = times or 1
    if element:
        totals[element] += times
    else:
        for name, amount in group.items():
            totals[name] += amount * times


def _count(formula: str, pos: int) -> tuple[Counter[str], int]:
    totals: Counter[str] = Counter()
    group: Counter[str] = Counter()
    element = ""
    times = 0
    i = pos
    while i < len(formula) and formula[i] != ")":
        ch = formula[i]
        if "A" <= ch <= "Z":
            _settle(totals, element, group, times)
            element, group, times = ch, Counter(), 0
            i += 1
        elif ch == "(":
            _settle(totals, element, group, times)
            element, times = "", 0
            group, i = _count(formula, i + 1)
            if i >= len(formula):
                raise ValueError("unbalanced parenthesis")
            i += 1
        elif ch in _DIGITS:
            times = times * 10 + int(ch)
            i += 1
        elif "a" <= ch <= "z":
            if not element:
                raise ValueError(f"lowercase letter {ch!r} without an element")
            element += ch
            i += 1
        else:
            raise ValueError(f"unexpected character {ch!r}")
    _settle(totals, element, group, times)
    return totals, i


def count_of_atoms(formula: str) -> str:
    """Count atoms in a chemical formula, listing elements by name with counts above 1."""
    totals, end = _count(formula, 0)
    if end != len(formula):
        raise ValueError("unbalanced parenthesis")
    return "".join(
        name if amount == 1 else f"{name}{amount}"
        for name, amount in sorted(totals.items())
    )