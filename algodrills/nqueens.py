"""Counting N-queens placements, by bitmask search and by plain backtracking."""

from __future__ import annotations


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")


def total_n_queens(n: int) -> int:
    """Count N-queens solutions using bitmasks for columns and diagonals."""
    _check_size(n)
    limits = (1 << n) - 1

    def _count(col: int, left: int, right: int) -> int:
        if col == limits:
            return 1
        candidates = limits & ~(col | left | right)
        total = 0
        while candidates:
            place = candidates & -candidates
            candidates ^= place
            total += _count(col | place, (left | place) >> 1, (right | place) << 1)
        return total

    return _count(0, 0, 0)


def total_n_queens_backtracking(n: int) -> int:
    """Count N-queens solutions by checking each candidate cell against earlier rows."""
    _check_size(n)
    path = [0] * n

    def _safe(row: int, col: int) -> bool:
        return all(
            path[r] != col and abs(r - row) != abs(path[r] - col) for r in range(row)
        )

    def _count(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if _safe(row, col):
                path[row] = col
                total += _count(row + 1)
        return total

    return _count(0)