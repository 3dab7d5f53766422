"""Recursive enumeration: permutations by swapping, and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence

LEFT = "left plate"
MIDDLE = "middle plate"
RIGHT = "right plate"


def permutations(nums: Iterable[int]) -> list[list[int]]:
    """All orderings of nums, generated by swapping each choice into place."""
    items = list(nums)

    def _walk(index: int) -> Iterator[list[int]]:
        if index == len(items):
            yield list(items)
            return
        for k in range(index, len(items)):
            items[index], items[k] = items[k], items[index]
            yield from _walk(index + 1)
            items[index], items[k] = items[k], items[index]

    return list(_walk(0))


def _moves(disk: int, source: str, target: str, spare: str) -> Iterator[tuple[int, str, str]]:
    if disk == 0:
        return
    yield from _moves(disk - 1, source, spare, target)
    yield disk, source, target
    yield from _moves(disk - 1, spare, target, source)


def hanoi_moves(n: int) -> list[tuple[int, str, str]]:
    """Moves (disk, from, to) carrying n disks from the left to the right plate."""
    if n < 0:
        raise ValueError(f"number of disks must be non-negative, got {n}")
    return list(_moves(n, LEFT, RIGHT, MIDDLE))


def hanota(a: MutableSequence[int], b: MutableSequence[int], c: MutableSequence[int]) -> None:
    """Move every disk from pile a to pile c in place, using b as the spare."""

    def _move(disk: int, source, target, spare) -> None:
        if disk == 0:
            return
        _move(disk - 1, source, spare, target)
        target.append(source.pop())
        _move(disk - 1, spare, target, source)

    _move(len(a), a, c, b)