"""Toboggan trajectory: trees hit on slopes through a repeating map."""

from __future__ import annotations

from math import prod
from typing import Sequence

_FIRST_SLOPE = (3, 1)
_SLOPES = ((3, 1), (1, 1), (5, 1), (7, 1), (1, 2))


def count_trees(lines: Sequence[str], right: int, down: int) -> int:
    """Trees (``#``) met going ``right`` and ``down`` each step from the top left."""
    if down < 1:
        raise ValueError("down must be at least 1")
    trees = 0
    for step, row in enumerate(lines[::down]):
        if not row:
            raise ValueError("empty map row")
        if row[(step * right) % len(row)] == "#":
            trees += 1
    return trees


def part_one(lines: Sequence[str]) -> int:
    return count_trees(lines, *_FIRST_SLOPE)


def part_two(lines: Sequence[str]) -> int:
    return prod(count_trees(lines, right, down) for right, down in _SLOPES)


def run(lines: Sequence[str]) -> None:
    print("Answer 1: ", part_one(lines))
    print("Answer 2: ", part_two(lines))