"""Report repair: entries that sum to 2020."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_ints

TARGET = 2020


def part_one(lines: Sequence[str]) -> int:
    """Product of two entries summing to 2020."""
    numbers = to_ints(*lines)
    present = set(numbers)
    for number in numbers:
        if TARGET - number in present:
            return number * (TARGET - number)
    raise ValueError("no two entries sum to 2020")


def part_two(lines: Sequence[str]) -> int:
    """Product of three entries summing to 2020."""
    numbers = to_ints(*lines)
    present = set(numbers)
    for first in numbers:
        for second in numbers[1:]:
            third = TARGET - first - second
            if third in present:
                return first * second * third
    raise ValueError("no three entries sum to 2020")


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))