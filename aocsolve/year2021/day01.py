"""Sonar sweep: count depth increases, singly and over three-measurement windows."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_ints


def _increases(values: Sequence[int]) -> int:
    return sum(1 for prev, curr in zip(values, values[1:]) if curr > prev)


def part_one(lines: Sequence[str]) -> int:
    return _increases(to_ints(*lines))


def part_two(lines: Sequence[str]) -> int:
    depths = to_ints(*lines)
    windows = [sum(depths[i : i + 3]) for i in range(len(depths) - 2)]
    return _increases(windows)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))