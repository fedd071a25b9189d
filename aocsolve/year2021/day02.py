"""Dive: follow submarine commands with and without aim."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_int


def _navigate(lines: Sequence[str]) -> tuple[int, int, int]:
    """Return (horizontal, simple depth, aimed depth)."""
    horizontal = depth = aimed_depth = aim = 0
    for line in lines:
        command, _, amount = line.partition(" ")
        n = to_int(amount)
        if command == "forward":
            horizontal += n
            aimed_depth += aim * n
        elif command == "down":
            depth += n
            aim += n
        elif command == "up":
            depth -= n
            aim -= n
        else:
            raise ValueError(f"unknown command: {command!r}")
    return horizontal, depth, aimed_depth


def part_one(lines: Sequence[str]) -> int:
    horizontal, depth, _ = _navigate(lines)
    return horizontal * depth


def part_two(lines: Sequence[str]) -> int:
    horizontal, _, aimed_depth = _navigate(lines)
    return horizontal * aimed_depth


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))