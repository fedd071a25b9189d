"""Historian hysteria: compare two location-id lists."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from aocsolve.toolbox import to_int

_SEPARATOR = "   "


def _columns(lines: Sequence[str]) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        parts = line.split(_SEPARATOR)
        if len(parts) < 2:
            raise ValueError(f"expected two columns separated by three spaces: {line!r}")
        left.append(to_int(parts[0]))
        right.append(to_int(parts[1]))
    return left, right


def part_one(lines: Sequence[str]) -> int:
    """Total distance between the sorted columns."""
    left, right = _columns(lines)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(lines: Sequence[str]) -> int:
    """Similarity score: each left id times its count in the right column."""
    left, right = _columns(lines)
    counts = Counter(right)
    return sum(n * counts[n] for n in left)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))