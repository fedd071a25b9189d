"""Camp cleanup: section assignments that contain or overlap each other."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_int

Span = tuple[int, int]


def _span(text: str) -> Span:
    parts = text.split("-")
    if len(parts) < 2:
        raise ValueError(f"malformed section range: {text!r}")
    return to_int(parts[0]), to_int(parts[1])


def parse_pair(line: str) -> tuple[Span, Span]:
    """Parse ``"2-4,6-8"`` into ``((2, 4), (6, 8))``."""
    parts = line.split(",")
    if len(parts) < 2:
        raise ValueError(f"malformed pair: {line!r}")
    return _span(parts[0]), _span(parts[1])


def _outer_inner(pair: tuple[Span, Span]) -> tuple[Span, Span]:
    first, second = pair
    if second[1] - second[0] > first[1] - first[0]:
        return second, first
    return first, second


def _fully_contained(pair: tuple[Span, Span]) -> bool:
    (outer_lo, outer_hi), (inner_lo, inner_hi) = _outer_inner(pair)
    if inner_lo > inner_hi:
        return True
    return outer_lo <= inner_lo and inner_hi <= outer_hi


def _overlapping(pair: tuple[Span, Span]) -> bool:
    (outer_lo, outer_hi), (inner_lo, inner_hi) = _outer_inner(pair)
    if inner_lo > inner_hi:
        return False
    return max(outer_lo, inner_lo) <= min(outer_hi, inner_hi)


def part_one(lines: Sequence[str]) -> int:
    return sum(1 for line in lines if _fully_contained(parse_pair(line)))


def part_two(lines: Sequence[str]) -> int:
    return sum(1 for line in lines if _overlapping(parse_pair(line)))


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))