"""Hoof it: score and rate hiking trails that climb from 0 to 9."""

from __future__ import annotations

from typing import Iterator, Sequence

from aocsolve.toolbox import DIRECTION_LIST, ByteMatrix, Coord

_DIGITS = {str(n): n for n in range(10)}


def _reached_nines(grid: ByteMatrix, start: Coord) -> Iterator[Coord]:
    """Yield the end of every uphill path from ``start``, once per path."""
    stack = [start]
    while stack:
        position = stack.pop()
        height = _DIGITS[grid[position]]
        if height == 9:
            yield position
            continue
        for step in DIRECTION_LIST:
            neighbour = position + step
            if not grid.inside_coord(neighbour):
                continue
            value = _DIGITS.get(grid[neighbour])
            if value == height + 1:
                stack.append(neighbour)


def trail_total(lines: Sequence[str], rating: bool) -> int:
    """Sum over trailheads of reachable nines, or of distinct trails when ``rating``."""
    grid = ByteMatrix.from_lines(lines)
    total = 0
    for start in grid.find_all("0"):
        ends = list(_reached_nines(grid, start))
        total += len(ends) if rating else len(set(ends))
    return total


def part_one(lines: Sequence[str]) -> int:
    return trail_total(lines, rating=False)


def part_two(lines: Sequence[str]) -> int:
    return trail_total(lines, rating=True)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))