"""Treetop tree house: visibility and scenic scores on a height grid."""

from __future__ import annotations

from math import prod
from typing import Sequence

from aocsolve.toolbox import DIRECTIONS, to_int

Grid = list[list[int]]


def parse_grid(lines: Sequence[str]) -> Grid:
    """One digit per tree."""
    return [[to_int(ch) for ch in line] for line in lines]


def _look(grid: Grid, r: int, c: int, dr: int, dc: int) -> tuple[int, bool]:
    """Trees seen in one direction, and whether the view reaches the edge."""
    height = grid[r][c]
    seen = 0
    r, c = r + dr, c + dc
    while 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        seen += 1
        if grid[r][c] >= height:
            return seen, False
        r, c = r + dr, c + dc
    return seen, True


def _positions(grid: Grid):
    for r, row in enumerate(grid):
        for c in range(len(row)):
            yield r, c


def part_one(lines: Sequence[str]) -> int:
    grid = parse_grid(lines)
    return sum(
        1
        for r, c in _positions(grid)
        if any(_look(grid, r, c, d.r, d.c)[1] for d in DIRECTIONS.values())
    )


def part_two(lines: Sequence[str]) -> int:
    grid = parse_grid(lines)
    return max(
        (
            prod(_look(grid, r, c, d.r, d.c)[0] for d in DIRECTIONS.values())
            for r, c in _positions(grid)
        ),
        default=0,
    )


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))