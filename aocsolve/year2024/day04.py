"""Ceres search: count XMAS words and X-shaped MAS crosses."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import ByteMatrix

_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
_DIAGONALS = ((-1, 1), (1, -1), (-1, -1), (1, 1))
_MS = {"M", "S"}


def part_one(lines: Sequence[str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = ByteMatrix.from_lines(lines)
    total = 0
    for coord, cell in grid.cells():
        if cell != "X":
            continue
        r, c = coord.r, coord.c
        for dr, dc in _DIRECTIONS:
            if not grid.inside(r + 3 * dr, c + 3 * dc):
                continue
            if all(
                grid[r + k * dr, c + k * dc] == letter
                for k, letter in enumerate("MAS", start=1)
            ):
                total += 1
    return total


def part_two(lines: Sequence[str]) -> int:
    """Positions where two diagonal MAS words cross at an A."""
    grid = ByteMatrix.from_lines(lines)
    total = 0
    for coord, cell in grid.cells():
        if cell != "A":
            continue
        r, c = coord.r, coord.c
        if not all(grid.inside(r + dr, c + dc) for dr, dc in _DIAGONALS):
            continue
        up_right, down_left, up_left, down_right = (
            grid[r + dr, c + dc] for dr, dc in _DIAGONALS
        )
        if {up_right, down_left} == _MS and {up_left, down_right} == _MS:
            total += 1
    return total


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))