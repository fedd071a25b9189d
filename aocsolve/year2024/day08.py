"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from aocsolve.toolbox import ByteMatrix, Coord

_ANTINODE = "#"
_EMPTY = "."


def find_antennas(grid: ByteMatrix) -> dict[str, list[Coord]]:
    """Positions of every letter or digit on the grid, grouped by character."""
    antennas: dict[str, list[Coord]] = {}
    for coord, cell in grid.cells():
        if cell.isascii() and cell.isalnum():
            antennas.setdefault(cell, []).append(coord)
    return antennas


def _pairs(grid: ByteMatrix):
    for coords in find_antennas(grid).values():
        yield from combinations(coords, 2)


def part_one(lines: Sequence[str]) -> int:
    """Antinodes at twice the distance from one antenna of each pair."""
    grid = ByteMatrix.from_lines(lines)
    nodes = []
    for first, second in _pairs(grid):
        diff = first - second
        nodes.extend(n for n in (first + diff, second - diff) if grid.inside_coord(n))
    for node in nodes:
        grid[node] = _ANTINODE
    return grid.count(_ANTINODE)


def part_two(lines: Sequence[str]) -> int:
    """Antinodes at every grid position in line with a pair, antennas included."""
    grid = ByteMatrix.from_lines(lines)
    nodes = []
    for first, second in _pairs(grid):
        diff = first - second
        node = first + diff
        while grid.inside_coord(node):
            nodes.append(node)
            node = node + diff
        node = second - diff
        while grid.inside_coord(node):
            nodes.append(node)
            node = node - diff
    for node in nodes:
        grid[node] = _ANTINODE
    return grid.count_except(_EMPTY)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))