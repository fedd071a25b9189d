"""Garden groups: fence prices by perimeter and by number of sides."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import DIRECTION_LIST, ByteMatrix, Coord

# "x" same plant, "#" different plant or outside, "-" ignored.
_CORNER_MASKS = (
    ("-#-", "#x-", "---"),
    ("-#-", "-x#", "---"),
    ("---", "-x#", "-#-"),
    ("---", "#x-", "-#-"),
    ("-x#", "-xx", "---"),
    ("---", "-xx", "-x#"),
    ("---", "xx-", "#x-"),
    ("#x-", "xx-", "---"),
)


def find_regions(garden: ByteMatrix) -> list[list[Coord]]:
    """Connected groups of equal plants, each as a list of positions."""
    visited: set[Coord] = set()
    regions: list[list[Coord]] = []
    for origin, _ in garden.cells():
        if origin in visited:
            continue
        region: list[Coord] = []
        stack = [origin]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            region.append(current)
            for step in DIRECTION_LIST:
                neighbour = current + step
                if (
                    garden.inside_coord(neighbour)
                    and garden[neighbour] == garden[current]
                    and neighbour not in visited
                ):
                    stack.append(neighbour)
        regions.append(region)
    return regions


def _perimeter(garden: ByteMatrix, region: Sequence[Coord]) -> int:
    sides = 0
    for plant in region:
        for step in DIRECTION_LIST:
            neighbour = plant - step
            if not garden.inside_coord(neighbour) or garden[neighbour] != garden[plant]:
                sides += 1
    return sides


def _neighbourhood(garden: ByteMatrix, plant: Coord) -> tuple[str, ...]:
    value = garden[plant]
    return tuple(
        "".join(
            "x" if garden.inside(r, c) and garden[r, c] == value else "#"
            for c in range(plant.c - 1, plant.c + 2)
        )
        for r in range(plant.r - 1, plant.r + 2)
    )


def _matches(mask: tuple[str, ...], pattern: tuple[str, ...]) -> bool:
    return all(
        m == "-" or m == p
        for mask_row, pattern_row in zip(mask, pattern)
        for m, p in zip(mask_row, pattern_row)
    )


def _corners(garden: ByteMatrix, region: Sequence[Coord]) -> int:
    total = 0
    for plant in region:
        pattern = _neighbourhood(garden, plant)
        total += sum(1 for mask in _CORNER_MASKS if _matches(mask, pattern))
    return total


def part_one(lines: Sequence[str]) -> int:
    """Price by area times perimeter."""
    garden = ByteMatrix.from_lines(lines)
    return sum(len(region) * _perimeter(garden, region) for region in find_regions(garden))


def part_two(lines: Sequence[str]) -> int:
    """Price by area times number of sides, counted as corners."""
    garden = ByteMatrix.from_lines(lines)
    return sum(len(region) * _corners(garden, region) for region in find_regions(garden))


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))