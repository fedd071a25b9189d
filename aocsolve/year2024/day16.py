"""Reindeer maze: cheapest route where moving costs 1 and turning costs 1000."""

from __future__ import annotations

import heapq
import math
from typing import Optional, Sequence

from aocsolve.toolbox import DIRECTIONS, ByteMatrix, Coord

_STEP_COST = 1
_TURN_COST = 1000


def part_one(lines: Sequence[str]) -> int:
    """Lowest score from ``S`` (facing east) to ``E``."""
    maze = ByteMatrix.from_lines(lines)
    start, end = maze.find("S"), maze.find("E")
    if start is None or end is None:
        raise ValueError("maze needs both S and E")
    order = {coord: index for index, (coord, _) in enumerate(maze.cells())}
    dist: dict[Coord, int] = {start: 0}
    facing: dict[Coord, Optional[str]] = {start: "R"}
    visited: set[Coord] = set()
    heap = [(0, order[start], start)]
    while heap:
        d, _, current = heapq.heappop(heap)
        if current in visited or d > dist[current]:
            continue
        if current == end:
            return d
        visited.add(current)
        here = facing.get(current)
        for name, step in DIRECTIONS.items():
            neighbour = current + step
            if not maze.inside_coord(neighbour) or maze[neighbour] == "#" or neighbour in visited:
                continue
            facing[neighbour] = name
            cost = _STEP_COST if here is None or here == name else _STEP_COST + _TURN_COST
            candidate = d + cost
            if candidate < dist.get(neighbour, math.inf):
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, order[neighbour], neighbour))
    raise ValueError("the end cannot be reached")


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:")