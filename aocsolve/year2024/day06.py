"""Guard gallivant: trace a guard's patrol and find obstructions that trap it."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import ByteMatrix, Coord

_STEP = {"^": "U", ">": "R", "v": "D", "<": "L"}
_TURN = {"^": ">", ">": "v", "v": "<", "<": "^"}
_BLOCKERS = ("#", "O")


def walk(grid: ByteMatrix, start: Coord) -> bool:
    """Walk the guard until it leaves the grid, marking its path with ``X``.

    Returns ``True`` if the guard is caught in a loop instead.
    """
    pos = start
    bumps: set[tuple[Coord, str]] = set()
    while grid.inside_coord(pos):
        facing = grid[pos]
        if facing not in _STEP:
            raise ValueError(f"no guard at {pos}: found {facing!r}")
        ahead = pos.moved(_STEP[facing])
        if grid.inside_coord(ahead) and grid[ahead] in _BLOCKERS:
            key = (ahead, facing)
            if key in bumps:
                return True
            bumps.add(key)
            grid[pos] = _TURN[facing]
            continue
        if grid.inside_coord(ahead):
            grid[ahead] = facing
        grid[pos] = "X"
        pos = ahead
    return False


def _start(grid: ByteMatrix) -> Coord:
    start = grid.find("^")
    if start is None:
        raise ValueError("no guard facing up in the map")
    return start


def part_one(lines: Sequence[str]) -> int:
    """Distinct positions visited before leaving the map."""
    grid = ByteMatrix.from_lines(lines)
    walk(grid, _start(grid))
    return grid.count("X")


def part_two(lines: Sequence[str]) -> int:
    """Positions on the path where a new obstruction makes the guard loop."""
    walked = ByteMatrix.from_lines(lines)
    start = _start(walked)
    walk(walked, start)
    loops = 0
    for spot in walked.find_all("X"):
        if spot == start:
            continue
        trial = ByteMatrix.from_lines(lines)
        trial[spot] = "O"
        if walk(trial, start):
            loops += 1
    return loops


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))