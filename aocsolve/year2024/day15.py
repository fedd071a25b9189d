"""Warehouse woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import ByteMatrix

_MOVES = {"^": "U", ">": "R", "v": "D", "<": "L"}


def parse(lines: Sequence[str]) -> tuple[ByteMatrix, list[str]]:
    """Map rows start with ``#``; every other non-blank line holds moves."""
    rows: list[str] = []
    moves: list[str] = []
    for line in lines:
        if line.startswith("#"):
            rows.append(line)
            continue
        if line == "":
            continue
        for arrow in line:
            try:
                moves.append(_MOVES[arrow])
            except KeyError:
                raise ValueError(f"not a move: {arrow!r}") from None
    return ByteMatrix.from_lines(rows), moves


def part_one(lines: Sequence[str]) -> int:
    """Sum of GPS coordinates (100 * row + column) of all boxes after the moves."""
    grid, moves = parse(lines)
    position = grid.find("@")
    if position is None:
        raise ValueError("no robot in the warehouse")
    for move in moves:
        ahead = position.moved(move)
        scan = ahead
        while grid.inside_coord(scan) and grid[scan] == "O":
            scan = scan.moved(move)
        if not grid.inside_coord(scan):
            raise ValueError("warehouse is not enclosed by walls")
        if grid[scan] == "#":
            continue
        if scan != ahead:
            grid[scan] = "O"
        grid[ahead] = "@"
        grid[position] = "."
        position = ahead
    return sum(box.r * 100 + box.c for box in grid.find_all("O"))


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:")