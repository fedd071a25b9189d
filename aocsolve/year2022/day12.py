"""Hill climbing: shortest climbs on a height map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

from aocsolve.toolbox import Coord

_START_HEIGHT = ord("a") - 1
_END_HEIGHT = ord("z") + 1


@dataclass(frozen=True)
class Heightmap:
    """Heights as character codes; ``S`` sits below ``a`` and ``E`` above ``z``."""

    heights: tuple[tuple[int, ...], ...]
    start: Coord
    end: Coord

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> Heightmap:
        rows = []
        start = end = None
        for r, line in enumerate(lines):
            row = []
            for c, letter in enumerate(line):
                if letter == "S":
                    start = Coord(r, c)
                    row.append(_START_HEIGHT)
                elif letter == "E":
                    end = Coord(r, c)
                    row.append(_END_HEIGHT)
                else:
                    row.append(ord(letter))
            rows.append(tuple(row))
        if start is None or end is None:
            raise ValueError("height map needs both S and E")
        return cls(tuple(rows), start, end)

    def neighbours(self, coord: Coord) -> list[Coord]:
        """Positions reachable in one step: at most one higher."""
        here = self.heights[coord.r][coord.c]
        result = []
        for direction in "ULDR":
            n = coord.moved(direction)
            if not (0 <= n.r < len(self.heights) and 0 <= n.c < len(self.heights[n.r])):
                continue
            if self.heights[n.r][n.c] > here + 1:
                continue
            result.append(n)
        return result

    def path_length(self, start: Coord) -> Optional[int]:
        """Fewest steps from ``start`` to the end, or ``None`` if it cannot be reached."""
        steps = {start: 0}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == self.end:
                return steps[current]
            for n in self.neighbours(current):
                if n not in steps:
                    steps[n] = steps[current] + 1
                    queue.append(n)
        return None


def part_one(lines: Sequence[str]) -> int:
    heightmap = Heightmap.from_lines(lines)
    length = heightmap.path_length(heightmap.start)
    if length is None:
        raise ValueError("the end cannot be reached from the start")
    return length


def part_two(lines: Sequence[str]) -> int:
    heightmap = Heightmap.from_lines(lines)
    lowest = ord("a")
    lengths = [
        heightmap.path_length(Coord(r, c))
        for r, row in enumerate(heightmap.heights)
        for c, height in enumerate(row)
        if height == lowest
    ]
    reachable = [length for length in lengths if length is not None]
    if not reachable:
        raise ValueError("the end cannot be reached from any lowest square")
    return min(reachable)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))