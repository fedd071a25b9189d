"""Restroom redoubt: robots patrolling a wrapping grid."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from math import prod
from typing import Iterable, Sequence

from aocsolve.toolbox import Coord, to_int

HEIGHT = 103
WIDTH = 101
_SECONDS = 100
_SEARCH_LIMIT = 10_000
_LINE_LENGTH = 11


@dataclass(frozen=True)
class Robot:
    """A robot's position and velocity, both as row/column."""

    position: Coord
    velocity: Coord

    def step(self, height: int, width: int) -> Robot:
        """The robot one second later, wrapped once around the grid edges."""
        r = self.position.r + self.velocity.r
        c = self.position.c + self.velocity.c
        if r < 0:
            r += height
        elif r >= height:
            r -= height
        if c < 0:
            c += width
        elif c >= width:
            c -= width
        return Robot(Coord(r, c), self.velocity)


def _pair(text: str, line: str) -> Coord:
    _, sep, value = text.partition("=")
    parts = value.split(",")
    if not sep or len(parts) != 2:
        raise ValueError(f"malformed robot: {line!r}")
    x, y = parts
    return Coord(to_int(y), to_int(x))


def parse_robots(lines: Sequence[str]) -> list[Robot]:
    """Parse ``"p=0,4 v=3,-3"`` lines; x is the column and y the row."""
    robots = []
    for line in lines:
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed robot: {line!r}")
        robots.append(Robot(_pair(parts[0], line), _pair(parts[1], line)))
    return robots


def _advance(robots: Iterable[Robot], height: int, width: int) -> list[Robot]:
    return [robot.step(height, width) for robot in robots]


def part_one(lines: Sequence[str], height: int = HEIGHT, width: int = WIDTH) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    robots = parse_robots(lines)
    for _ in range(_SECONDS):
        robots = _advance(robots, height, width)
    counts = Counter(robot.position for robot in robots)
    mid_r, mid_c = height // 2, width // 2
    quadrants = (
        (range(0, mid_r), range(0, mid_c)),
        (range(0, mid_r), range(mid_c + 1, width)),
        (range(mid_r + 1, height), range(0, mid_c)),
        (range(mid_r + 1, height), range(mid_c + 1, width)),
    )
    return prod(
        sum(n for pos, n in counts.items() if pos.r in rows and pos.c in cols)
        for rows, cols in quadrants
    )


def _has_line(counts: Counter[Coord]) -> bool:
    columns_by_row: dict[int, list[int]] = defaultdict(list)
    for pos, n in counts.items():
        if n == 1:
            columns_by_row[pos.r].append(pos.c)
    for columns in columns_by_row.values():
        run = 0
        previous = None
        for c in sorted(columns):
            run = run + 1 if previous is not None and c == previous + 1 else 1
            if run >= _LINE_LENGTH:
                return True
            previous = c
    return False


def part_two(
    lines: Sequence[str],
    height: int = HEIGHT,
    width: int = WIDTH,
    limit: int = _SEARCH_LIMIT,
) -> int:
    """First second at which eleven lone robots stand side by side, or 0."""
    robots = parse_robots(lines)
    for second in range(1, limit + 1):
        robots = _advance(robots, height, width)
        if _has_line(Counter(robot.position for robot in robots)):
            return second
    return 0


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))