"""Cathode-ray tube: run a tiny CPU and draw its sprite on a CRT."""

from __future__ import annotations

from typing import Iterator, Sequence

from aocsolve.toolbox import to_int

_SCREEN_WIDTH = 40


def execute(lines: Sequence[str]) -> Iterator[tuple[int, int]]:
    """Yield ``(cycle, x)`` for every cycle, with ``x`` as it is during that cycle."""
    x = 1
    cycle = 1
    for line in lines:
        parts = line.split(" ")
        if parts[0] == "noop":
            cycles, delta = 1, 0
        elif parts[0] == "addx":
            if len(parts) < 2:
                raise ValueError(f"addx needs a value: {line!r}")
            cycles, delta = 2, to_int(parts[1])
        else:
            continue
        for _ in range(cycles):
            yield cycle, x
            cycle += 1
        x += delta


def part_one(lines: Sequence[str]) -> int:
    """Sum of signal strengths at cycles 20, 60, 100, ..."""
    return sum(cycle * x for cycle, x in execute(lines) if cycle % _SCREEN_WIDTH == 20)


def part_two(lines: Sequence[str]) -> str:
    """The CRT image, one line of 40 pixels per row."""
    pixels = []
    for cycle, x in execute(lines):
        position = cycle % _SCREEN_WIDTH
        pixels.append("#" if x <= position <= x + 2 else ".")
        if position == 0:
            pixels.append("\n")
    return "".join(pixels)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:")
    print(part_two(lines))