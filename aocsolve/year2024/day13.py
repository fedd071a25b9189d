"""Claw contraption: tokens needed to win prizes from claw machines."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Sequence

from aocsolve.toolbox import to_float

_LOCATION = re.compile(r"X[=+]([0-9]+), Y[=+]([0-9]+)")
_SLOTS = ("a", "b", "prize")
_MAX_PRESSES = 200
_PRIZE_OFFSET = 10000000000000

Location = tuple[float, float]


@dataclass(frozen=True)
class ClawMachine:
    """Moves of buttons A and B and the prize location, as ``(x, y)``."""

    a: Location
    b: Location
    prize: Location


def _build(fields: dict[str, Location]) -> ClawMachine:
    missing = [slot for slot in _SLOTS if slot not in fields]
    if missing:
        raise ValueError(f"incomplete claw machine, missing {', '.join(missing)}")
    return ClawMachine(**fields)


def parse_machines(lines: Sequence[str]) -> list[ClawMachine]:
    """Machines are three lines each, separated by one line."""
    machines: list[ClawMachine] = []
    fields: dict[str, Location] = {}
    for index, line in enumerate(lines):
        slot = index % 4
        if slot == 3:
            machines.append(_build(fields))
            fields = {}
            continue
        match = _LOCATION.search(line)
        if match is None:
            raise ValueError(f"malformed claw machine line: {line!r}")
        fields[_SLOTS[slot]] = (to_float(match.group(1)), to_float(match.group(2)))
    if fields:
        machines.append(_build(fields))
    return machines


def part_one(lines: Sequence[str]) -> int:
    """Search presses (A costs 3, B costs 1) within 200 in total; at least one B press."""
    total = 0.0
    for machine in parse_machines(lines):
        best = 0.0
        for a in range(_MAX_PRESSES + 1):
            for b in range(1, _MAX_PRESSES - a + 1):
                x = machine.b[0] * b + machine.a[0] * a
                y = machine.b[1] * b + machine.a[1] * a
                if x == machine.prize[0] and y == machine.prize[1]:
                    best = max(best, float(b + 3 * a))
        total += best
    return int(total)


def _snap(value: float) -> float:
    diff = abs(value - math.trunc(value))
    if diff > 0.99:
        value = float(math.ceil(value))
    if diff < 0.01:
        value = float(math.floor(value))
    return value


def part_two(lines: Sequence[str]) -> int:
    """Solve the two linear equations directly with prizes moved far away."""
    total = 0
    for machine in parse_machines(lines):
        ax, ay = machine.a
        bx, by = machine.b
        px = machine.prize[0] + _PRIZE_OFFSET
        py = machine.prize[1] + _PRIZE_OFFSET
        try:
            b = (px * ay / ax - py) / (bx * ay / ax - by)
            a = (px - b * bx) / ax
        except ZeroDivisionError:
            continue
        if not (math.isfinite(a) and math.isfinite(b)):
            continue
        a, b = _snap(a), _snap(b)
        if a == math.trunc(a) and b == math.trunc(b):
            total += int(b) + int(3 * a)
    return total


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))