"""Mull it over: sum the valid multiplications in corrupted memory."""

from __future__ import annotations

import re
from typing import Sequence

from aocsolve.toolbox import to_int

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_MUL_OR_SWITCH = re.compile(r"mul\(([0-9]+),([0-9]+)\)|don't\(\)|do\(\)")
_DO = "do()"
_DONT = "don't()"


def part_one(lines: Sequence[str]) -> int:
    return sum(
        to_int(m.group(1)) * to_int(m.group(2)) for line in lines for m in _MUL.finditer(line)
    )


def part_two(lines: Sequence[str]) -> int:
    """Like part one, but ``don't()`` disables and ``do()`` re-enables, across lines."""
    total = 0
    enabled = True
    for line in lines:
        for m in _MUL_OR_SWITCH.finditer(line):
            if m.group(0) == _DONT:
                enabled = False
            elif m.group(0) == _DO:
                enabled = True
            elif enabled:
                total += to_int(m.group(1)) * to_int(m.group(2))
    return total


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))