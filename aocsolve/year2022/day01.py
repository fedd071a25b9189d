"""Calorie counting: totals per elf, where each elf's list is closed by a blank line."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_int


def _elf_totals(lines: Sequence[str]) -> list[int]:
    """Sorted totals of the groups that are terminated by a blank line."""
    totals: list[int] = []
    running = 0
    for line in lines:
        if line == "":
            totals.append(running)
            running = 0
            continue
        running += to_int(line)
    return sorted(totals)


def part_one(lines: Sequence[str]) -> int:
    totals = _elf_totals(lines)
    if not totals:
        raise ValueError("no complete elf inventory in input")
    return totals[-1]


def part_two(lines: Sequence[str]) -> int:
    totals = _elf_totals(lines)
    if len(totals) < 3:
        raise ValueError("at least three complete elf inventories are needed")
    return sum(totals[-3:])


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))