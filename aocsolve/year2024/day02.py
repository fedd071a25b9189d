"""Red-nosed reports: find reports whose levels change safely."""

from __future__ import annotations

from typing import Sequence

from aocsolve.toolbox import to_ints


def _reports(lines: Sequence[str]) -> list[list[int]]:
    return [to_ints(*line.split(" ")) for line in lines]


def is_safe(report: Sequence[int]) -> bool:
    """Strictly monotonic with every step between 1 and 3."""
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    increasing = report[0] < report[1]
    for a, b in zip(report, report[1:]):
        if not 1 <= abs(a - b) <= 3:
            return False
        if increasing and a > b:
            return False
        if not increasing and a < b:
            return False
    return True


def part_one(lines: Sequence[str]) -> int:
    return sum(1 for report in _reports(lines) if is_safe(report))


def part_two(lines: Sequence[str]) -> int:
    """Safe reports, counting those made safe by removing a single level."""
    count = 0
    for report in _reports(lines):
        if is_safe(report):
            count += 1
            continue
        if any(is_safe(report[:i] + report[i + 1 :]) for i in range(len(report))):
            count += 1
    return count


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))