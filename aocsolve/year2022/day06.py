"""Tuning trouble: find the first run of distinct characters in a datastream."""

from __future__ import annotations

from typing import Sequence


def marker_end(line: str, size: int) -> int | None:
    """Position just after the first ``size`` distinct characters, or ``None``."""
    for start in range(len(line) - size + 1):
        if len(set(line[start : start + size])) == size:
            return start + size
    return None


def run(lines: Sequence[str]) -> None:
    for line in lines:
        end = marker_end(line, 4)
        if end is not None:
            print("Part 1:", end)
    for line in lines:
        end = marker_end(line, 14)
        if end is not None:
            print("Part 2:", end)