"""Rucksack reorganisation: priorities of shared items."""

from __future__ import annotations

import string
from typing import Sequence

_LETTERS = frozenset(string.ascii_letters)


def priority(item: str) -> int:
    """a-z map to 1-26, A-Z to 27-52."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    return ord(item) - ord("A") + 27


def _shared_in_halves(line: str) -> str:
    half = len(line) // 2
    first, second = line[:half], line[half:]
    shared = next((item for item in first if item in second), None)
    if shared is None:
        raise ValueError(f"no item shared by both compartments: {line!r}")
    return shared


def _badge(group: tuple[str, str, str]) -> str:
    first, second, third = group
    common = set(first) & set(second) & set(third) & _LETTERS
    badge = next((item for item in first if item in common), None)
    if badge is None:
        raise ValueError(f"no badge common to group: {group!r}")
    return badge


def part_one(lines: Sequence[str]) -> int:
    return sum(priority(_shared_in_halves(line)) for line in lines)


def part_two(lines: Sequence[str]) -> int:
    groups = zip(*[iter(lines)] * 3)
    return sum(priority(_badge(group)) for group in groups)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))