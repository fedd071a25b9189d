"""Custom customs: questions answered by groups of people."""

from __future__ import annotations

from itertools import groupby
from typing import Iterator, Sequence


def _groups(lines: Sequence[str]) -> Iterator[list[set[str]]]:
    for blank, group in groupby(lines, key=lambda line: line == ""):
        if not blank:
            yield [set(line) for line in group]


def part_one(lines: Sequence[str]) -> int:
    """Sum over groups of questions anyone answered."""
    return sum(len(set().union(*people)) for people in _groups(lines))


def part_two(lines: Sequence[str]) -> int:
    """Sum over groups of questions everyone answered."""
    return sum(len(set.intersection(*people)) for people in _groups(lines))


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))