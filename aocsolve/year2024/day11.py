"""Plutonian pebbles: stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from aocsolve.toolbox import to_int, to_ints


def blink(stones: Iterable[int]) -> list[int]:
    """Apply one blink: 0 becomes 1, even-digit stones split, others times 2024."""
    result: list[int] = []
    for stone in stones:
        if stone == 0:
            result.append(1)
            continue
        text = str(stone)
        if len(text) % 2 == 0:
            half = len(text) // 2
            result.extend((to_int(text[:half]), to_int(text[half:])))
            continue
        result.append(stone * 2024)
    return result


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after ``blinks`` blinks, tracked by value frequency."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, n in counts.items():
            for child in blink([stone]):
                following[child] += n
        counts = following
    return sum(counts.values())


def _stones(lines: Sequence[str]) -> list[int]:
    if not lines:
        raise ValueError("empty input")
    return to_ints(*lines[0].split(" "))


def part_one(lines: Sequence[str]) -> int:
    return count_stones(_stones(lines), 25)


def part_two(lines: Sequence[str]) -> int:
    return count_stones(_stones(lines), 75)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))