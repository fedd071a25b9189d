"""Adapter array: joltage differences and arrangements of adapters."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from aocsolve.toolbox import to_ints


def _adapters(lines: Sequence[str]) -> list[int]:
    return sorted(to_ints(*lines))


def part_one(lines: Sequence[str]) -> int:
    """Count of 1-jolt differences times count of 3-jolt differences in the full chain."""
    chain = [0, *_adapters(lines)]
    chain.append(chain[-1] + 3)
    differences = Counter(b - a for a, b in zip(chain, chain[1:]))
    return differences[1] * differences[3]


def part_two(lines: Sequence[str]) -> int:
    """Number of distinct adapter arrangements from the outlet."""
    ways = {0: 1}
    for n in _adapters(lines):
        ways[n] = sum(ways.get(n - step, 0) for step in (1, 2, 3))
    return max(ways.values())


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))