"""Handy haversacks: which bags hold the shiny gold bag and what it holds."""

from __future__ import annotations

import re
from collections import deque
from typing import Mapping, Sequence

TARGET = "shinygoldbag"

_INNER = re.compile(r"([0-9)]) ([a-z]+) ([a-z]+) (bag)")

Rules = dict[str, list[tuple[str, int]]]


def parse_rules(lines: Sequence[str]) -> Rules:
    """Map each outer bag to its ``(inner bag, quantity)`` list.

    Bag names lose their spaces and trailing ``s``: ``"light red bags"`` is ``"lightredbag"``.
    """
    rules: Rules = {}
    for line in lines:
        parts = line.split("contain")
        if len(parts) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        outer = parts[0].replace(" ", "").rstrip("s")
        contents = rules.setdefault(outer, [])
        for inner in parts[1].split(","):
            match = _INNER.search(inner)
            if match is None:
                continue
            quantity = int(match.group(1)) if match.group(1).isdigit() else 0
            contents.append((match.group(2) + match.group(3) + match.group(4), quantity))
    return rules


def part_one(lines: Sequence[str]) -> int:
    """Number of bag colours that can eventually contain a shiny gold bag."""
    holders: dict[str, set[str]] = {}
    for outer, contents in parse_rules(lines).items():
        for inner, _ in contents:
            holders.setdefault(inner, set()).add(outer)
    seen: set[str] = set()
    queue = deque([TARGET])
    while queue:
        current = queue.popleft()
        if current in seen:
            continue
        seen.add(current)
        queue.extend(holders.get(current, ()))
    return len(seen) - 1


def _bags_inside(rules: Mapping[str, list[tuple[str, int]]], bag: str,
                 memo: dict[str, int], active: set[str]) -> int:
    if bag in memo:
        return memo[bag]
    if bag in active:
        raise ValueError(f"bag {bag!r} contains itself")
    active.add(bag)
    total = sum(
        quantity * (1 + _bags_inside(rules, inner, memo, active))
        for inner, quantity in rules.get(bag, [])
    )
    active.discard(bag)
    memo[bag] = total
    return total


def part_two(lines: Sequence[str]) -> int:
    """Total number of bags inside one shiny gold bag."""
    return _bags_inside(parse_rules(lines), TARGET, {}, set())


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))