"""Print queue: check and repair page orderings against rules."""

from __future__ import annotations

from typing import Mapping, Sequence, Set

from aocsolve.toolbox import to_int, to_ints

Rules = dict[int, set[int]]


def parse(lines: Sequence[str]) -> tuple[Rules, list[list[int]]]:
    """Rules ``before|after`` up to the first blank line, then comma separated updates."""
    rules: Rules = {}
    updates: list[list[int]] = []
    in_updates = False
    for line in lines:
        if line == "":
            in_updates = True
            continue
        if not in_updates:
            parts = line.split("|")
            if len(parts) < 2:
                raise ValueError(f"malformed rule: {line!r}")
            rules.setdefault(to_int(parts[0]), set()).add(to_int(parts[1]))
            continue
        updates.append(to_ints(*line.split(",")))
    return rules, updates


def _in_order(rules: Mapping[int, Set[int]], update: Sequence[int]) -> bool:
    for i, page in enumerate(update):
        must_follow = rules.get(page, set())
        if any(earlier in must_follow for earlier in update[:i]):
            return False
    return True


def split_updates(
    rules: Mapping[int, Set[int]], updates: Sequence[Sequence[int]]
) -> tuple[list[list[int]], list[list[int]]]:
    """Separate the correctly ordered updates from the rest."""
    ordered: list[list[int]] = []
    unordered: list[list[int]] = []
    for update in updates:
        (ordered if _in_order(rules, update) else unordered).append(list(update))
    return ordered, unordered


def _middle_sum(updates: Sequence[Sequence[int]]) -> int:
    return sum(update[len(update) // 2] for update in updates)


def part_one(lines: Sequence[str]) -> int:
    rules, updates = parse(lines)
    ordered, _ = split_updates(rules, updates)
    return _middle_sum(ordered)


def part_two(lines: Sequence[str]) -> int:
    """Middle pages of the wrongly ordered updates after reordering them."""
    rules, updates = parse(lines)
    _, unordered = split_updates(rules, updates)
    fixed = []
    for update in unordered:
        followers = {
            page: sum(1 for other in update if other in rules.get(page, set()))
            for page in update
        }
        fixed.append(sorted(update, key=lambda page: -followers[page]))
    return _middle_sum(fixed)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))