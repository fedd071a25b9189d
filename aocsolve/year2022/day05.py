"""Supply stacks: move crates one at a time or several at once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from aocsolve.toolbox import to_int

Crates = dict[int, list[str]]


@dataclass(frozen=True)
class Move:
    """Move ``count`` crates from stack ``source`` to stack ``target``."""

    count: int
    source: int
    target: int


def parse(lines: Sequence[str]) -> tuple[Crates, list[Move]]:
    """Split the drawing into stacks (top crate first) and the list of moves."""
    lines = list(lines)
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("missing blank line between drawing and moves") from None

    crates: Crates = {}
    for line in lines[:blank]:
        for stack, pos in enumerate(range(1, len(line), 4), start=1):
            label = line[pos]
            if "A" <= label <= "Z":
                crates.setdefault(stack, []).append(label)

    moves = []
    for line in lines[blank + 1 :]:
        words = line.split(" ")
        if len(words) < 6:
            raise ValueError(f"malformed move: {line!r}")
        moves.append(Move(to_int(words[1]), to_int(words[3]), to_int(words[5])))
    return crates, moves


def rearrange(crates: Mapping[int, Sequence[str]], moves: Sequence[Move], multiple: bool) -> str:
    """Apply the moves to a copy of the stacks and return the top crate of each stack."""
    stacks: Crates = {key: list(value) for key, value in crates.items()}
    for move in moves:
        source = stacks.get(move.source, [])
        if len(source) < move.count:
            raise ValueError(f"stack {move.source} holds fewer than {move.count} crates")
        target = stacks.setdefault(move.target, [])
        if multiple:
            taken = source[: move.count]
            del source[: move.count]
            target[:0] = taken
        else:
            for _ in range(move.count):
                target.insert(0, source.pop(0))

    tops = []
    for key in sorted(stacks):
        if not stacks[key]:
            raise ValueError(f"stack {key} is empty")
        tops.append(stacks[key][0])
    return "".join(tops)


def part_one(lines: Sequence[str]) -> str:
    crates, moves = parse(lines)
    return rearrange(crates, moves, multiple=False)


def part_two(lines: Sequence[str]) -> str:
    crates, moves = parse(lines)
    return rearrange(crates, moves, multiple=True)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))