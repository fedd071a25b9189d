"""Binary boarding: decode boarding passes into seat ids."""

from __future__ import annotations

import re
from typing import Sequence

_CODE = re.compile(r"[FB]{7}[LR]{3}")
_BITS = str.maketrans("FBLR", "0101")


def seat_id(code: str) -> int:
    """Row times 8 plus column, where F/L pick the lower and B/R the upper half."""
    if not _CODE.fullmatch(code):
        raise ValueError(f"invalid boarding pass: {code!r}")
    row = int(code[:7].translate(_BITS), 2)
    column = int(code[7:].translate(_BITS), 2)
    return row * 8 + column


def part_one(lines: Sequence[str]) -> int:
    """Highest seat id."""
    return max((seat_id(line) for line in lines), default=0)


def part_two(lines: Sequence[str]) -> int:
    """The missing id just after the first gap in the sorted ids."""
    ids = sorted(seat_id(line) for line in lines)
    for current, following in zip(ids, ids[1:]):
        if following - current > 1:
            return current + 1
    raise ValueError("no free seat between boarding passes")


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))