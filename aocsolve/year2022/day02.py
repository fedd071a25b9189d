"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from typing import Sequence

_SHAPES = {"A": 1, "X": 1, "B": 2, "Y": 2, "C": 3, "Z": 3}


def shape_score(move: str) -> int:
    """Score of a shape: rock 1, paper 2, scissors 3."""
    try:
        return _SHAPES[move]
    except KeyError:
        raise ValueError(f"unsupported move: {move!r}") from None


def outcome_score(me: str, opponent: str) -> int:
    """6 for a win, 3 for a draw, 0 for a loss."""
    mine, theirs = shape_score(me), shape_score(opponent)
    if mine == theirs:
        return 3
    if (mine, theirs) in {(1, 3), (2, 1), (3, 2)}:
        return 6
    return 0


# expected outcome -> opponent shape -> score of the shape played plus outcome
_BY_OUTCOME = {
    "X": {"A": shape_score("C"), "B": shape_score("A"), "C": shape_score("B")},
    "Y": {"A": shape_score("A") + 3, "B": shape_score("B") + 3, "C": shape_score("C") + 3},
    "Z": {"A": shape_score("B") + 6, "B": shape_score("C") + 6, "C": shape_score("A") + 6},
}


def _rounds(lines: Sequence[str]) -> list[tuple[str, str]]:
    rounds = []
    for line in lines:
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed round: {line!r}")
        rounds.append((parts[0], parts[1]))
    return rounds


def part_one(lines: Sequence[str]) -> int:
    return sum(shape_score(me) + outcome_score(me, opp) for opp, me in _rounds(lines))


def part_two(lines: Sequence[str]) -> int:
    total = 0
    for opp, wanted in _rounds(lines):
        try:
            total += _BY_OUTCOME[wanted][opp]
        except KeyError:
            raise ValueError(f"unsupported round: {opp} {wanted}") from None
    return total


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))