"""Rope bridge: simulate a rope's tail following its head."""

from __future__ import annotations

from typing import Optional, Sequence

from aocsolve.toolbox import DIRECTIONS, Coord, to_int

_FOLLOW_STEPS = ("U", "UR", "R", "DR", "D", "DL", "L", "UL")
_KNOTS = 10


def parse_moves(lines: Sequence[str]) -> list[tuple[str, int]]:
    """Parse ``"R 4"`` lines into ``(direction, steps)`` pairs."""
    moves = []
    for line in lines:
        parts = line.split(" ")
        if len(parts) < 2 or not parts[0] or parts[0][0] not in DIRECTIONS:
            raise ValueError(f"malformed move: {line!r}")
        moves.append((parts[0][0], to_int(parts[1])))
    return moves


def follow(tail: Coord, head: Coord) -> Optional[Coord]:
    """Where ``tail`` moves to keep up with ``head``, or ``None`` if it stays put."""
    if tail.distance(head) < 1.5:
        return None
    best: Optional[Coord] = None
    best_distance = 100.0
    for step in _FOLLOW_STEPS:
        candidate = tail.moved(*step)
        distance = candidate.distance(head)
        if distance < best_distance:
            best_distance, best = distance, candidate
        if distance == 1:
            return candidate
    return best


def part_one(lines: Sequence[str]) -> int:
    head = tail = Coord()
    visited = {tail}
    for direction, steps in parse_moves(lines):
        for _ in range(steps):
            previous = head
            head = head.moved(direction)
            if tail.distance(head) >= 1.5:
                tail = previous
                visited.add(tail)
    return len(visited)


def part_two(lines: Sequence[str]) -> int:
    knots = [Coord()] * _KNOTS
    visited = {knots[-1]}
    for direction, steps in parse_moves(lines):
        for _ in range(steps):
            knots[0] = knots[0].moved(direction)
            for i in range(1, _KNOTS):
                moved = follow(knots[i], knots[i - 1])
                if moved is None:
                    break
                knots[i] = moved
                if i == _KNOTS - 1:
                    visited.add(moved)
    return len(visited)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))