"""Bridge repair: find equations made true by inserting operators left to right."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Sequence

from aocsolve.toolbox import to_int, to_ints

_ADD, _MUL = 0, 1


@dataclass(frozen=True)
class Equation:
    target: int
    numbers: tuple[int, ...]


def parse_equations(lines: Sequence[str]) -> list[Equation]:
    """Parse ``"190: 10 19"`` lines."""
    equations = []
    for line in lines:
        parts = line.split(": ")
        if len(parts) < 2:
            raise ValueError(f"malformed equation: {line!r}")
        equations.append(Equation(to_int(parts[0]), tuple(to_ints(*parts[1].split(" ")))))
    return equations


def solvable(equation: Equation, operator_count: int) -> bool:
    """Whether some operator choice hits the target.

    With two operators these are ``+`` and ``*``; three adds concatenation.
    Evaluation is strictly left to right and gives up once the value exceeds the target.
    """
    if operator_count not in (2, 3):
        raise ValueError(f"operator count must be 2 or 3, got {operator_count}")
    if not equation.numbers:
        raise ValueError("an equation needs at least one number")
    first, *rest = equation.numbers
    for operators in product(range(operator_count), repeat=len(rest)):
        value = first
        for operator, number in zip(operators, rest):
            if value > equation.target:
                break
            if operator == _ADD:
                value += number
            elif operator == _MUL:
                value *= number
            else:
                value = to_int(f"{value}{number}")
        if value == equation.target:
            return True
    return False


def part_one(lines: Sequence[str]) -> int:
    return sum(e.target for e in parse_equations(lines) if solvable(e, 2))


def part_two(lines: Sequence[str]) -> int:
    total = 0
    for equation in parse_equations(lines):
        if solvable(equation, 2) or solvable(equation, 3):
            total += equation.target
    return total


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))