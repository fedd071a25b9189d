"""Monkey in the middle: track items thrown between monkeys."""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Optional, Sequence

from aocsolve.toolbox import to_int, to_ints

_OPERATORS = ("*", "+")


@dataclass(frozen=True)
class Operation:
    """``new = left operator right``; an operand of ``None`` stands for the old value."""

    left: Optional[int]
    operator: str
    right: Optional[int]

    def apply(self, old: int) -> int:
        left = old if self.left is None else self.left
        right = old if self.right is None else self.right
        if self.operator == "*":
            return left * right
        if self.operator == "+":
            return left + right
        raise ValueError(f"unsupported operator: {self.operator!r}")


@dataclass
class Monkey:
    items: list[int]
    operation: Operation
    divisor: int
    if_true: int
    if_false: int


def _operand(text: str) -> Optional[int]:
    return None if text == "old" else to_int(text)


def _parse_operation(text: str) -> Operation:
    parts = text.split(" ")
    if len(parts) != 5 or parts[3] not in _OPERATORS:
        raise ValueError(f"malformed operation: {text!r}")
    return Operation(_operand(parts[2]), parts[3], _operand(parts[4]))


def _after(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ValueError(f"expected {prefix!r} in {text!r}")
    return text[len(prefix) :]


def parse_monkeys(lines: Sequence[str]) -> list[Monkey]:
    """Parse the notes into monkeys, indexed by their number."""
    raw: dict[int, dict] = {}
    current: Optional[dict] = None
    for line in lines:
        if not line:
            continue
        label, _, value = line.partition(": ")
        label = label.strip()
        if label.startswith("Monkey"):
            words = label.split(" ")
            if len(words) < 2:
                raise ValueError(f"malformed monkey header: {line!r}")
            current = {}
            raw[to_int(words[1].strip(":"))] = current
            continue
        if current is None:
            raise ValueError(f"note before any monkey: {line!r}")
        if label == "Starting items":
            current["items"] = to_ints(*value.split(", "))
        elif label == "Operation":
            current["operation"] = _parse_operation(value)
        elif label == "Test":
            current["divisor"] = to_int(_after(value, "divisible by "))
        elif label == "If true":
            current["if_true"] = to_int(_after(value, "throw to monkey "))
        elif label == "If false":
            current["if_false"] = to_int(_after(value, "throw to monkey "))

    if sorted(raw) != list(range(len(raw))):
        raise ValueError("monkeys must be numbered 0, 1, 2, ... without gaps")
    try:
        monkeys = [Monkey(**raw[number]) for number in range(len(raw))]
    except TypeError as exc:
        raise ValueError(f"incomplete monkey description: {exc}") from None
    for monkey in monkeys:
        if monkey.divisor == 0:
            raise ValueError("divisor must not be zero")
        for target in (monkey.if_true, monkey.if_false):
            if not 0 <= target < len(monkeys):
                raise ValueError(f"no monkey {target} to throw to")
    return monkeys


def monkey_business(lines: Sequence[str], rounds: int, relief: bool) -> int:
    """Product of the two highest inspection counts after ``rounds`` rounds."""
    monkeys = parse_monkeys(lines)
    if len(monkeys) < 2:
        raise ValueError("at least two monkeys are needed")
    modulus = prod(monkey.divisor for monkey in monkeys)
    inspected = [0] * len(monkeys)
    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            items, monkey.items = monkey.items, []
            inspected[index] += len(items)
            for item in items:
                worry = monkey.operation.apply(item)
                worry = worry // 3 if relief else worry % modulus
                target = monkey.if_true if worry % monkey.divisor == 0 else monkey.if_false
                monkeys[target].items.append(worry)
    first, second = sorted(inspected)[-2:]
    return first * second


def part_one(lines: Sequence[str]) -> int:
    return monkey_business(lines, 20, relief=True)


def part_two(lines: Sequence[str]) -> int:
    return monkey_business(lines, 10_000, relief=False)


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))