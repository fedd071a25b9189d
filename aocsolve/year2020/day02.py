"""Password philosophy: check passwords against their policies."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_POLICY = re.compile(r"\b([0-9].*)-([0-9].*) ([a-z]): ([a-z].*)\b")


@dataclass(frozen=True)
class PasswordPolicy:
    minimum: int
    maximum: int
    letter: str
    password: str

    def valid_by_count(self) -> bool:
        """The letter occurs between minimum and maximum times."""
        return self.minimum <= self.password.count(self.letter) <= self.maximum

    def valid_by_position(self) -> bool:
        """Exactly one of the two (1-based) positions holds the letter."""
        try:
            first = self.password[self.minimum - 1] == self.letter
            second = self.password[self.maximum - 1] == self.letter
        except IndexError:
            raise ValueError(f"position outside password {self.password!r}") from None
        if self.minimum < 1:
            raise ValueError("positions start at 1")
        return first != second


def parse_policies(lines: Sequence[str]) -> list[PasswordPolicy]:
    """Parse ``"1-3 a: abcde"`` lines."""
    policies = []
    for line in lines:
        match = _POLICY.search(line)
        if match is None:
            raise ValueError(f"malformed policy: {line!r}")
        low, high, letter, password = match.groups()
        try:
            policies.append(PasswordPolicy(int(low), int(high), letter, password))
        except ValueError:
            raise ValueError(f"malformed policy: {line!r}") from None
    return policies


def part_one(lines: Sequence[str]) -> int:
    return sum(1 for policy in parse_policies(lines) if policy.valid_by_count())


def part_two(lines: Sequence[str]) -> int:
    return sum(1 for policy in parse_policies(lines) if policy.valid_by_position())


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))