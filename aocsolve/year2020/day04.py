"""Passport processing: check passports for required and valid fields."""

from __future__ import annotations

import re
from typing import Mapping, Sequence

REQUIRED_FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")

_FOUR_DIGITS = re.compile(r"[0-9]{4}")
_HEIGHT = re.compile(r"([0-9]+)(in|cm)")
_HAIR = re.compile(r"#[0-9a-f]{6}")
_EYE = re.compile(r"amb|blu|brn|gry|grn|hzl|oth")
_PASSPORT_ID = re.compile(r"[0-9]{9}")


def parse_passports(lines: Sequence[str]) -> list[dict[str, str]]:
    """Group ``key:value`` fields into passports separated by blank lines."""
    passports: list[dict[str, str]] = []
    current: dict[str, str] = {}
    for line in [*lines, ""]:
        if line == "":
            passports.append(current)
            current = {}
            continue
        for entry in line.split(" "):
            parts = entry.split(":")
            if len(parts) < 2:
                raise ValueError(f"malformed passport field: {entry!r}")
            current[parts[0]] = parts[1]
    return passports


def has_required_fields(passport: Mapping[str, str]) -> bool:
    """Every field except ``cid`` is present."""
    return all(key in passport for key in REQUIRED_FIELDS)


def _year_between(value: str, low: int, high: int) -> bool:
    return bool(_FOUR_DIGITS.fullmatch(value)) and low <= int(value) <= high


def _valid_height(value: str) -> bool:
    match = _HEIGHT.match(value)
    if match is None:
        return False
    height, unit = int(match.group(1)), match.group(2)
    if unit == "cm":
        return 150 <= height <= 193
    return 59 <= height <= 76


def is_strictly_valid(passport: Mapping[str, str]) -> bool:
    """Every required field holds a value within its rules."""
    return (
        _year_between(passport.get("byr", ""), 1920, 2002)
        and _year_between(passport.get("iyr", ""), 2010, 2020)
        and _year_between(passport.get("eyr", ""), 2020, 2030)
        and _valid_height(passport.get("hgt", ""))
        and bool(_HAIR.fullmatch(passport.get("hcl", "")))
        and bool(_EYE.fullmatch(passport.get("ecl", "")))
        and bool(_PASSPORT_ID.fullmatch(passport.get("pid", "")))
    )


def part_one(lines: Sequence[str]) -> int:
    return sum(1 for passport in parse_passports(lines) if has_required_fields(passport))


def part_two(lines: Sequence[str]) -> int:
    return sum(
        1
        for passport in parse_passports(lines)
        if has_required_fields(passport) and is_strictly_valid(passport)
    )


def run(lines: Sequence[str]) -> None:
    print("Answer 1: " + str(part_one(lines)))
    print("Answer 2: " + str(part_two(lines)))