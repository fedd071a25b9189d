"""Command line entry point: solve one puzzle from an input file."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from aocsolve.registry import UnknownPuzzleError, available_days, get_solver

_YEAR = re.compile(r"[0-9]{4}")
_DAY = re.compile(r"[0-9]{2}")
_NAME = re.compile(r"[a-z0-9]+")


def input_path(year: str, day: str, name: str) -> Path:
    """Where the input file ``name`` for a puzzle lives."""
    return Path("inputs", f"year{year}", f"day{day}", name)


def read_input(path: Path | str) -> list[str]:
    """The file's lines without line endings; a final newline adds no empty line."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("exactly 3 arguments required")
        return 1
    year, day, name = args
    if not _YEAR.fullmatch(year):
        print("first argument must be a valid year")
        return 2
    if not _DAY.fullmatch(day):
        print("second argument must be a valid day")
        return 3
    if not _NAME.fullmatch(name):
        print("third argument must only contain alphanumeric characters")
        return 4

    try:
        available_days(year)
        solver = get_solver(year, day)
    except UnknownPuzzleError as exc:
        print(exc)
        return 1

    try:
        lines = read_input(input_path(year, day, name))
    except (OSError, UnicodeDecodeError) as exc:
        print(f"parse fail: {exc}")
        return 1

    print(f"===== {year}-12-{day} {name} =====")
    solver(lines)
    return 0