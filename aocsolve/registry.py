"""Lookup of the puzzle solvers by year and day."""

from __future__ import annotations

from typing import Callable, Sequence

from aocsolve.year2020 import day01 as y2020_day01
from aocsolve.year2020 import day02 as y2020_day02
from aocsolve.year2020 import day03 as y2020_day03
from aocsolve.year2020 import day04 as y2020_day04
from aocsolve.year2020 import day05 as y2020_day05
from aocsolve.year2020 import day06 as y2020_day06
from aocsolve.year2020 import day07 as y2020_day07
from aocsolve.year2020 import day10 as y2020_day10
from aocsolve.year2021 import day01 as y2021_day01
from aocsolve.year2021 import day02 as y2021_day02
from aocsolve.year2022 import day01 as y2022_day01
from aocsolve.year2022 import day02 as y2022_day02
from aocsolve.year2022 import day03 as y2022_day03
from aocsolve.year2022 import day04 as y2022_day04
from aocsolve.year2022 import day05 as y2022_day05
from aocsolve.year2022 import day06 as y2022_day06
from aocsolve.year2022 import day07 as y2022_day07
from aocsolve.year2022 import day08 as y2022_day08
from aocsolve.year2022 import day09 as y2022_day09
from aocsolve.year2022 import day10 as y2022_day10
from aocsolve.year2022 import day11 as y2022_day11
from aocsolve.year2022 import day12 as y2022_day12
from aocsolve.year2024 import day01 as y2024_day01
from aocsolve.year2024 import day02 as y2024_day02
from aocsolve.year2024 import day03 as y2024_day03
from aocsolve.year2024 import day04 as y2024_day04
from aocsolve.year2024 import day05 as y2024_day05
from aocsolve.year2024 import day06 as y2024_day06
from aocsolve.year2024 import day07 as y2024_day07
from aocsolve.year2024 import day08 as y2024_day08
from aocsolve.year2024 import day09 as y2024_day09
from aocsolve.year2024 import day10 as y2024_day10
from aocsolve.year2024 import day11 as y2024_day11
from aocsolve.year2024 import day12 as y2024_day12
from aocsolve.year2024 import day13 as y2024_day13
from aocsolve.year2024 import day14 as y2024_day14
from aocsolve.year2024 import day15 as y2024_day15
from aocsolve.year2024 import day16 as y2024_day16

Solver = Callable[[Sequence[str]], None]

_SOLVERS: dict[str, dict[str, Solver]] = {
    "2020": {
        "01": y2020_day01.run,
        "02": y2020_day02.run,
        "03": y2020_day03.run,
        "04": y2020_day04.run,
        "05": y2020_day05.run,
        "06": y2020_day06.run,
        "07": y2020_day07.run,
        "10": y2020_day10.run,
    },
    "2021": {
        "01": y2021_day01.run,
        "02": y2021_day02.run,
    },
    "2022": {
        "01": y2022_day01.run,
        "02": y2022_day02.run,
        "03": y2022_day03.run,
        "04": y2022_day04.run,
        "05": y2022_day05.run,
        "06": y2022_day06.run,
        "07": y2022_day07.run,
        "08": y2022_day08.run,
        "09": y2022_day09.run,
        "10": y2022_day10.run,
        "11": y2022_day11.run,
        "12": y2022_day12.run,
    },
    "2024": {
        "01": y2024_day01.run,
        "02": y2024_day02.run,
        "03": y2024_day03.run,
        "04": y2024_day04.run,
        "05": y2024_day05.run,
        "06": y2024_day06.run,
        "07": y2024_day07.run,
        "08": y2024_day08.run,
        "09": y2024_day09.run,
        "10": y2024_day10.run,
        "11": y2024_day11.run,
        "12": y2024_day12.run,
        "13": y2024_day13.run,
        "14": y2024_day14.run,
        "15": y2024_day15.run,
        "16": y2024_day16.run,
    },
}


class UnknownPuzzleError(LookupError):
    """No solver exists for the requested year or day."""


def _year(year: str) -> dict[str, Solver]:
    try:
        return _SOLVERS[year]
    except KeyError:
        raise UnknownPuzzleError(f"year {year} does not exist") from None


def available_days(year: str) -> list[str]:
    """Two-digit days that have a solver in ``year``, in order."""
    return sorted(_year(year))


def get_solver(year: str, day: str) -> Solver:
    """The function that solves and prints the puzzle of ``year`` and ``day``."""
    days = _year(year)
    try:
        return days[day]
    except KeyError:
        raise UnknownPuzzleError(f"day {day} does not exist") from None