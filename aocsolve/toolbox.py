"""Shared helpers: strict number parsing, grid coordinates and character grids."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def to_int(text: str) -> int:
    """Parse a base-10 integer with an optional sign, rejecting anything else."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def to_ints(*texts: str) -> list[int]:
    """Parse every argument with :func:`to_int`."""
    return [to_int(text) for text in texts]


def to_float(text: str) -> float:
    """Parse a floating point number."""
    return float(text)


def to_floats(*texts: str) -> list[float]:
    """Parse every argument with :func:`to_float`."""
    return [to_float(text) for text in texts]


@dataclass(frozen=True, order=True)
class Coord:
    """A row/column position on a grid."""

    r: int = 0
    c: int = 0

    def moved(self, *directions: str) -> Coord:
        """Return the position reached by taking each of the ``U``/``R``/``D``/``L`` steps."""
        r, c = self.r, self.c
        for direction in directions:
            try:
                step = DIRECTIONS[direction]
            except KeyError:
                raise ValueError(f"unknown direction: {direction!r}") from None
            r += step.r
            c += step.c
        return Coord(r, c)

    def distance(self, other: Coord) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.r - other.r, self.c - other.c)

    def __add__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.r + other.r, self.c + other.c)

    def __sub__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.r - other.r, self.c - other.c)

    def __str__(self) -> str:
        return f"{self.r},{self.c}"


DIRECTIONS: dict[str, Coord] = {
    "U": Coord(-1, 0),
    "R": Coord(0, 1),
    "D": Coord(1, 0),
    "L": Coord(0, -1),
}

DIRECTION_LIST: tuple[Coord, ...] = tuple(DIRECTIONS.values())

_Key = Union[Coord, "tuple[int, int]"]


def _unpack(key: _Key) -> tuple[int, int]:
    if isinstance(key, Coord):
        return key.r, key.c
    r, c = key
    return r, c


class ByteMatrix:
    """A mutable grid of single characters, indexed by :class:`Coord` or ``(r, c)``."""

    __slots__ = ("rows",)

    def __init__(self, rows: Iterable[Iterable[str]]) -> None:
        self.rows: list[list[str]] = [list(row) for row in rows]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ByteMatrix:
        """Build a grid with one row per line."""
        return cls(lines)

    @classmethod
    def filled(cls, height: int, width: int, fill: str) -> ByteMatrix:
        """Build a ``height`` by ``width`` grid holding ``fill`` everywhere."""
        return cls([fill] * width for _ in range(height))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def copy(self) -> ByteMatrix:
        return ByteMatrix(self.rows)

    def inside(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def inside_coord(self, coord: Coord) -> bool:
        return self.inside(coord.r, coord.c)

    def count(self, value: str) -> int:
        return sum(row.count(value) for row in self.rows)

    def count_except(self, value: str) -> int:
        return sum(len(row) - row.count(value) for row in self.rows)

    def find(self, value: str) -> Coord | None:
        """First position holding ``value`` in row-major order, or ``None``."""
        return next((coord for coord, cell in self.cells() if cell == value), None)

    def find_all(self, value: str) -> list[Coord]:
        return [coord for coord, cell in self.cells() if cell == value]

    def cells(self) -> Iterator[tuple[Coord, str]]:
        """Yield every position with its value in row-major order."""
        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                yield Coord(r, c), cell

    def __getitem__(self, coord: _Key) -> str:
        r, c = _unpack(coord)
        return self.rows[r][c]

    def __setitem__(self, coord: _Key, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"grid cells hold single characters, got {value!r}")
        r, c = _unpack(coord)
        self.rows[r][c] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteMatrix):
            return NotImplemented
        return self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self.rows)

    def __repr__(self) -> str:
        return f"ByteMatrix({[''.join(row) for row in self.rows]!r})"