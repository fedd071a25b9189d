"""Disk fragmenter: compact a disk map block by block or file by file."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Optional, Sequence

from aocsolve.toolbox import to_int

Layout = list[Optional[int]]


@dataclass
class _Span:
    start: int
    end: int
    length: int
    value: Optional[int]


def expand(disk_map: str) -> Layout:
    """Turn the dense map into one entry per block: a file id, or ``None`` for free space."""
    layout: Layout = []
    file_id = 0
    for index, digit in enumerate(disk_map):
        length = to_int(digit)
        if index % 2:
            layout.extend([None] * length)
        else:
            layout.extend([file_id] * length)
            file_id += 1
    return layout


def compact_blocks(layout: Sequence[Optional[int]]) -> Layout:
    """Move single blocks from the end into the leftmost gaps; return the packed prefix."""
    blocks = list(layout)
    i, j = 0, len(blocks) - 1
    while i < j:
        if blocks[i] is not None:
            i += 1
            continue
        if blocks[j] is None:
            j -= 1
            continue
        blocks[i], blocks[j] = blocks[j], None
        i += 1
    return blocks[:j]


def compact_files(layout: Sequence[Optional[int]]) -> Layout:
    """Move whole files, highest id first, into the leftmost gap that fits before them."""
    blocks = list(layout)
    spans: list[_Span] = []
    position = 0
    for value, group in groupby(blocks):
        length = sum(1 for _ in group)
        spans.append(_Span(position, position + length, length, value))
        position += length
    frees = [span for span in spans if span.value is None]
    files = [span for span in spans if span.value is not None]

    for file in reversed(files):
        for free in frees:
            if free.length < file.length:
                continue
            if free.end > file.start:
                break
            blocks[free.start : free.start + file.length] = [file.value] * file.length
            blocks[file.start : file.end] = [None] * file.length
            free.start += file.length
            free.length -= file.length
            break
    return blocks


def checksum(layout: Sequence[Optional[int]]) -> int:
    """Sum of position times file id over all occupied blocks."""
    return sum(index * value for index, value in enumerate(layout) if value is not None)


def _disk_map(lines: Sequence[str]) -> str:
    if not lines:
        raise ValueError("empty input")
    return lines[0]


def part_one(lines: Sequence[str]) -> int:
    return checksum(compact_blocks(expand(_disk_map(lines))))


def part_two(lines: Sequence[str]) -> int:
    return checksum(compact_files(expand(_disk_map(lines))))


def run(lines: Sequence[str]) -> None:
    print("Part 1:", part_one(lines))
    print("Part 2:", part_two(lines))