from collections import Counter

import pytest

from aocsolve.year2024.day09 import (
    checksum,
    compact_blocks,
    compact_files,
    expand,
    part_one,
    part_two,
    run,
)

EXAMPLE = "2333133121414131402"


def test_example_part_one():
    assert part_one([EXAMPLE]) == 1928


def test_example_part_two():
    assert part_two([EXAMPLE]) == 2858


def test_expand_lengths_match_digits():
    layout = expand(EXAMPLE)
    assert len(layout) == sum(int(ch) for ch in EXAMPLE)
    assert layout.count(None) == sum(int(ch) for ch in EXAMPLE[1::2])


def test_expand_numbers_files_in_order():
    layout = expand(EXAMPLE)
    ids = [value for value in layout if value is not None]
    assert ids == sorted(ids)
    assert set(ids) == set(range(len(EXAMPLE[::2])))


def test_compact_blocks_leaves_no_gaps():
    layout = expand(EXAMPLE)
    packed = compact_blocks(layout)
    assert None not in packed
    assert set(packed) <= {value for value in layout if value is not None}


def test_compact_files_keeps_every_block():
    layout = expand(EXAMPLE)
    moved = compact_files(layout)
    assert len(moved) == len(layout)
    assert Counter(v for v in moved if v is not None) == Counter(
        v for v in layout if v is not None
    )


def test_compact_files_keeps_files_contiguous():
    moved = compact_files(expand(EXAMPLE))
    for file_id in {v for v in moved if v is not None}:
        positions = [i for i, v in enumerate(moved) if v == file_id]
        assert positions == list(range(positions[0], positions[-1] + 1))


def test_compact_files_does_not_move_files_right():
    layout = expand(EXAMPLE)
    moved = compact_files(layout)
    for file_id in {v for v in layout if v is not None}:
        assert moved.index(file_id) <= layout.index(file_id)


def test_checksum_ignores_free_space():
    assert checksum([None, 3]) == 3
    assert checksum(expand(EXAMPLE)) == checksum(
        [v for v in expand(EXAMPLE)] + [None, None]
    )


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        expand("12a")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part_one([])


def test_run_prints_both_parts(capsys):
    run([EXAMPLE])
    out = capsys.readouterr().out
    assert f"Part 1: {part_one([EXAMPLE])}" in out
    assert f"Part 2: {part_two([EXAMPLE])}" in out