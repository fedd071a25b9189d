import pytest

from aocsolve.toolbox import ByteMatrix, Coord
from aocsolve.year2024.day06 import part_one, part_two, run, walk

EXAMPLE = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]

COLUMN = [".", ".", "^"]
LOOP = [".#..", ".^.#", "#...", "..#."]


def test_part_one_example():
    assert part_one(EXAMPLE) == 41


def test_part_two_example():
    assert part_two(EXAMPLE) == 6


def test_walk_detects_loop():
    grid = ByteMatrix.from_lines(LOOP)
    assert walk(grid, Coord(1, 1)) is True


def test_walk_leaves_open_grid_and_marks_path():
    grid = ByteMatrix.from_lines(COLUMN)
    assert walk(grid, Coord(2, 0)) is False
    assert grid.count("X") == grid.height


def test_straight_walk_visits_whole_column():
    assert part_one(COLUMN) == len(COLUMN)


def test_no_loops_possible_in_a_column():
    assert part_two(COLUMN) == part_two(["^"])


def test_loop_positions_bounded_by_path():
    assert part_two(EXAMPLE) < part_one(EXAMPLE)


def test_missing_guard_rejected():
    with pytest.raises(ValueError):
        part_one(["...", "..."])


def test_walk_from_empty_cell_rejected():
    with pytest.raises(ValueError):
        walk(ByteMatrix.from_lines(["."]), Coord(0, 0))


def test_run_prints(capsys):
    run(COLUMN)
    out = capsys.readouterr().out
    assert f"Part 1: {len(COLUMN)}" in out