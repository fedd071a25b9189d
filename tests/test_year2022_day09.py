import pytest

from aocsolve.toolbox import Coord
from aocsolve.year2022.day09 import follow, parse_moves, part_one, part_two

EXAMPLE = ["R 4", "U 4", "L 3", "D 1", "R 4", "D 1", "L 5", "R 2"]
LARGER = ["R 5", "U 8", "L 8", "D 3", "R 17", "D 10", "L 25", "U 20"]


def test_part_one_example():
    assert part_one(EXAMPLE) == 13


def test_part_two_example():
    assert part_two(EXAMPLE) == 1


def test_part_two_larger_example():
    assert part_two(LARGER) == 36


def test_parse_moves():
    assert parse_moves(["R 4", "U 2"]) == [("R", 4), ("U", 2)]


def test_follow_adjacent_stays():
    assert follow(Coord(0, 0), Coord(1, 1)) is None


@pytest.mark.parametrize("head", [Coord(2, 0), Coord(2, 1), Coord(2, 2), Coord(-1, -2)])
def test_follow_ends_adjacent(head):
    tail = Coord(0, 0)
    moved = follow(tail, head)
    assert moved.distance(head) < 1.5
    assert moved.distance(tail) < 1.5


def test_single_step_does_not_move_tail():
    assert part_one(["R 1"]) == part_one([])


def test_longer_rope_visits_no_more():
    assert part_two(LARGER) <= part_one(LARGER)


def test_bad_direction():
    with pytest.raises(ValueError):
        parse_moves(["X 3"])


def test_bad_count():
    with pytest.raises(ValueError):
        parse_moves(["R x"])