import pytest

from aocsolve.year2020.day01 import part_one, part_two

EXAMPLE = ["1721", "979", "366", "299", "675", "1456"]


def test_part_one_example():
    assert part_one(EXAMPLE) == 514579


def test_part_two_example():
    assert part_two(EXAMPLE) == 241861950


def test_no_pair():
    with pytest.raises(ValueError):
        part_one(["1", "2"])


def test_invalid_number():
    with pytest.raises(ValueError):
        part_one(["12a"])