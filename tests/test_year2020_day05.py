import pytest

from aocsolve.year2020.day05 import part_one, part_two, seat_id


def _code(identifier):
    row, column = divmod(identifier, 8)
    return format(row, "07b").translate(str.maketrans("01", "FB")) + format(
        column, "03b"
    ).translate(str.maketrans("01", "LR"))


@pytest.mark.parametrize(
    "code, expected",
    [("FBFBBFFRLR", 357), ("BFFFBBFRRR", 567), ("BBFFBBFRLL", 820)],
)
def test_seat_id_examples(code, expected):
    assert seat_id(code) == expected


def test_round_trip():
    for identifier in range(0, 1024, 37):
        assert seat_id(_code(identifier)) == identifier


def test_part_one_is_max():
    codes = ["FBFBBFFRLR", "BFFFBBFRRR", "BBFFBBFRLL"]
    assert part_one(codes) == max(seat_id(code) for code in codes)


def test_part_two_finds_gap():
    assert part_two([_code(10), _code(13), _code(11)]) == 12


def test_part_two_without_gap():
    with pytest.raises(ValueError):
        part_two([_code(10), _code(11)])


def test_invalid_code():
    with pytest.raises(ValueError):
        seat_id("FBFBBFFRLX")