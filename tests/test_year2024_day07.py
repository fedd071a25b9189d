import pytest

from aocsolve.year2024.day07 import (
    Equation,
    parse_equations,
    part_one,
    part_two,
    run,
    solvable,
)

EXAMPLE = [
    "190: 10 19",
    "3267: 81 40 27",
    "83: 17 5",
    "156: 15 6",
    "7290: 6 8 6 15",
    "161011: 16 10 13",
    "192: 17 8 14",
    "21037: 9 7 18 13",
    "292: 11 6 16 20",
]


def test_part_one_example():
    assert part_one(EXAMPLE) == 3749


def test_part_two_example():
    assert part_two(EXAMPLE) == 11387


def test_parse():
    assert parse_equations(["190: 10 19"]) == [Equation(190, (10, 19))]


def test_multiplication_solves():
    assert solvable(Equation(190, (10, 19)), 2) is True


def test_concatenation_needs_third_operator():
    equation = Equation(156, (15, 6))
    assert solvable(equation, 2) is False
    assert solvable(equation, 3) is True


def test_single_number_equation():
    assert solvable(Equation(7, (7,)), 2) is True
    assert solvable(Equation(8, (7,)), 2) is False


def test_unsolvable_line_contributes_nothing():
    assert part_two(["83: 17 5"]) == part_two([])


def test_part_two_at_least_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_bad_operator_count_rejected():
    with pytest.raises(ValueError):
        solvable(Equation(190, (10, 19)), 4)


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        parse_equations(["190 10 19"])


def test_run_prints(capsys):
    run(EXAMPLE)
    out = capsys.readouterr().out
    assert f"Part 1: {part_one(EXAMPLE)}" in out