import pytest

from aocsolve.year2024.day13 import ClawMachine, parse_machines, part_one, part_two, run

EXAMPLE = [
    "Button A: X+94, Y+34",
    "Button B: X+22, Y+67",
    "Prize: X=8400, Y=5400",
    "",
    "Button A: X+26, Y+66",
    "Button B: X+67, Y+21",
    "Prize: X=12748, Y=12176",
    "",
    "Button A: X+17, Y+86",
    "Button B: X+84, Y+37",
    "Prize: X=7870, Y=6450",
    "",
    "Button A: X+69, Y+23",
    "Button B: X+27, Y+71",
    "Prize: X=18641, Y=10279",
]

TRIVIAL = [
    "Button A: X+1, Y+0",
    "Button B: X+0, Y+1",
    "Prize: X=0, Y=0",
]


def test_parse_machines_reads_every_machine():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == ClawMachine(a=(94.0, 34.0), b=(22.0, 67.0), prize=(8400.0, 5400.0))
    assert machines[-1].prize == (18641.0, 10279.0)


def test_trailing_blank_line_is_ignored():
    assert parse_machines(EXAMPLE + [""]) == parse_machines(EXAMPLE)


def test_incomplete_trailing_machine_raises():
    with pytest.raises(ValueError):
        parse_machines(EXAMPLE + ["", "Button A: X+1, Y+2"])


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_machines(["Button A: nowhere", "Button B: X+1, Y+1", "Prize: X=1, Y=1"])


def test_example_part_one():
    assert part_one(EXAMPLE) == 480


def test_unreachable_prize_costs_nothing_in_part_one():
    assert part_one(TRIVIAL) == 0


def test_part_two_solves_axis_aligned_machine():
    assert part_two(TRIVIAL) == 40000000000000


def test_part_two_skips_degenerate_machine():
    degenerate = [
        "Button A: X+0, Y+0",
        "Button B: X+0, Y+0",
        "Prize: X=5, Y=5",
    ]
    assert part_two(degenerate) == part_one(degenerate)


def test_part_two_sums_per_machine():
    assert part_two(TRIVIAL + [""] + TRIVIAL) == 2 * part_two(TRIVIAL)


def test_run_prints_both_parts(capsys):
    run(EXAMPLE)
    out = capsys.readouterr().out
    assert f"Part 1: {part_one(EXAMPLE)}" in out
    assert f"Part 2: {part_two(EXAMPLE)}" in out