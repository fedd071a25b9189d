from aocsolve.year2024.day03 import part_one, part_two, run

EXAMPLE_ONE = ["xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"]
EXAMPLE_TWO = ["xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"]


def test_part_one_example():
    assert part_one(EXAMPLE_ONE) == 161


def test_part_two_example():
    assert part_two(EXAMPLE_TWO) == 48


def test_multiplication_by_one():
    assert part_one(["mul(4,1)"]) == 4


def test_multiplication_commutes():
    assert part_one(["mul(2,3)"]) == part_one(["mul(3,2)"])


def test_spaces_invalidate_instruction():
    assert part_one(["mul(4, 1)", "mul ( 2,3)"]) == part_one([])


def test_without_switches_parts_agree():
    assert part_two(EXAMPLE_ONE) == part_one(EXAMPLE_ONE)


def test_disable_carries_across_lines():
    assert part_two(["don't()", "mul(4,1)"]) == part_two([])


def test_do_reenables():
    assert part_two(["don't()", "do()mul(4,1)"]) == 4


def test_part_two_never_exceeds_part_one():
    assert part_two(EXAMPLE_TWO) <= part_one(EXAMPLE_TWO)


def test_run_prints(capsys):
    run(EXAMPLE_TWO)
    out = capsys.readouterr().out
    assert f"Part 2: {part_two(EXAMPLE_TWO)}" in out