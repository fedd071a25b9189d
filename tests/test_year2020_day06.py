from aocsolve.year2020.day06 import part_one, part_two

EXAMPLE = ["abc", "", "a", "b", "c", "", "ab", "ac", "", "a", "a", "a", "a", "", "b"]


def test_part_one_example():
    assert part_one(EXAMPLE) == 11


def test_part_two_example():
    assert part_two(EXAMPLE) == 6


def test_everyone_never_exceeds_anyone():
    assert part_two(EXAMPLE) <= part_one(EXAMPLE)


def test_trailing_blank_lines_do_not_matter():
    assert part_one(EXAMPLE + ["", ""]) == part_one(EXAMPLE)
    assert part_two(EXAMPLE + ["", ""]) == part_two(EXAMPLE)


def test_single_person_group_counts_same_both_ways():
    assert part_one(["xyz"]) == part_two(["xyz"]) == len("xyz")