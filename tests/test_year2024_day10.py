from aocsolve.year2024.day10 import part_one, part_two, run, trail_total

EXAMPLE = [
    "89010123",
    "78121874",
    "87430965",
    "96549874",
    "45678903",
    "32019012",
    "01329801",
    "10456732",
]


def test_example_part_one():
    assert part_one(EXAMPLE) == 36


def test_example_part_two():
    assert part_two(EXAMPLE) == 81


def test_single_straight_trail_scores_like_its_rating():
    lines = ["0123456789"]
    assert part_one(lines) == part_two(lines)
    assert trail_total(lines, False) == part_one(lines)
    assert trail_total(lines, True) == part_two(lines)


def test_no_trailheads():
    lines = ["999", "888"]
    assert part_one(lines) == 0
    assert part_two(lines) == part_one(lines)


def test_branching_trails_rate_higher_than_score():
    lines = ["0123456789", "123456789."]
    assert part_two(lines) > part_one(lines)


def test_non_digits_block_paths():
    blocked = ["01234.6789"]
    open_trail = ["0123456789"]
    assert part_one(blocked) < part_one(open_trail)


def test_rating_never_below_score():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


def test_run_prints_both_parts(capsys):
    run(EXAMPLE)
    out = capsys.readouterr().out
    assert f"Part 1: {part_one(EXAMPLE)}" in out
    assert f"Part 2: {part_two(EXAMPLE)}" in out