from aocsolve.toolbox import ByteMatrix
from aocsolve.year2024.day12 import find_regions, part_one, part_two, run

SMALL = ["AAAA", "BBCD", "BBCC", "EEEC"]
EX = ["EEEEE", "EXXXX", "EEEEE", "EXXXX", "EEEEE"]


def _transpose(lines):
    return ["".join(col) for col in zip(*lines)]


def test_small_example_part_one():
    assert part_one(SMALL) == 140


def test_small_example_part_two():
    assert part_two(SMALL) == 80


def test_e_shaped_example_part_two():
    assert part_two(EX) == 236


def test_regions_cover_every_cell_once():
    garden = ByteMatrix.from_lines(SMALL)
    regions = find_regions(garden)
    cells = [coord for region in regions for coord in region]
    assert len(cells) == len(set(cells))
    assert set(cells) == {coord for coord, _ in garden.cells()}


def test_regions_are_homogeneous():
    garden = ByteMatrix.from_lines(EX)
    for region in find_regions(garden):
        assert len({garden[coord] for coord in region}) == 1


def test_one_region_per_letter_in_small_example():
    garden = ByteMatrix.from_lines(SMALL)
    assert len(find_regions(garden)) == len(set("".join(SMALL)))


def test_separated_plants_form_separate_regions():
    garden = ByteMatrix.from_lines(EX)
    x_regions = [r for r in find_regions(garden) if garden[r[0]] == "X"]
    assert len(x_regions) == sum(1 for line in EX if "X" in line)


def test_transposed_garden_costs_the_same():
    for lines in (SMALL, EX):
        flipped = _transpose(lines)
        assert part_one(flipped) == part_one(lines)
        assert part_two(flipped) == part_two(lines)


def test_mirrored_garden_costs_the_same():
    mirrored = [line[::-1] for line in SMALL]
    assert part_one(mirrored) == part_one(SMALL)
    assert part_two(mirrored) == part_two(SMALL)


def test_sides_never_exceed_perimeter():
    assert part_two(SMALL) <= part_one(SMALL)
    assert part_two(EX) <= part_one(EX)


def test_run_prints_both_parts(capsys):
    run(SMALL)
    out = capsys.readouterr().out
    assert f"Part 1: {part_one(SMALL)}" in out
    assert f"Part 2: {part_two(SMALL)}" in out