import pytest

from aocsolve.year2022.day07 import build_tree, part_one, part_two

EXAMPLE = [
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
]


def test_part_one_example():
    assert part_one(EXAMPLE) == 95437


def test_part_two_example():
    assert part_two(EXAMPLE) == 24933642


def test_root_size_is_total_of_all_files():
    root = build_tree(EXAMPLE)
    total = sum(int(line.split(" ")[0]) for line in EXAMPLE if line[0].isdigit())
    assert root.size == total


def test_nested_directory_size():
    root = build_tree(EXAMPLE)
    assert root.children["a"].children["e"].size == 584


def test_directory_size_is_sum_of_children():
    root = build_tree(EXAMPLE)
    a = root.children["a"]
    assert a.size == sum(child.size for child in a.children.values())
    assert a.parent is root


def test_small_directory_counted():
    assert part_one(["$ cd /", "$ ls", "100 x"]) == 100


def test_no_candidate_falls_back_to_capacity():
    assert part_two(["$ cd /", "$ ls", "5 x"]) == 70000000


def test_cd_into_unknown_directory():
    with pytest.raises(ValueError):
        build_tree(["$ cd /", "$ cd missing"])


def test_cd_above_root():
    with pytest.raises(ValueError):
        build_tree(["$ cd /", "$ cd .."])


def test_listing_before_root():
    with pytest.raises(ValueError):
        build_tree(["100 x"])


def test_unknown_command():
    with pytest.raises(ValueError):
        build_tree(["$ cd /", "$ rm x"])