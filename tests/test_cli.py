from pathlib import Path

import pytest

from aocsolve.cli import input_path, main, read_input
from aocsolve.year2021 import day01


def test_input_path_layout():
    assert input_path("2020", "01", "input") == Path("inputs", "year2020", "day01", "input")


def test_read_input_strips_line_endings(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"a\nb\r\nc")
    assert read_input(path) == ["a", "b", "c"]


def test_read_input_keeps_inner_blank_lines(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"a\n\nb\n")
    assert read_input(path) == ["a", "", "b"]


def test_read_input_empty_file(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"")
    assert read_input(path) == []


def test_wrong_argument_count(capsys):
    assert main(["2020", "01"]) == 1
    assert "exactly 3 arguments required" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,code,message",
    [
        (["20x0", "01", "input"], 2, "first argument must be a valid year"),
        (["2020", "1", "input"], 3, "second argument must be a valid day"),
        (["2020", "01", "In-put"], 4, "third argument must only contain alphanumeric characters"),
    ],
)
def test_argument_validation(argv, code, message, capsys):
    assert main(argv) == code
    assert message in capsys.readouterr().out


def test_unknown_year(capsys):
    assert main(["1999", "01", "input"]) == 1
    assert "year 1999 does not exist" in capsys.readouterr().out


def test_unknown_day(capsys):
    assert main(["2021", "03", "input"]) == 1
    assert "day 03 does not exist" in capsys.readouterr().out


def test_missing_input_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["2021", "01", "missing"]) == 1
    assert capsys.readouterr().out.startswith("parse fail:")


def test_runs_solver(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    lines = ["199", "200", "208", "210", "200"]
    target = input_path("2021", "01", "sample")
    target.parent.mkdir(parents=True)
    target.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main(["2021", "01", "sample"]) == 0
    out = capsys.readouterr().out
    assert "===== 2021-12-01 sample =====" in out
    assert f"Part 1: {day01.part_one(lines)}" in out
    assert f"Part 2: {day01.part_two(lines)}" in out