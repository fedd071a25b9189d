# aocsolve

Solvers for a selection of Advent of Code puzzles, runnable from the
command line or importable as a library. It has no dependencies beyond the
Python standard library (Python 3.10 or later).

Covered puzzles:

| Year | Days                |
|------|---------------------|
| 2020 | 01–07, 10           |
| 2021 | 01–02               |
| 2022 | 01–12               |
| 2024 | 01–16               |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running a puzzle

Puzzle inputs are read from an `inputs` directory below the current working
directory, laid out by year and day:

```
inputs/
  year2022/
    day05/
      example
      real
```

Run a solver by giving the year (four digits), the day (two digits) and the
name of the input file (lower-case letters and digits only):

```
aocsolve 2022 05 example
```

The runner prints a header such as `===== 2022-12-05 example =====`,
followed by the answers the solver prints. It returns a non-zero exit
status when something is wrong:

| Status | Cause                                                     |
|--------|-----------------------------------------------------------|
| 1      | not exactly three arguments                               |
| 2      | the year is not four digits                               |
| 3      | the day is not two digits                                 |
| 4      | the input name is not lower-case letters and digits       |
| 1      | no solver for that year or day, or the input cannot be read |

Input files are read as UTF-8; line endings (`\n` or `\r\n`) are stripped and
a final newline does not add an empty line.

## Using the library

Most solver modules expose `part_one(lines)` and `part_two(lines)`, taking
the puzzle input as a list of lines without their line endings and returning
the answer. Every module has `run(lines)`, which prints the answers.

```python
from aocsolve.year2024 import day01

lines = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]
print(day01.part_one(lines))
print(day01.part_two(lines))
```

A few modules differ:

- `aocsolve.year2022.day06` has `marker_end(line, size)`, which returns the
  position just after the first run of `size` distinct characters, or `None`.
- `aocsolve.year2022.day05.part_one`/`part_two` return the top crates as a
  string, and `aocsolve.year2022.day10.part_two` returns the CRT image as a
  string of rows.
- `aocsolve.year2024.day14.part_one(lines, height, width)` and
  `part_two(lines, height, width, limit)` take the grid size (103 by 101 by
  default) and a search limit (10 000 seconds by default).
- `aocsolve.year2024.day15` and `aocsolve.year2024.day16` only have
  `part_one`.

Malformed input raises `ValueError`.

Solvers can also be looked up by year and day:

```python
from aocsolve.registry import UnknownPuzzleError, available_days, get_solver

print(available_days("2022"))

try:
    solve = get_solver("2022", "05")
    solve(["..."])  # prints the answers
except UnknownPuzzleError as error:
    print(error)
```

`aocsolve.cli` also provides `input_path(year, day, name)` and
`read_input(path)`, the helpers the runner uses to locate and read input
files.

`aocsolve.toolbox` holds the small helpers shared between solvers:
`Coord` (an immutable row/column position), `ByteMatrix` (a mutable grid of
single characters) and the parsing helpers `to_int`, `to_ints`, `to_float`
and `to_floats`.

## What it does not do

- It does not download puzzle inputs or submit answers; inputs must already
  be on disk.
- Part two of 2024 days 15 and 16 is not solved; their `run` prints an empty
  `Part 2:` line.
- Only the days listed above are available; any other year or day is
  reported as not existing.