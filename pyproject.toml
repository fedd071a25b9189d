[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from 2020, 2021, 2022 and 2024, with a small command-line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolve = "aocsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
