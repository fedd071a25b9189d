"""Solvers for the 2022 puzzles: days 01 to 12."""