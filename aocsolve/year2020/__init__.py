"""Solvers for the 2020 puzzles: days 01 to 07 and 10."""