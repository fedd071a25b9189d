"""Solvers for the 2021 puzzles: days 01 and 02."""