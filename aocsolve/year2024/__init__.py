"""Solvers for the 2024 puzzles: days 01 to 16."""