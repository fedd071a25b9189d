"""Advent of Code puzzle solvers, a solver registry and a command-line runner."""

__version__ = "0.1.0"