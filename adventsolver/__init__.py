"""Solvers for 2023 Advent of Code puzzles and helpers for reading input."""

__version__ = "0.1.0"