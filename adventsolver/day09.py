"""Sensor histories: extrapolate sequences by repeated differences."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

from adventsolver.parsing import split_ints
from adventsolver.template import _solve


def extrapolate(values: Iterable[int]) -> int:
    """Return the value that follows a sequence, found by taking differences."""
    level = list(values)
    if not level:
        raise ValueError("cannot extrapolate an empty sequence")
    total = 0
    while True:
        total += level[-1]
        level = [b - a for a, b in pairwise(level)]
        if all(diff == 0 for diff in level):
            return total


def puzzle1(lines: list[str]) -> int:
    """Sum the next values of all histories."""
    return sum(extrapolate(split_ints(line, " ")) for line in lines)


def puzzle2(lines: list[str]) -> int:
    """Sum the values that come before each history."""
    return sum(extrapolate(reversed(split_ints(line, " "))) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 9.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())