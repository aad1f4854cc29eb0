"""Cosmic expansion: sum of distances between galaxies in an expanding image."""

from __future__ import annotations

from bisect import bisect_left
from itertools import combinations
from typing import Sequence

from adventsolver.template import _solve


def puzzle(lines: list[str], expansion: int) -> int:
    """Sum pairwise Manhattan distances when each empty row or column
    counts as `expansion` rows or columns."""
    width = len(lines[0]) if lines else 0
    occupied_columns = {j for line in lines for j, cell in enumerate(line) if cell == "#"}
    empty_columns = [j for j in range(width) if j not in occupied_columns]

    galaxies: list[tuple[int, int]] = []
    row = 0
    for line in lines:
        found = [j for j, cell in enumerate(line) if cell == "#"]
        galaxies.extend(
            (row, j + bisect_left(empty_columns, j) * (expansion - 1)) for j in found
        )
        row += 1 if found else expansion

    return sum(
        abs(a[0] - b[0]) + abs(a[1] - b[1]) for a, b in combinations(galaxies, 2)
    )


def puzzle1(lines: list[str]) -> int:
    """Distances with every empty row and column doubled."""
    return puzzle(lines, 2)


def puzzle2(lines: list[str]) -> int:
    """Distances with every empty row and column a million times wider."""
    return puzzle(lines, 1_000_000)


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 11.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())