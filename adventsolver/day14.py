"""Parabolic reflector dish: tilt rounded rocks and measure the load."""

from __future__ import annotations

import argparse
import sys

from adventsolver.inputs import read_lines

Grid = list[list[str]]

_ROUND = "O"
_CUBE = "#"
_EMPTY = "."
_SPIN_CYCLES = 1_000_000_000


def to_grid(lines: list[str]) -> Grid:
    """Turn lines of text into a mutable grid of single characters."""
    return [list(line) for line in lines]


def to_lines(grid: Grid) -> list[str]:
    """Turn a grid of characters back into lines of text."""
    return ["".join(row) for row in grid]


def load(grid: Grid) -> int:
    """Return the total load of the rounded rocks on the north support beams."""
    height = len(grid)
    return sum(
        height - i for i, row in enumerate(grid) for cell in row if cell == _ROUND
    )


def _slide(row: str, toward_start: bool) -> str:
    segments = []
    for segment in row.split(_CUBE):
        rocks = segment.count(_ROUND)
        space = _EMPTY * (len(segment) - rocks)
        rolled = _ROUND * rocks
        segments.append(rolled + space if toward_start else space + rolled)
    return _CUBE.join(segments)


def _transpose(grid: Grid) -> Grid:
    return [list(column) for column in zip(*grid)]


def roll_west(grid: Grid) -> Grid:
    """Return the grid with every rounded rock rolled as far west as it goes."""
    return [list(_slide("".join(row), toward_start=True)) for row in grid]


def roll_east(grid: Grid) -> Grid:
    """Return the grid with every rounded rock rolled as far east as it goes."""
    return [list(_slide("".join(row), toward_start=False)) for row in grid]


def roll_north(grid: Grid) -> Grid:
    """Return the grid with every rounded rock rolled as far north as it goes."""
    return _transpose(roll_west(_transpose(grid)))


def roll_south(grid: Grid) -> Grid:
    """Return the grid with every rounded rock rolled as far south as it goes."""
    return _transpose(roll_east(_transpose(grid)))


def one_cycle(grid: Grid) -> Grid:
    """Tilt north, west, south and east in turn."""
    return roll_east(roll_south(roll_west(roll_north(grid))))


def puzzle1(lines: list[str]) -> int:
    """Return the north load after tilting the dish north once."""
    return load(roll_north(to_grid(lines)))


def puzzle2(lines: list[str]) -> int:
    """Return the north load after a billion spin cycles."""
    grid = to_grid(lines)
    seen: dict[tuple[str, ...], int] = {}
    loads: list[int] = []
    for done in range(_SPIN_CYCLES):
        key = tuple(to_lines(grid))
        if key in seen:
            first = seen[key]
            period = done - first
            return loads[first + (_SPIN_CYCLES - first) % period]
        seen[key] = done
        loads.append(load(grid))
        grid = one_cycle(grid)
    return load(grid)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 14.")
    parser.add_argument("input", nargs="?", default="input.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        print(f"unable to read input file: {exc}", file=sys.stderr)
        return 1
    print("puzzle 1:", puzzle1(lines))
    print("puzzle 2:", puzzle2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())