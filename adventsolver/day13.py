"""Point of incidence: find lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

import argparse
import sys
from itertools import groupby

from adventsolver.inputs import read_lines


def _row_masks(lines: list[str]) -> list[int]:
    return [
        sum(1 << j for j, cell in enumerate(line) if cell == "#") for line in lines
    ]


def _column_masks(lines: list[str]) -> list[int]:
    return [
        sum(1 << i for i, line in enumerate(lines) if line[j] == "#")
        for j in range(len(lines[0]))
    ]


def _mirror(masks: list[int], smudges: int) -> int | None:
    """Return how many entries precede the first reflection line at which
    exactly `smudges` cells differ, or None."""
    for split in range(1, len(masks)):
        before = reversed(masks[:split])
        after = masks[split:]
        differences = sum((a ^ b).bit_count() for a, b in zip(before, after))
        if differences == smudges:
            return split
    return None


def find_horizontal_mirror(lines: list[str]) -> int | None:
    """Return the number of rows above a perfect horizontal mirror, or None."""
    return _mirror(_row_masks(lines), 0)


def find_vertical_mirror(lines: list[str]) -> int | None:
    """Return the number of columns left of a perfect vertical mirror, or None."""
    return _mirror(_column_masks(lines), 0)


def _blocks(lines: list[str]) -> list[list[str]]:
    return [list(group) for filled, group in groupby(lines, key=bool) if filled]


def _summarize(lines: list[str], smudges: int) -> int:
    total = 0
    for block in _blocks(lines):
        rows = _mirror(_row_masks(block), smudges)
        if rows is not None:
            total += 100 * rows
            continue
        columns = _mirror(_column_masks(block), smudges)
        if columns is None:
            raise ValueError("pattern has no line of reflection")
        total += columns
    return total


def puzzle1(lines: list[str]) -> int:
    """Summarize all patterns by their perfect reflection lines."""
    return _summarize(lines, 0)


def puzzle2(lines: list[str]) -> int:
    """Summarize all patterns by reflection lines that need one smudge fixed."""
    return _summarize(lines, 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 13.")
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