"""Lavaduct lagoon: the volume of a trench dug from a dig plan."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from adventsolver.inputs import read_lines

_STEPS = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


def _lagoon(moves: Iterable[tuple[str, int]]) -> int:
    corners: list[tuple[int, int]] = []
    i = j = 0
    perimeter = 0
    for direction, length in moves:
        if direction not in _STEPS:
            raise ValueError(f"unknown direction {direction!r}")
        di, dj = _STEPS[direction]
        i += di * length
        j += dj * length
        perimeter += length
        corners.append((i, j))
    if not corners:
        return 1
    doubled = sum(
        a[0] * b[1] - b[0] * a[1] for a, b in zip(corners, corners[1:] + corners[:1])
    )
    area = abs(doubled) // 2
    return area - perimeter // 2 + 1 + perimeter


def puzzle1(lines: list[str]) -> int:
    """Return the lagoon size following the plain direction and length."""
    moves = []
    for line in lines:
        direction, length = line.split(" ")[:2]
        moves.append((direction, int(length)))
    return _lagoon(moves)


def puzzle2(lines: list[str]) -> int:
    """Return the lagoon size following the instructions hidden in the colours."""
    moves = []
    for line in lines:
        code = line.split(" ")[2]
        digit = code[-2]
        if digit not in _HEX_DIRECTIONS:
            raise ValueError(f"unknown direction code {digit!r}")
        moves.append((_HEX_DIRECTIONS[digit], int(code[2:-2], 16)))
    return _lagoon(moves)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 18.")
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