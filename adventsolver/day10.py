"""Pipe maze: the length of the loop through S and the tiles it encloses."""

from __future__ import annotations

import argparse
import sys

from adventsolver.inputs import read_lines

Point = tuple[int, int]

_PIPES: dict[str, tuple[Point, Point]] = {
    "|": ((-1, 0), (1, 0)),
    "-": ((0, -1), (0, 1)),
    "L": ((-1, 0), (0, 1)),
    "J": ((-1, 0), (0, -1)),
    "7": ((1, 0), (0, -1)),
    "F": ((1, 0), (0, 1)),
}
_CORNERS = frozenset("LJ7F")


def find_start(lines: list[str]) -> Point:
    """Return the (row, column) of the S tile."""
    for i, line in enumerate(lines):
        j = line.find("S")
        if j != -1:
            return i, j
    raise ValueError("no S point")


def _cell(lines: list[str], point: Point) -> str:
    i, j = point
    if not (0 <= i < len(lines) and 0 <= j < len(lines[i])):
        raise ValueError(f"path leaves the map at [{i},{j}]")
    return lines[i][j]


def _next_from_start(lines: list[str], start: Point) -> Point:
    i, j = start
    candidates = []
    if i > 0:
        candidates.append(((i - 1, j), "|7F"))
    if i < len(lines) - 1:
        candidates.append(((i + 1, j), "|LJ"))
    if j > 0:
        candidates.append(((i, j - 1), "-L"))
    if j < len(lines[0]) - 1:
        candidates.append(((i, j + 1), "-7"))
    for point, accepted in candidates:
        if _cell(lines, point) in accepted:
            return point
    raise ValueError("no way from S")


def _walk(lines: list[str]) -> tuple[int, list[Point]]:
    """Follow the loop from S; return its length and its corner tiles."""
    start = find_start(lines)
    previous, current = start, _next_from_start(lines, start)
    length = 1
    corners: list[Point] = []
    while _cell(lines, current) != "S":
        value = _cell(lines, current)
        if value not in _PIPES:
            raise ValueError(
                f"cell [{current[0]},{current[1]}] has unsupported value [{value}]. "
                f"previous point was [{previous[0]},{previous[1]}]"
            )
        if value in _CORNERS:
            corners.append(current)
        first, second = (
            (current[0] + di, current[1] + dj) for di, dj in _PIPES[value]
        )
        following = first if first != previous else second
        previous, current = current, following
        length += 1
    return length, corners


def _area(corners: list[Point]) -> int:
    if not corners:
        return 0
    doubled = sum(
        a[0] * b[1] - b[0] * a[1] for a, b in zip(corners, corners[1:] + corners[:1])
    )
    return abs(doubled) // 2


def puzzle1(lines: list[str]) -> int:
    """Return the number of steps to the point of the loop farthest from S."""
    length, _ = _walk(lines)
    return length // 2 + length % 2


def puzzle2(lines: list[str]) -> int:
    """Return the number of tiles enclosed by the loop."""
    length, corners = _walk(lines)
    return _area(corners) - length // 2 + 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 10.")
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