"""Floor will be lava: count tiles energized by a beam through mirrors and splitters."""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from adventsolver.inputs import read_lines

Point = tuple[int, int]


class Direction(Enum):
    """Beam directions as (row, column) steps."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def step(self, point: Point) -> Point:
        di, dj = self.value
        return point[0] + di, point[1] + dj


_SLASH = {
    Direction.RIGHT: Direction.UP,
    Direction.LEFT: Direction.DOWN,
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
}
_BACKSLASH = {
    Direction.RIGHT: Direction.DOWN,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
}
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)
_VERTICAL = (Direction.UP, Direction.DOWN)


def _outgoing(tile: str, direction: Direction) -> tuple[Direction, ...]:
    if tile == "/":
        return (_SLASH[direction],)
    if tile == "\\":
        return (_BACKSLASH[direction],)
    if tile == "|" and direction in _HORIZONTAL:
        return _VERTICAL
    if tile == "-" and direction in _VERTICAL:
        return _HORIZONTAL
    return (direction,)


def energized_count(lines: list[str], start: Point, direction: Direction) -> int:
    """Return how many tiles a beam entering `start` heading `direction` energizes."""
    height = len(lines)
    width = len(lines[0]) if lines else 0
    seen: set[tuple[Point, Direction]] = set()
    energized: set[Point] = set()
    beams = [(start, direction)]
    while beams:
        point, heading = beams.pop()
        i, j = point
        if not (0 <= i < height and 0 <= j < width):
            continue
        if (point, heading) in seen:
            continue
        seen.add((point, heading))
        energized.add(point)
        for turned in _outgoing(lines[i][j], heading):
            beams.append((turned.step(point), turned))
    return len(energized)


def puzzle1(lines: list[str]) -> int:
    """Count energized tiles for a beam entering the top-left corner heading right."""
    return energized_count(lines, (0, 0), Direction.RIGHT)


def puzzle2(lines: list[str]) -> int:
    """Return the most tiles any beam entering from an edge can energize."""
    height = len(lines)
    width = len(lines[0])
    starts = (
        [((0, j), Direction.DOWN) for j in range(width)]
        + [((height - 1, j), Direction.UP) for j in range(width)]
        + [((i, 0), Direction.RIGHT) for i in range(height)]
        + [((i, width - 1), Direction.LEFT) for i in range(height)]
    )
    return max(energized_count(lines, point, heading) for point, heading in starts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 16.")
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