"""Starting point for a new puzzle day: sums the lengths of all lines."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from adventsolver.inputs import read_lines

Puzzle = Callable[[list[str]], object]


def _solve(
    argv: Sequence[str] | None,
    description: str,
    *puzzles: Puzzle,
    failure: str = "unable to read input file",
) -> int:
    """Read the input file named on the command line and print each puzzle's answer."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="input.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        print(f"{failure}: {exc}", file=sys.stderr)
        return 1
    for number, puzzle in enumerate(puzzles, start=1):
        print(f"puzzle {number}:", puzzle(lines))
    return 0


def puzzle1(lines: list[str]) -> int:
    """Return the total length of all lines."""
    return sum(len(line) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve a puzzle day.", puzzle1, failure="cannot read file")


if __name__ == "__main__":
    raise SystemExit(main())