"""Hot springs: count arrangements of damaged springs matching group sizes."""

from __future__ import annotations

import argparse
import re
import sys
from functools import cache
from typing import Sequence

from adventsolver.inputs import read_lines

_NUMBER = re.compile(r"[0-9]+")
_UNFOLD = 5


def count_arrangements(pattern: str, groups: Sequence[int]) -> int:
    """Count ways to replace each '?' by '#' or '.' so that the runs of '#'
    have exactly the given sizes, in order."""
    sizes = tuple(groups)
    length = len(pattern)

    @cache
    def count(position: int, group: int) -> int:
        while position < length and pattern[position] == ".":
            position += 1
        if position == length:
            return 1 if group == len(sizes) else 0
        if group == len(sizes):
            return 0 if "#" in pattern[position:] else 1

        total = 0
        if pattern[position] == "?":
            total += count(position + 1, group)
        end = position + sizes[group]
        if (
            end <= length
            and "." not in pattern[position:end]
            and (end == length or pattern[end] != "#")
        ):
            total += count(min(end + 1, length), group + 1)
        return total

    return count(0, 0)


def _parse(line: str) -> tuple[str, list[int]]:
    pattern, numbers = line.split(" ")[:2]
    return pattern, [int(n) for n in _NUMBER.findall(numbers)]


def puzzle1(lines: list[str]) -> int:
    """Sum the arrangement counts of all rows."""
    return sum(count_arrangements(*_parse(line)) for line in lines)


def puzzle2(lines: list[str]) -> int:
    """Sum the arrangement counts of all rows unfolded five times."""
    total = 0
    for line in lines:
        pattern, groups = _parse(line)
        unfolded = "?".join([pattern] * _UNFOLD)
        found = count_arrangements(unfolded, groups * _UNFOLD)
        if not found:
            raise ValueError(f"nothing is possible: {line}")
        total += found
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 12.")
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