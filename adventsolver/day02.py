"""Cube games: which games are possible, and the power of minimal sets."""

from __future__ import annotations

import argparse
import math
import re
import sys
from typing import Iterator

from adventsolver.inputs import read_lines

_GAME_NUMBER = re.compile(r"Game ([^ ]+):")
_DRAW = re.compile(r"[\d+ (red|green|blue)]+", re.ASCII)
_INTEGER = re.compile(r"[+-]?[0-9]+")

_LIMITS = {"red": 12, "green": 13, "blue": 14}


def _to_int(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _draws(subset: str) -> Iterator[tuple[int, str]]:
    for match in _DRAW.finditer(subset):
        parts = match.group().strip(" ").split(" ")
        color = parts[1] if len(parts) > 1 else ""
        if color not in _LIMITS:
            raise ValueError(f"unsupported color [{color}]")
        yield _to_int(parts[0]), color


def _subsets(game: str) -> list[str]:
    return game.split(":")[1].split(";")


def _is_possible(game: str) -> bool:
    possible = False
    for subset in _subsets(game):
        for number, color in _draws(subset):
            possible = number <= _LIMITS[color]
            if not possible:
                return False
        if not possible:
            return False
    return possible


def puzzle1(lines: list[str]) -> int:
    """Sum the numbers of games possible with 12 red, 13 green and 14 blue cubes."""
    total = 0
    for game in lines:
        if not _is_possible(game):
            continue
        match = _GAME_NUMBER.search(game)
        if match is None:
            raise ValueError(f"no game number in {game!r}")
        total += _to_int(match.group(1))
    return total


def puzzle2(lines: list[str]) -> int:
    """Sum the powers of the minimal cube sets of all games."""
    total = 0
    for game in lines:
        needed = dict.fromkeys(_LIMITS, 0)
        for subset in _subsets(game):
            for number, color in _draws(subset):
                needed[color] = max(needed[color], number)
        total += math.prod(needed.values())
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 2.")
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