"""Desert map: walk left/right instructions through a network of nodes."""

from __future__ import annotations

import argparse
import math
import re
import sys
from itertools import count, cycle
from typing import Callable

from adventsolver.inputs import read_lines

_NODE = re.compile(r"[A-Z0-9]{3}")


def _network(lines: list[str]) -> dict[str, tuple[str, str]]:
    network = {}
    for line in lines[2:]:
        name, left, right = _NODE.findall(line)[:3]
        network[name] = (left, right)
    return network


def _steps(
    directions: str,
    network: dict[str, tuple[str, str]],
    start: str,
    done: Callable[[str], bool],
) -> int:
    current = start
    for step, direction in zip(count(1), cycle(directions)):
        if current not in network:
            raise ValueError(f"unknown node {current!r}")
        left, right = network[current]
        if direction == "L":
            current = left
        elif direction == "R":
            current = right
        if done(current):
            return step
    raise ValueError("no directions given")


def puzzle1(lines: list[str]) -> int:
    """Count the steps from AAA to ZZZ."""
    return _steps(lines[0], _network(lines), "AAA", lambda node: node == "ZZZ")


def puzzle2(lines: list[str]) -> int:
    """Count the steps until every node ending in A stands on a node ending in Z."""
    network = _network(lines)
    starts = [node for node in network if node[2] == "A"]
    if not starts:
        raise ValueError("no start nodes")
    steps = [_steps(lines[0], network, start, lambda node: node[2] == "Z") for start in starts]
    return math.lcm(*steps)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 8.")
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