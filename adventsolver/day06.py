"""Boat races: count the hold times that beat the record distance."""

from __future__ import annotations

import math
import re
from typing import Sequence

from adventsolver.template import _solve

_NUMBER = re.compile(r"[0-9]+")


def count_ways(time: int, distance: int) -> int:
    """Count hold times h in [0, time) with h * (time - h) > distance."""
    if time <= 0:
        return 0
    discriminant = time * time - 4 * distance
    if discriminant <= 0:
        return 0
    low = max((time - math.isqrt(discriminant)) // 2, 0)
    while low > 0 and (low - 1) * (time - low + 1) > distance:
        low -= 1
    while low < time and low * (time - low) <= distance:
        low += 1
    high = min(time - low, time - 1)
    return max(0, high - low + 1)


def puzzle1(lines: list[str]) -> int:
    """Multiply the numbers of winning hold times of every race."""
    times = _NUMBER.findall(lines[0])
    distances = _NUMBER.findall(lines[1])
    return math.prod(count_ways(int(t), int(d)) for t, d in zip(times, distances))


def puzzle2(lines: list[str]) -> int:
    """Count winning hold times for the single race spelled across the columns."""
    time = int("".join(_NUMBER.findall(lines[0])))
    distance = int("".join(_NUMBER.findall(lines[1])))
    return count_ways(time, distance)


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 6.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())