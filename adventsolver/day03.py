"""Engine schematic: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import re
from typing import Sequence

from adventsolver.template import _solve

_NUMBER = re.compile(r"[0-9]+")
_SYMBOL = re.compile(r"[!@#%&:;,/=\-_^*+|$]")
_GEAR = re.compile(r"\*")


def _neighbours(lines: list[str], i: int) -> tuple[str, str]:
    """Return the lines above and below line i, or empty strings at the edges."""
    above = lines[i - 1] if i > 0 else ""
    below = lines[i + 1] if i < len(lines) - 1 else ""
    return above, below


def _left(start: int, line: str) -> str:
    return line[start - 1 : start] if start > 0 else ""


def _right(end: int, line: str) -> str:
    return line[end : end + 1]


def _around(start: int, end: int, line: str) -> str:
    if not line:
        return ""
    return _left(start, line) + line[start:end] + _right(end, line)


def puzzle1(lines: list[str]) -> int:
    """Sum every number that touches a symbol, diagonals included."""
    total = 0
    for i, line in enumerate(lines):
        above, below = _neighbours(lines, i)
        for match in _NUMBER.finditer(line):
            start, end = match.span()
            border = (
                _left(start, line)
                + _right(end, line)
                + _around(start, end, above)
                + _around(start, end, below)
            )
            if _SYMBOL.search(border):
                total += int(match.group())
    return total


def _numbers(line: str) -> list[tuple[int, int, int]]:
    return [(m.start(), m.end(), int(m.group())) for m in _NUMBER.finditer(line)]


def _adjacent(gear: int, numbers: list[tuple[int, int, int]]) -> list[int]:
    return [value for start, end, value in numbers if start - 1 <= gear <= end]


def puzzle2(lines: list[str]) -> int:
    """Sum the products of number pairs around each '*' with exactly two."""
    total = 0
    for i, line in enumerate(lines):
        gears = [m.start() for m in _GEAR.finditer(line)]
        if not gears:
            continue
        above, below = _neighbours(lines, i)
        rows = [_numbers(above), _numbers(line), _numbers(below)]
        for gear in gears:
            found: list[int] = []
            for row in rows:
                found += _adjacent(gear, row)
                if len(found) > 2:
                    break
            if len(found) == 2:
                total += found[0] * found[1]
    return total


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 3.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())