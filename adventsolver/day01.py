"""Calibration values from the first and last digit of each line."""

from __future__ import annotations

import re
from typing import Sequence

from adventsolver.template import _solve

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_WORD_VALUES = {word: value for value, word in enumerate(_WORDS, start=1)}

_DIGIT = re.compile(r"[0-9]")
_FORWARD = re.compile("[0-9]|" + "|".join(_WORDS))
_BACKWARD = re.compile("[0-9]|" + "|".join(word[::-1] for word in _WORDS))
_INTEGER = re.compile(r"[+-]?[0-9]+")


def digit_value(word: str) -> int:
    """Return the value of a spelled-out digit or a numeric string."""
    if word in _WORD_VALUES:
        return _WORD_VALUES[word]
    if not _INTEGER.fullmatch(word):
        raise ValueError(f"not a digit: {word!r}")
    return int(word)


def puzzle1(lines: list[str]) -> int:
    """Sum the numbers formed by the first and last numeric digit per line."""
    total = 0
    for line in lines:
        digits = _DIGIT.findall(line)
        if not digits:
            raise ValueError("no numbers in line")
        total += int(digits[0]) * 10 + int(digits[-1])
    return total


def _found_value(match: re.Match[str] | None, reverse: bool = False) -> int:
    if match is None:
        return 0
    text = match.group()
    return digit_value(text[::-1] if reverse else text)


def puzzle2(lines: list[str]) -> int:
    """Like puzzle1, but spelled-out digits count as digits too."""
    total = 0
    for line in lines:
        first = _found_value(_FORWARD.search(line))
        last = _found_value(_BACKWARD.search(line[::-1]), reverse=True)
        total += first * 10 + last
    return total


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 1.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())