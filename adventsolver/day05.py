"""Seed almanac: follow seeds through a chain of range mappings."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterator

from adventsolver.inputs import read_lines
from adventsolver.mathutil import minimum
from adventsolver.parsing import split_ints

_SEEDS_PREFIX = len("seeds: ")


@dataclass(frozen=True)
class SeedRange:
    """An inclusive range of seed numbers."""

    start: int
    end: int


@dataclass(frozen=True)
class Rule:
    """Numbers in the inclusive range [start, end] are moved by shift."""

    start: int
    end: int
    shift: int

    @classmethod
    def from_line(cls, line: str) -> Rule:
        destination, source, length = split_ints(line, " ")
        return cls(source, source + length - 1, destination - source)

    def covers(self, value: int) -> bool:
        return self.start <= value <= self.end


def apply_rule(
    source: SeedRange, rule: Rule
) -> tuple[SeedRange, list[SeedRange]] | None:
    """Map the part of a range that a rule covers.

    Return the mapped part together with the uncovered leftovers, or None
    when the rule does not touch the range at all.
    """
    if source.start >= rule.start and source.end <= rule.end:
        return SeedRange(source.start + rule.shift, source.end + rule.shift), []
    if source.start < rule.start and source.end > rule.end:
        return (
            SeedRange(rule.start + rule.shift, rule.end + rule.shift),
            [SeedRange(source.start, rule.start - 1), SeedRange(rule.end + 1, source.end)],
        )
    if source.start < rule.start <= source.end <= rule.end:
        return (
            SeedRange(rule.start + rule.shift, source.end + rule.shift),
            [SeedRange(source.start, rule.start - 1)],
        )
    if rule.start <= source.start <= rule.end < source.end:
        return (
            SeedRange(source.start + rule.shift, rule.end + rule.shift),
            [SeedRange(rule.end + 1, source.end)],
        )
    return None


def _seeds(lines: list[str]) -> list[int]:
    return split_ints(lines[0][_SEEDS_PREFIX:], " ")


def _rule_blocks(lines: list[str]) -> Iterator[list[Rule]]:
    index = 3
    while index < len(lines):
        end = index
        while end < len(lines) and lines[end] != "":
            end += 1
        yield [Rule.from_line(line) for line in lines[index:end]]
        index = end + 2


def _map_value(value: int, rules: list[Rule]) -> int:
    for rule in rules:
        if rule.covers(value):
            return value + rule.shift
    return value


def _map_ranges(sources: list[SeedRange], rules: list[Rule]) -> list[SeedRange]:
    pending = deque(sources)
    mapped: list[SeedRange] = []
    while pending:
        source = pending.popleft()
        for rule in rules:
            outcome = apply_rule(source, rule)
            if outcome is not None:
                target, leftovers = outcome
                pending.extend(leftovers)
                mapped.append(target)
                break
        else:
            mapped.append(source)
    return mapped


def puzzle1(lines: list[str]) -> int:
    """Return the lowest location reached by any of the listed seeds."""
    values = _seeds(lines)
    for rules in _rule_blocks(lines):
        values = [_map_value(value, rules) for value in values]
    return minimum(values)


def puzzle2(lines: list[str]) -> int:
    """Return the lowest location when the seed line lists (start, length) pairs."""
    pairs = _seeds(lines)
    if len(pairs) % 2:
        raise ValueError("seed ranges must come in pairs")
    ranges = [
        SeedRange(start, start + length - 1)
        for start, length in zip(pairs[::2], pairs[1::2])
    ]
    for rules in _rule_blocks(lines):
        ranges = _map_ranges(ranges, rules)
    return minimum(r.start for r in ranges)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 5.")
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