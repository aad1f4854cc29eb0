"""Lens library: the HASH algorithm and the HASHMAP box procedure."""

from __future__ import annotations

import argparse
import sys

from adventsolver.inputs import read_text

_BOX_COUNT = 256


def hash_step(step: str) -> int:
    """Return the HASH value of a string: a number from 0 to 255."""
    value = 0
    for char in step:
        value = (value + (ord(char) & 0xFF)) * 17 % _BOX_COUNT
    return value


def puzzle1(line: str) -> int:
    """Sum the HASH values of all comma-separated steps."""
    return sum(hash_step(step) for step in line.split(","))


def puzzle2(line: str) -> int:
    """Run the lens steps and return the total focusing power."""
    boxes: dict[int, dict[str, int]] = {}
    for step in line.split(","):
        position = next((i for i, ch in enumerate(step) if ch in "-="), None)
        if position is None:
            continue
        label = step[:position]
        box = boxes.setdefault(hash_step(label), {})
        if step[position] == "-":
            box.pop(label, None)
            continue
        focal = step[position + 1 : position + 2]
        if not focal.isdigit():
            raise ValueError(f"missing focal length in step {step!r}")
        box[label] = int(focal)

    return sum(
        (number + 1) * slot * focal
        for number, lenses in boxes.items()
        for slot, focal in enumerate(lenses.values(), start=1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve day 15.")
    parser.add_argument("input", nargs="?", default="input.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        line = read_text(args.input)
    except OSError as exc:
        print(f"unable to read input file: {exc}", file=sys.stderr)
        return 1
    print("puzzle 1:", puzzle1(line))
    print("puzzle 2:", puzzle2(line))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())