"""Parsing helpers for puzzle input."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def split_ints(text: str, delimiter: str) -> list[int]:
    """Split text on a delimiter and parse each space-trimmed part as an int."""
    result = []
    for part in text.split(delimiter):
        part = part.strip(" ")
        if not _INTEGER.fullmatch(part):
            raise ValueError(f"invalid integer: {part!r}")
        result.append(int(part))
    return result