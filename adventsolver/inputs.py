"""Reading puzzle input as text, lines or integers."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _lines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def text_from(stream: Iterable[str]) -> str:
    """Join all lines of a stream into one string without line breaks."""
    return "".join(_lines(stream))


def lines_from(stream: Iterable[str]) -> list[str]:
    """Return the lines of a stream without their line endings."""
    return list(_lines(stream))


def ints_from(stream: Iterable[str]) -> list[int]:
    """Return one integer per line of a stream."""
    return [_to_int(line) for line in _lines(stream)]


def read_text(path: PathLike) -> str:
    """Read a file as one string with its line breaks removed."""
    with open(path, encoding="utf-8", newline="\n") as stream:
        return text_from(stream)


def read_lines(path: PathLike) -> list[str]:
    """Read a file as a list of lines."""
    with open(path, encoding="utf-8", newline="\n") as stream:
        return lines_from(stream)


def read_ints(path: PathLike) -> list[int]:
    """Read a file holding one integer per line."""
    with open(path, encoding="utf-8", newline="\n") as stream:
        return ints_from(stream)