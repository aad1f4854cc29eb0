"""Small numeric helpers."""

from __future__ import annotations

from typing import Iterable


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("unable to get minimum of empty sequence")
    return min(items)