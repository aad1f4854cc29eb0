"""Camel cards: rank hands and total their winnings."""

from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Callable, Sequence

from adventsolver.template import _solve

_ORDER_PLAIN = "AKQJT98765432"
_ORDER_JOKER = "AKQT98765432J"
_JOKER = "J"


class Combination(IntEnum):
    """Hand types from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _classify(counts: Counter[str], hand: str) -> Combination:
    values = set(counts.values())
    distinct = len(counts)
    if distinct == 1:
        return Combination.FIVE_OF_A_KIND
    if distinct == 4:
        return Combination.ONE_PAIR
    if distinct == 5:
        return Combination.HIGH_CARD
    if distinct == 2:
        if 4 in values or 1 in values:
            return Combination.FOUR_OF_A_KIND
        return Combination.FULL_HOUSE
    if distinct == 3:
        if 3 in values:
            return Combination.THREE_OF_A_KIND
        if 2 in values:
            return Combination.TWO_PAIR
    raise ValueError(f"unsupported combination: {hand!r}")


def combination1(hand: str) -> Combination:
    """Return the type of a hand with no wildcards."""
    return _classify(Counter(hand), hand)


def combination2(hand: str) -> Combination:
    """Return the type of a hand where jokers join the most frequent card."""
    counts = Counter(card for card in hand if card != _JOKER)
    jokers = hand.count(_JOKER)
    if jokers:
        if counts:
            best = max(counts, key=counts.__getitem__)
            counts[best] += jokers
        else:
            counts[_JOKER] = jokers
    return _classify(counts, hand)


def _winnings(lines: list[str], classify: Callable[[str], Combination], order: str) -> int:
    hands = []
    for line in lines:
        hand, bid = line.split(" ")[:2]
        strength = tuple(-order.index(card) for card in hand)
        hands.append(((classify(hand), strength), int(bid)))
    hands.sort(key=lambda item: item[0])
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def puzzle1(lines: list[str]) -> int:
    """Total winnings with J as an ordinary jack."""
    return _winnings(lines, combination1, _ORDER_PLAIN)


def puzzle2(lines: list[str]) -> int:
    """Total winnings with J as the weakest wildcard."""
    return _winnings(lines, combination2, _ORDER_JOKER)


def main(argv: Sequence[str] | None = None) -> int:
    return _solve(argv, "Solve day 7.", puzzle1, puzzle2)


if __name__ == "__main__":
    raise SystemExit(main())