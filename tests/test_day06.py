import pytest

from adventsolver.day06 import count_ways, puzzle1, puzzle2

EXAMPLE = [
    "Time:      7  15   30",
    "Distance:  9  40  200",
]


def test_puzzle1_example():
    assert puzzle1(EXAMPLE) == 288


def test_puzzle1_single_race():
    assert puzzle1(["Time:      7", "Distance:  9"]) == 4


def test_puzzle2_example():
    assert puzzle2(EXAMPLE) == 71503


@pytest.mark.parametrize(
    ("time", "distance", "expected"),
    [(7, 9, 4), (15, 40, 8), (30, 200, 9), (4, 4, 0), (0, 0, 0), (3, 100, 0)],
)
def test_count_ways(time, distance, expected):
    assert count_ways(time, distance) == expected


def test_count_ways_is_symmetric_around_half():
    # Hold times 1..5 all beat a zero record; 0 and 6 travel nothing.
    assert count_ways(6, 0) == 5