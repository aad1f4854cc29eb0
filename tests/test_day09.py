import pytest

from adventsolver.day09 import extrapolate, puzzle1, puzzle2

EXAMPLE = [
    "0 3 6 9 12 15",
    "1 3 6 10 15 21",
    "10 13 16 21 30 45",
]


def test_puzzle1_example():
    assert puzzle1(EXAMPLE) == 114


def test_puzzle2_example():
    assert puzzle2(EXAMPLE) == 2


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([0, 3, 6, 9, 12, 15], 18),
        ([1, 3, 6, 10, 15, 21], 28),
        ([10, 13, 16, 21, 30, 45], 68),
        ([45, 30, 21, 16, 13, 10], 5),
        ([7], 7),
    ],
)
def test_extrapolate(values, expected):
    assert extrapolate(values) == expected


def test_extrapolate_empty():
    with pytest.raises(ValueError):
        extrapolate([])


def test_puzzle1_rejects_non_numbers():
    with pytest.raises(ValueError):
        puzzle1(["1 x 3"])