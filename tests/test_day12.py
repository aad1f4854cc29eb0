import pytest

from adventsolver.day12 import count_arrangements, main, puzzle1, puzzle2

EXAMPLE = [
    "???.### 1,1,3",
    ".??..??...?##. 1,1,3",
    "?#?#?#?#?#?#?#? 1,3,1,6",
    "????.#...#... 4,1,1",
    "????.######..#####. 1,6,5",
    "?###???????? 3,2,1",
]


def test_puzzle1():
    assert puzzle1(EXAMPLE) == 21


def test_puzzle2():
    assert puzzle2(EXAMPLE) == 525152


@pytest.mark.parametrize(
    "pattern, groups, expected",
    [
        ("???.###", [1, 1, 3], 1),
        (".??..??...?##.", [1, 1, 3], 4),
        ("?#?#?#?#?#?#?#?", [1, 3, 1, 6], 1),
        ("????.#...#...", [4, 1, 1], 1),
        ("????.######..#####.", [1, 6, 5], 4),
        ("?###????????", [3, 2, 1], 10),
    ],
)
def test_count_arrangements(pattern, groups, expected):
    assert count_arrangements(pattern, groups) == expected


def test_count_arrangements_impossible():
    assert count_arrangements("#", [2]) == 0


def test_count_arrangements_no_groups():
    assert count_arrangements("??..", []) == 1


def test_puzzle2_impossible_line_raises():
    with pytest.raises(ValueError):
        puzzle2(["# 2"])


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("???.### 1,1,3\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "puzzle 1: 1\npuzzle 2: 1\n"