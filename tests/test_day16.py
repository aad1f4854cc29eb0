import pytest

from adventsolver.day16 import Direction, energized_count, main, puzzle1, puzzle2

EXAMPLE = [
    r".|...\....",
    r"|.-.\.....",
    r".....|-...",
    r"........|.",
    r"..........",
    r".........\ ".rstrip(),
    r"..../.\\..",
    r".-.-/..|..",
    r".|....-|.\ ".rstrip(),
    r"..//.|....",
]


@pytest.mark.parametrize(
    "lines, expected",
    [
        ([r".|.", r"|..", r".\|"], 7),
        ([r".\.", r"|..", r".\."], 5),
        ([r".\.", r"|.-", r".\|"], 8),
        ([r".\..", r"|.-.", r".\|.", r"\../"], 15),
        (
            [
                r".|...\....",
                r".....|-...",
                ".........\\",
                r"..../.\\..",
                r".-.-/..|..",
                ".|....-|.\\",
                r"..//.|....",
            ],
            38,
        ),
        (EXAMPLE, 46),
    ],
)
def test_puzzle1(lines, expected):
    assert puzzle1(lines) == expected


def test_example_rows_are_square():
    assert all(len(row) == 10 for row in EXAMPLE)
    assert puzzle1(EXAMPLE) == 46


def test_puzzle2():
    assert puzzle2(EXAMPLE) == 51


def test_puzzle2_at_least_puzzle1():
    assert puzzle2(EXAMPLE) >= puzzle1(EXAMPLE)


def test_energized_count_from_top_edge():
    assert energized_count(EXAMPLE, (0, 3), Direction.DOWN) == 51


def test_energized_count_empty_row():
    assert energized_count(["....."], (0, 2), Direction.RIGHT) == 3


def test_direction_step():
    assert Direction.UP.step((2, 3)) == (1, 3)
    assert Direction.RIGHT.step((2, 3)) == (2, 4)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "puzzle 1: 46\npuzzle 2: 51\n"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1