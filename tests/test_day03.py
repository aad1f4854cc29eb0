import pytest

from adventsolver.day03 import main, puzzle1, puzzle2

SCHEMATIC = """
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
""".split()


def test_puzzle1():
    assert puzzle1(SCHEMATIC) == 4361


@pytest.mark.parametrize(
    "lines, expected",
    [(SCHEMATIC, 467835), (SCHEMATIC[:3], 16345), (SCHEMATIC[-3:], 451490)],
)
def test_puzzle2(lines, expected):
    assert puzzle2(lines) == expected


def test_main_prints_both_results(tmp_path, capsys):
    schematic = tmp_path / "schematic.txt"
    schematic.write_text("\n".join(SCHEMATIC), encoding="utf-8")
    assert main([str(schematic)]) == 0
    assert capsys.readouterr().out.splitlines() == ["puzzle 1: 4361", "puzzle 2: 467835"]