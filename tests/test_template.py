import io

from adventsolver.inputs import lines_from
from adventsolver.template import main, puzzle1


def test_puzzle1_from_reader():
    assert puzzle1(lines_from(io.StringIO("111\n222"))) == 6


def test_puzzle1_empty():
    assert puzzle1([]) == 0


def test_main_prints_result(tmp_path, capsys):
    source = tmp_path / "lines.txt"
    source.write_text("111\n222\n", encoding="utf-8")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == "puzzle 1: 6\n"


def test_main_reports_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "cannot read file" in capsys.readouterr().err