import io

import pytest

from adventsolver.inputs import (
    ints_from,
    lines_from,
    read_ints,
    read_lines,
    read_text,
    text_from,
)


def test_lines_from_splits_lines():
    assert lines_from(io.StringIO("111\n222")) == ["111", "222"]


def test_lines_from_ignores_final_newline():
    assert lines_from(io.StringIO("111\n222\n")) == ["111", "222"]


def test_lines_from_strips_carriage_returns():
    assert lines_from(io.StringIO("ab\r\ncd\r\n")) == ["ab", "cd"]


def test_lines_from_keeps_blank_lines_inside():
    assert lines_from(io.StringIO("a\n\nb\n")) == ["a", "", "b"]


def test_empty_stream():
    assert lines_from(io.StringIO("")) == []
    assert text_from(io.StringIO("")) == ""
    assert ints_from(io.StringIO("")) == []


def test_text_from_joins_lines():
    lines = ["rn=1,cm-", "qp=3"]
    assert text_from(io.StringIO("\n".join(lines) + "\n")) == "".join(lines)


def test_ints_from_parses_each_line():
    assert ints_from(io.StringIO("1\n-2\n+3\n")) == [1, -2, 3]


@pytest.mark.parametrize("bad", ["x\n", " 1\n", "1.5\n", "1\n\n2\n"])
def test_ints_from_rejects_bad_lines(bad):
    with pytest.raises(ValueError):
        ints_from(io.StringIO(bad))


def test_read_functions_round_trip(tmp_path):
    path = tmp_path / "input.txt"
    numbers = [7, 42, -5]
    path.write_text("\n".join(str(n) for n in numbers) + "\n", encoding="utf-8")
    assert read_ints(path) == numbers
    assert read_lines(path) == [str(n) for n in numbers]
    assert read_text(path) == "".join(str(n) for n in numbers)


def test_read_lines_handles_crlf_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"ab\r\ncd\r\n")
    assert read_lines(path) == ["ab", "cd"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")