import io
import re
import sys

import pytest

from minutils.comm import Column, compare_lines, format_entry, main

FILE1 = "a\nb\nc\nd\n"
FILE2 = "B\nc\n"


@pytest.fixture
def inputs(tmp_path):
    paths = {}
    for name, text in [("empty", ""), ("file1", FILE1), ("file2", FILE2), ("blank", "\n\n")]:
        path = tmp_path / f"{name}.txt"
        path.write_bytes(text.encode("utf-8"))
        paths[name] = str(path)
    return paths


def test_dies_no_args(capsys):
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2
    assert "usage" in capsys.readouterr().err.lower()


@pytest.mark.parametrize("bad_first", [True, False])
def test_dies_bad_file(capsys, inputs, tmp_path, bad_first):
    bad = str(tmp_path / "Xq3vB7z")
    args = [bad, inputs["file1"]] if bad_first else [inputs["file1"], bad]
    assert main(args) == 1
    assert re.search(rf"{re.escape(bad)}: .* \(os error 2\)", capsys.readouterr().err)


def test_dies_both_stdin(capsys):
    assert main(["-", "-"]) == 1
    assert 'Both input files cannot be STDIN ("-")' in capsys.readouterr().err


def test_empty_empty(capsys, inputs):
    assert main([inputs["empty"], inputs["empty"]]) == 0
    assert capsys.readouterr().out == ""


def test_file1_file1(capsys, inputs):
    main([inputs["file1"], inputs["file1"]])
    assert capsys.readouterr().out == "\t\ta\n\t\tb\n\t\tc\n\t\td\n"


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([], "\tB\na\nb\n\t\tc\nd\n"),
        (["-1"], "B\n\tc\n"),
        (["-2"], "a\nb\n\tc\nd\n"),
        (["-3"], "\tB\na\nb\nd\n"),
        (["-12"], "c\n"),
        (["-23"], "a\nb\nd\n"),
        (["-13"], "B\n"),
        (["-123"], ""),
        (["-1", "-i"], "\tb\n\tc\n"),
        (["-2", "-i"], "a\n\tb\n\tc\nd\n"),
        (["-3", "-i"], "a\nd\n"),
        (["-12", "-i"], "b\nc\n"),
        (["-23", "-i"], "a\nd\n"),
        (["-13", "-i"], ""),
        (["-d", ":"], ":B\na\nb\n::c\nd\n"),
        (["-1", "-d", ":"], "B\n:c\n"),
        (["-2", "-d", ":"], "a\nb\n:c\nd\n"),
    ],
)
def test_file1_file2(capsys, inputs, flags, expected):
    assert main([inputs["file1"], inputs["file2"]] + flags) == 0
    assert capsys.readouterr().out == expected


def test_file1_empty(capsys, inputs):
    main([inputs["file1"], inputs["empty"]])
    assert capsys.readouterr().out == FILE1


def test_empty_file2(capsys, inputs):
    main([inputs["empty"], inputs["file2"]])
    assert capsys.readouterr().out == "\tB\n\tc\n"


def test_blank_file1(capsys, inputs):
    main([inputs["blank"], inputs["file1"]])
    assert capsys.readouterr().out == "\n\n\ta\n\tb\n\tc\n\td\n"


def test_stdin_file1(capsys, monkeypatch, inputs):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(FILE1.encode()), encoding="utf-8"))
    assert main(["-", inputs["file2"]]) == 0
    assert capsys.readouterr().out == "\tB\na\nb\n\t\tc\nd\n"


def test_stdin_file2(capsys, monkeypatch, inputs):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(FILE2.encode()), encoding="utf-8"))
    assert main(["-12", "-i", inputs["file1"], "-"]) == 0
    assert capsys.readouterr().out == "b\nc\n"


def test_dies_bad_delimiter(capsys, inputs):
    with pytest.raises(SystemExit):
        main([inputs["file1"], inputs["file2"], "-d", ",,"])
    assert "too many characters in string" in capsys.readouterr().err


def test_compare_lines_insensitive_keeps_first_file_line():
    assert list(compare_lines(["B\n"], ["b\n"], ignore_case=True)) == [(Column.BOTH, "B\n")]


def test_format_entry():
    assert format_entry(Column.BOTH, "x\n", {Column.ONE}, "\t") == "\tx\n"
    assert format_entry(Column.TWO, "x\n", {Column.TWO}, "\t") == ""