import re

import pytest

from minutils.cut import (
    PositionError,
    extract_bytes,
    extract_chars,
    extract_fields,
    main,
    parse_pos,
)


@pytest.mark.parametrize(
    "text, message",
    [
        ("0", 'illegal list value: "0"'),
        ("0-1", 'illegal list value: "0-1"'),
        ("+1", 'illegal list value: "+1"'),
        ("+1-2", 'illegal list value: "+1-2"'),
        ("1-+2", 'illegal list value: "1-+2"'),
        ("a", 'illegal list value: "a"'),
        ("1,a", 'illegal list value: "1,a"'),
        ("1-a", 'illegal list value: "1-a"'),
        ("a-1", 'illegal list value: "a-1"'),
        ("1-1", "First number in range (1) must be lower than second number (1)"),
        ("2-1", "First number in range (2) must be lower than second number (1)"),
    ],
)
def test_parse_pos_error_messages(text, message):
    with pytest.raises(PositionError) as info:
        parse_pos(text)
    assert str(info.value) == message


@pytest.mark.parametrize("text", ["", "-", ",", "1,", "1-", "1-1-1", "1-1-a"])
def test_parse_pos_wonky_ranges(text):
    with pytest.raises(PositionError):
        parse_pos(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", [range(0, 1)]),
        ("01", [range(0, 1)]),
        ("1,3", [range(0, 1), range(2, 3)]),
        ("001,0003", [range(0, 1), range(2, 3)]),
        ("1-3", [range(0, 3)]),
        ("0001-03", [range(0, 3)]),
        ("1,7,3-5", [range(0, 1), range(6, 7), range(2, 5)]),
        ("15,19-20", [range(14, 15), range(18, 20)]),
    ],
)
def test_parse_pos_valid(text, expected):
    assert parse_pos(text) == expected


def test_extract_bytes_lossy():
    assert extract_bytes("Émile", [range(0, 1)]) == "\ufffd"
    assert extract_bytes("abc", [range(0, 2)]) == "ab"


def test_extract_chars():
    assert extract_chars("Émile", [range(0, 2)]) == "Ém"
    assert extract_chars("abc", [range(0, 1), range(0, 1)]) == "aa"


def test_extract_fields():
    assert extract_fields(["a", "b", "c"], [range(0, 2)], ",") == "a,b"
    assert extract_fields(["a", "b", "c"], [range(2, 3), range(0, 1)]) == "ca"


@pytest.fixture
def tsv(tmp_path):
    path = tmp_path / "movies.tsv"
    path.write_text("Movie\tYear\tRating\nÉmile\t1999\tA\n", encoding="utf-8")
    return str(path)


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-f", "1"], "Movie\nÉmile\n"),
        (["-f", "1-2"], "Movie\tYear\nÉmile\t1999\n"),
        (["-f", "3"], "Rating\nA\n"),
        (["-c", "1"], "M\nÉ\n"),
        (["-c", "1,1"], "MM\nÉÉ\n"),
        (["-b", "1"], "M\n\ufffd\n"),
        (["-b", "2"], "o\n\ufffd\n"),
        (["-b", "1-3"], "Mov\nÉm\n"),
    ],
)
def test_main_tsv(tsv, capsys, args, expected):
    assert main([tsv, *args]) == 0
    assert capsys.readouterr().out == expected


def test_main_csv_quoted(tmp_path, capsys):
    path = tmp_path / "movies.csv"
    path.write_text('Title,Year\n"Hello, world",2000\n', encoding="utf-8")
    assert main([str(path), "-f", "1", "-d", ","]) == 0
    assert capsys.readouterr().out == "Title\nHello, world\n"


def test_main_ragged_record_fails(tmp_path, capsys):
    path = tmp_path / "ragged.tsv"
    path.write_text("a\tb\nc\n", encoding="utf-8")
    assert main([str(path), "-f", "1"]) == 1
    assert "found record with 1 fields" in capsys.readouterr().err


def test_main_skips_bad_file(tsv, tmp_path, capsys):
    bad = str(tmp_path / "missing")
    assert main(["-f", "1", tsv, bad, tsv]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Movie\nÉmile\n" * 2
    assert re.search(re.escape(bad) + r": .* [(]os error 2[)]", captured.err)


@pytest.mark.parametrize("flag", ["-f", "-b", "-c"])
def test_main_bad_list(tsv, capsys, flag):
    assert main([tsv, flag, "xYz12ab"]) == 1
    assert 'illegal list value: "xYz12ab"' in capsys.readouterr().err


def test_main_requires_range(tsv):
    with pytest.raises(SystemExit) as info:
        main([tsv])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "args",
    [
        ["-c", "1", "-f", "1", "-b", "1"],
        ["-f", "1", "-b", "1"],
        ["-c", "1", "-f", "1"],
        ["-c", "1", "-b", "1"],
    ],
)
def test_main_conflicting_ranges(tsv, args):
    with pytest.raises(SystemExit) as info:
        main([tsv, *args])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "delimiter, message",
    [
        ("", "cannot parse char from empty string"),
        (",,", "too many characters in string"),
    ],
)
def test_main_bad_delimiter(tsv, capsys, delimiter, message):
    with pytest.raises(SystemExit) as info:
        main([tsv, "-f", "1", "-d", delimiter])
    assert info.value.code == 2
    assert message in capsys.readouterr().err