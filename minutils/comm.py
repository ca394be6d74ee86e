"""Compare two sorted files line by line."""

import argparse
import sys
from contextlib import ExitStack
from enum import IntEnum

from .utils import _describe_error, lines_with_eol, open_input


class Column(IntEnum):
    """Output column: unique to the first file, to the second, or common."""

    ONE = 1
    TWO = 2
    BOTH = 3


_LEADING_COLUMNS = {
    Column.ONE: (),
    Column.TWO: (Column.ONE,),
    Column.BOTH: (Column.ONE, Column.TWO),
}


def compare_lines(lines1, lines2, ignore_case=False):
    """Merge two sorted line sequences, yielding (Column, line) pairs."""
    key = str.lower if ignore_case else (lambda line: line)
    it1, it2 = iter(lines1), iter(lines2)
    line1, line2 = next(it1, None), next(it2, None)
    while line1 is not None or line2 is not None:
        if line2 is None or (line1 is not None and key(line1) < key(line2)):
            yield Column.ONE, line1
            line1 = next(it1, None)
        elif line1 is None or key(line1) > key(line2):
            yield Column.TWO, line2
            line2 = next(it2, None)
        else:
            yield Column.BOTH, line1
            line1, line2 = next(it1, None), next(it2, None)


def format_entry(column, line, suppress=(), delimiter="\t"):
    """Render one entry, indented past the columns that are not suppressed."""
    if column in suppress:
        return ""
    indent = "".join(delimiter for c in _LEADING_COLUMNS[column] if c not in suppress)
    return indent + line


def _single_char(text):
    if not text:
        raise argparse.ArgumentTypeError("cannot parse char from empty string")
    if len(text) > 1:
        raise argparse.ArgumentTypeError("too many characters in string")
    return text


def main(argv=None):
    parser = argparse.ArgumentParser(prog="comm", description="Compare two sorted files")
    parser.add_argument("file1", metavar="FILE1")
    parser.add_argument("file2", metavar="FILE2")
    parser.add_argument("-1", dest="suppress_1", action="store_true",
                        help="Suppress column 1 (lines unique to FILE1)")
    parser.add_argument("-2", dest="suppress_2", action="store_true",
                        help="Suppress column 2 (lines unique to FILE2)")
    parser.add_argument("-3", dest="suppress_3", action="store_true",
                        help="Suppress column 3 (lines that appear in both files)")
    parser.add_argument("-i", "--insensitive", action="store_true", help="Ignore case")
    parser.add_argument("-d", "--delimiter", type=_single_char, default="\t",
                        help="Delimiter")
    args = parser.parse_args(argv)

    if args.file1 == args.file2 == "-":
        print('Both input files cannot be STDIN ("-")', file=sys.stderr)
        return 1

    suppress = {
        column
        for column, flag in (
            (Column.ONE, args.suppress_1),
            (Column.TWO, args.suppress_2),
            (Column.BOTH, args.suppress_3),
        )
        if flag
    }
    with ExitStack() as stack:
        streams = []
        for path in (args.file1, args.file2):
            try:
                streams.append(stack.enter_context(open_input(path)))
            except OSError as exc:
                print(_describe_error(path, exc), file=sys.stderr)
                return 1
        try:
            for column, line in compare_lines(
                lines_with_eol(streams[0]), lines_with_eol(streams[1]), args.insensitive
            ):
                sys.stdout.write(format_entry(column, line, suppress, args.delimiter))
        except (OSError, UnicodeDecodeError) as exc:
            print(exc, file=sys.stderr)
            return 1
    return 0