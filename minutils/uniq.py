"""Collapse adjacent repeated lines."""

import argparse
import sys
from contextlib import ExitStack
from itertools import groupby

from .utils import _describe_error, lines_with_eol, open_input


def uniq_lines(lines):
    """Yield (first line, count) for each run of lines equal up to their endings."""
    for _, group in groupby(lines, key=lambda line: line.rstrip("\r\n")):
        first = next(group)
        yield first, 1 + sum(1 for _ in group)


def format_line(line, count=None):
    """Render a line, preceded by its count when one is given."""
    if count is None:
        return line
    return f"{count:4} {line}"


def main(argv=None):
    parser = argparse.ArgumentParser(prog="uniq", description="Report repeated lines")
    parser.add_argument("in_file", nargs="?", metavar="IN_FILE", help="Input file")
    parser.add_argument("out_file", nargs="?", metavar="OUT_FILE", help="Output file")
    parser.add_argument("-c", "--count", action="store_true",
                        help="Precede each output line with its number of occurrences")
    args = parser.parse_args(argv)

    in_path = "-" if args.in_file is None else args.in_file
    with ExitStack() as stack:
        try:
            source = stack.enter_context(open_input(in_path))
        except OSError as exc:
            sys.stderr.write(_describe_error(in_path, exc))
            return 1
        if args.out_file is None:
            sink = sys.stdout
        else:
            try:
                sink = stack.enter_context(
                    open(args.out_file, "w", encoding="utf-8", newline="")
                )
            except OSError as exc:
                sys.stderr.write(_describe_error(args.out_file, exc))
                return 1
        try:
            for line, count in uniq_lines(lines_with_eol(source)):
                sink.write(format_line(line, count if args.count else None))
        except (OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(_describe_error(in_path, exc))
            return 1
    return 0