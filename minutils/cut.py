"""Select bytes, characters or fields from each line."""

import argparse
import csv
import sys
from contextlib import ExitStack

from .utils import _describe_error, lines_with_eol, open_input


class PositionError(ValueError):
    """A position list that cannot be parsed."""


def _illegal(text):
    return PositionError(f'illegal list value: "{text}"')


def _parse_number(part, text):
    if part.strip().startswith("+") or not (part.isascii() and part.isdigit()):
        raise _illegal(text)
    number = int(part)
    if number == 0:
        raise _illegal(text)
    return number


def parse_pos(ranges):
    """Parse a list such as "1,3-5" into zero-based half-open ranges."""
    positions = []
    for part in ranges.split(","):
        nums = [_parse_number(piece, ranges) for piece in part.split("-")]
        if len(nums) > 2:
            raise _illegal(ranges)
        if len(nums) == 2:
            start, end = nums
            if start >= end:
                raise PositionError(
                    f"First number in range ({start}) "
                    f"must be lower than second number ({end})"
                )
            positions.append(range(start - 1, end))
        else:
            positions.append(range(nums[0] - 1, nums[0]))
    return positions


def extract_bytes(line, positions):
    """Select byte ranges of a line's UTF-8 encoding, each decoded leniently."""
    data = line.encode("utf-8")
    return "".join(
        data[pos.start:pos.stop].decode("utf-8", errors="replace") for pos in positions
    )


def extract_chars(line, positions):
    """Select character ranges of a line."""
    return "".join(line[pos.start:pos.stop] for pos in positions)


def extract_fields(record, positions, delimiter="\t"):
    """Select field ranges of a record, joining each range with the delimiter."""
    return "".join(delimiter.join(record[pos.start:pos.stop]) for pos in positions)


def _strip_eol(line):
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _cut_stream(stream, args):
    if args.bytes is not None:
        positions = parse_pos(args.bytes)
        for line in lines_with_eol(stream):
            yield extract_bytes(_strip_eol(line), positions)
    elif args.chars is not None:
        positions = parse_pos(args.chars)
        for line in lines_with_eol(stream):
            yield extract_chars(_strip_eol(line), positions)
    else:
        positions = parse_pos(args.fields)
        width = None
        for record in csv.reader(stream, delimiter=args.delimiter):
            if not record:
                continue
            if width is None:
                width = len(record)
            elif len(record) != width:
                raise csv.Error(
                    f"found record with {len(record)} fields, "
                    f"but the previous record has {width} fields"
                )
            yield extract_fields(record, positions, args.delimiter)


def _single_char(text):
    if not text:
        raise argparse.ArgumentTypeError("cannot parse char from empty string")
    if len(text) > 1:
        raise argparse.ArgumentTypeError("too many characters in string")
    return text


def main(argv=None):
    parser = argparse.ArgumentParser(prog="cut", description="Cut out parts of lines")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("-f", "--fields", metavar="FIELDS", help="Select only these fields")
    group.add_argument("-b", "--bytes", metavar="BYTES", help="Select only these bytes")
    group.add_argument("-c", "--chars", metavar="CHARS", help="Select only these characters")
    parser.add_argument("-d", "--delimiter", type=_single_char, default="\t",
                        metavar="DELIM",
                        help="Use DELIM instead of TAB for field delimiter")
    args = parser.parse_args(argv)

    for path in args.files or ["-"]:
        with ExitStack() as stack:
            try:
                stream = stack.enter_context(open_input(path))
            except OSError as exc:
                print(_describe_error(path, exc), file=sys.stderr)
                continue
            try:
                for text in _cut_stream(stream, args):
                    sys.stdout.write(text + "\n")
            except PositionError as exc:
                sys.stderr.write(str(exc))
                return 1
            except (OSError, UnicodeDecodeError, csv.Error) as exc:
                sys.stderr.write(_describe_error(path, exc))
                return 1
    return 0