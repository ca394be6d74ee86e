"""Print the last lines or bytes of files."""

import argparse
import re
import sys

from .utils import _describe_error

_I64_MAX = 2**63 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


def parse_position(text):
    """Parse a count such as "10", "-10" or "+10" into (position, from_start).

    A count taken from the end of the input comes back negative.
    Raises ValueError when the text is not a count.
    """
    from_start = text.startswith("+")
    digits = (text[1:] if from_start else text).lstrip("-")
    if not _NUMBER.fullmatch(digits) or int(digits) > _I64_MAX:
        raise ValueError(f"invalid count: {text!r}")
    number = int(digits)
    return (number if from_start else -number), from_start


def tail_bytes(data, position, from_start):
    """Select bytes from the position-th on (counting from 1), or the last -position."""
    if from_start:
        return data[max(position - 1, 0):]
    return data[max(len(data) + position, 0):]


def tail_lines(data, position, from_start):
    """Select lines from the position-th on (counting from 1), or the last -position."""
    if from_start:
        # Line breaks are searched from the second byte on, and the byte
        # right after each break found is not examined.
        start = 0
        search = 1
        for _ in range(max(position - 1, 0)):
            found = data.find(b"\n", search)
            if found < 0:
                return b""
            start = found + 1
            search = found + 2
        return data[start:]

    end = len(data)
    for _ in range(-position + 1):
        found = data.rfind(b"\n", 0, end)
        if found < 0:
            return data
        end = found
    return data[end + 1:]


def main(argv=None):
    parser = argparse.ArgumentParser(prog="tail", description="Print the end of files")
    parser.add_argument("files", nargs="+", metavar="FILE", help="Input files")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-c", "--bytes", metavar="BYTES",
                       help="Output the last BYTES bytes; or +K to start with the Kth")
    group.add_argument("-n", "--lines", metavar="LINES",
                       help="Output the last LINES lines (default 10); or +K to start "
                            "with the Kth")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Suppress headers when several files are given")
    args = parser.parse_args(argv)

    is_bytes = args.bytes is not None
    text = args.bytes if is_bytes else (args.lines if args.lines is not None else "10")
    try:
        position, from_start = parse_position(text)
    except ValueError:
        kind = "byte" if is_bytes else "line"
        print(f"illegal {kind} count -- {text}", file=sys.stderr)
        return 1

    select = tail_bytes if is_bytes else tail_lines
    headers = len(args.files) > 1 and not args.quiet
    for index, path in enumerate(args.files):
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            print(_describe_error(path, exc), file=sys.stderr)
            continue
        if headers:
            print(f"==> {path} <==")
        chunk = select(data, position, from_start)
        sys.stdout.write(chunk.decode("utf-8", errors="replace"))
        if headers and index != len(args.files) - 1:
            print()
    return 0