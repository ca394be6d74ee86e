"""Print the first lines or bytes of files."""

import argparse
import io
import sys
from contextlib import contextmanager
from itertools import islice

from .utils import _describe_error, lines_with_eol, open_input


def head_lines(stream, count):
    """Yield the first count lines of a stream with their endings."""
    return islice(lines_with_eol(stream), count)


def head_bytes(stream, count):
    """Read the first count bytes of a binary stream, decoded leniently."""
    return stream.read(count).decode("utf-8", errors="replace")


@contextmanager
def _open_binary(path):
    if str(path) == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        yield buffer if buffer is not None else io.BytesIO(sys.stdin.read().encode("utf-8"))
    else:
        with open(path, "rb") as handle:
            yield handle


def _count(text):
    digits = text[1:] if text.startswith("+") else text
    if not text:
        raise argparse.ArgumentTypeError("cannot parse integer from empty string")
    if not (digits.isascii() and digits.isdigit()):
        raise argparse.ArgumentTypeError(
            f"invalid value '{text}': invalid digit found in string"
        )
    return int(digits)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="head", description="Print the start of files")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-n", "--lines", type=_count, metavar="LINES",
                       help="Print the first LINES lines of each file (default 10)")
    group.add_argument("-c", "--bytes", type=_count, metavar="BYTES",
                       help="Print the first BYTES bytes of each file")
    args = parser.parse_args(argv)

    files = args.files or ["-"]
    line_count = 10 if args.lines is None else args.lines
    for index, path in enumerate(files):
        desc = "standard input" if path == "-" else path
        try:
            opener = _open_binary if args.bytes is not None else open_input
            with opener(path) as stream:
                if len(files) > 1:
                    print(f"==> {desc} <==")
                if args.bytes is not None:
                    sys.stdout.write(head_bytes(stream, args.bytes))
                else:
                    sys.stdout.writelines(head_lines(stream, line_count))
        except (OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(_describe_error(path, exc))
            return 1
        if index != len(files) - 1:
            print()
    return 0