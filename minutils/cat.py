"""Concatenate files, optionally numbering lines."""

import argparse
import sys

from .utils import _describe_error, lines_with_eol, open_input


def _strip_eol(line):
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def number_lines(lines, number_all=False, number_nonblank=False):
    """Yield output lines; numbering non-blank lines overrides numbering all."""
    number_all = number_all and not number_nonblank
    counter = 0
    for raw in lines:
        line = _strip_eol(raw)
        if number_all or (number_nonblank and line):
            counter += 1
            yield f"{counter:>6}\t{line}\n"
        else:
            yield f"{line}\n"


def main(argv=None):
    parser = argparse.ArgumentParser(prog="cat", description="Concatenate files")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to concatenate")
    parser.add_argument("-n", "--number", action="store_true", help="Number output lines")
    parser.add_argument(
        "-b",
        "--number-nonblank",
        action="store_true",
        help="Number nonempty output lines, overrides -n",
    )
    args = parser.parse_args(argv)

    for path in args.files or ["-"]:
        try:
            with open_input(path) as stream:
                sys.stdout.writelines(
                    number_lines(lines_with_eol(stream), args.number, args.number_nonblank)
                )
        except (OSError, UnicodeDecodeError) as exc:
            sys.stderr.write(_describe_error(path, exc))
            return 0
    return 0