"""Print arguments separated by spaces."""

import argparse
import sys


def format_echo(words, omit_newline=False):
    """Join words with spaces, ending with a newline unless omitted."""
    return " ".join(words) + ("" if omit_newline else "\n")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="echo", description="Print text")
    parser.add_argument("text", nargs="+", metavar="TEXT", help="Input text")
    parser.add_argument(
        "-n", dest="omit_newline", action="store_true", help="Do not print newline"
    )
    args = parser.parse_intermixed_args(argv)
    sys.stdout.write(format_echo(args.text, args.omit_newline))
    return 0