"""Print a random fortune, or every fortune matching a pattern."""

import argparse
import os
import random
import re
import sys

from .utils import _describe_error

_FORTUNE_RE = re.compile(r"(.*?)^%$", re.MULTILINE | re.DOTALL)
_U64_MAX = 2**64 - 1


class _SourceError(Exception):
    """A fortune source that could not be read."""


class Fortunes:
    """Collected fortunes with a random generator to pick from them."""

    def __init__(self, seed=None):
        self.quotes = []
        self._rng = random.Random(seed)

    def add(self, quote):
        self.quotes.append(quote)

    def select_random(self):
        """Pick a fortune at random, or None when there are none."""
        if not self.quotes:
            return None
        return self._rng.choice(self.quotes)


def parse_fortunes(text):
    """Split text into fortunes, each ended by a line holding only "%"."""
    return [match.group(1).strip() for match in _FORTUNE_RE.finditer(text)]


def _walk_files(root):
    try:
        with os.scandir(root) as entries:
            children = sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise _SourceError(_describe_error(root, exc)) from exc
    for entry in children:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        elif entry.is_file(follow_symlinks=False):
            yield entry.path


def _fortune_files(source):
    if os.path.isdir(source):
        yield from _walk_files(source)
    else:
        yield source


def _read_text(path):
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise _SourceError(_describe_error(path, exc)) from exc


def _collect(path, pattern, fortunes):
    """Add the fortunes of one file; return how many matched the pattern."""
    matched = 0
    for fortune in parse_fortunes(_read_text(path)):
        if pattern is None:
            fortunes.add(fortune)
        elif pattern.search(fortune):
            fortunes.add(fortune)
            matched += 1
    return matched


def _print_last(path, quotes, count):
    if count == 0:
        return
    sys.stderr.write(f"({os.path.basename(path)})\n%\n")
    for quote in quotes[len(quotes) - count:]:
        sys.stdout.write(f"{quote}\n%\n")


def _seed_arg(text):
    if not re.fullmatch(r"\+?[0-9]+", text) or int(text) > _U64_MAX:
        raise argparse.ArgumentTypeError(f"invalid value '{text}' for '--seed <SEED>'")
    return int(text)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="fortune", description="Print fortunes")
    parser.add_argument("sources", nargs="+", metavar="FILE",
                        help="Database files/directories")
    parser.add_argument("-m", "--pattern",
                        help="Print out all fortunes which match the pattern")
    parser.add_argument("-i", "--insensitive", action="store_true",
                        help="Ignore case for pattern")
    parser.add_argument("-s", "--seed", type=_seed_arg,
                        help="A seed for the random generator")
    args = parser.parse_args(argv)

    pattern = None
    if args.pattern is not None:
        try:
            pattern = re.compile(args.pattern, re.IGNORECASE if args.insensitive else 0)
        except re.error:
            print(f'Invalid --pattern "{args.pattern}"', file=sys.stderr)
            return 1

    fortunes = Fortunes(args.seed)
    try:
        for source in args.sources:
            for path in _fortune_files(source):
                matched = _collect(path, pattern, fortunes)
                _print_last(path, fortunes.quotes, matched)
    except _SourceError as exc:
        print(exc, file=sys.stderr)
        return 1

    if pattern is None:
        fortune = fortunes.select_random()
        print("No fortunes found" if fortune is None else fortune)
    return 0