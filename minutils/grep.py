"""Print lines that match a regular expression."""

import argparse
import os
import re
import sys
from contextlib import ExitStack

from .utils import _describe_error, lines_with_eol, open_input


def find_lines(lines, pattern, invert_match=False):
    """Yield the lines the pattern matches; with invert_match no line is dropped."""
    for line in lines:
        if invert_match or pattern.search(line):
            yield line


def _print_matches(path, stream, pattern, invert_match, print_filename, count):
    prefix = f"{path}:" if print_filename else ""
    matches = find_lines(lines_with_eol(stream), pattern, invert_match)
    if count:
        total = sum(1 for _ in matches)
        sys.stdout.write(f"{prefix}{total}\n")
    else:
        for line in matches:
            sys.stdout.write(prefix + line)


def _walk_files(root):
    with os.scandir(root) as entries:
        children = sorted(entries, key=lambda entry: entry.name)
    for entry in children:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        elif entry.is_file(follow_symlinks=False):
            yield entry.path


def main(argv=None):
    parser = argparse.ArgumentParser(prog="grep", description="Search for a pattern")
    parser.add_argument("pattern", help="Pattern")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Input paths")
    parser.add_argument("-v", "--invert-match", action="store_true",
                        help="Output lines that don't match the pattern")
    parser.add_argument("-i", "--insensitive", action="store_true",
                        help="Match pattern in a case-insensitive manner")
    parser.add_argument("-c", "--count", action="store_true",
                        help="Output the number of lines matched")
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="Match pattern in given directories recursively")
    args = parser.parse_args(argv)

    try:
        pattern = re.compile(args.pattern, re.IGNORECASE if args.insensitive else 0)
    except re.error:
        print(f'Invalid pattern "{args.pattern}"', file=sys.stderr)
        return 1

    paths = args.paths or ["-"]
    for path in paths:
        if args.recursive and os.path.isdir(path):
            try:
                for file_path in _walk_files(path):
                    with open_input(file_path) as stream:
                        _print_matches(file_path, stream, pattern,
                                       args.invert_match, True, args.count)
            except (OSError, UnicodeDecodeError) as exc:
                failed = getattr(exc, "filename", None) or path
                print(_describe_error(failed, exc), file=sys.stderr)
                return 1
            continue
        if os.path.isdir(path):
            print(f"{path} is a directory", file=sys.stderr)
            continue
        with ExitStack() as stack:
            try:
                stream = stack.enter_context(open_input(path))
            except OSError as exc:
                print(_describe_error(path, exc), file=sys.stderr)
                continue
            try:
                _print_matches(path, stream, pattern, args.invert_match,
                               len(paths) > 1, args.count)
            except (OSError, UnicodeDecodeError) as exc:
                print(_describe_error(path, exc), file=sys.stderr)
                return 1
    return 0