"""Find directory entries by type and name."""

import argparse
import os
import re
import stat
import sys
from dataclasses import dataclass
from enum import Enum


class EntryType(Enum):
    """Kind of directory entry, named by its one-letter code."""

    DIR = "d"
    FILE = "f"
    LINK = "l"


@dataclass(frozen=True)
class _WalkError:
    message: str


def _io_error(path, exc):
    reason = f"{exc.strerror} (os error {exc.errno})" if exc.strerror else str(exc)
    return _WalkError(f"IO error for operation on {path}: {reason}")


def _entry_type(mode):
    if stat.S_ISREG(mode):
        return EntryType.FILE
    if stat.S_ISDIR(mode):
        return EntryType.DIR
    if stat.S_ISLNK(mode):
        return EntryType.LINK
    return None


def _file_name(path):
    name = os.path.basename(path.rstrip("/" + os.sep))
    return path if name in ("", ".", "..") else name


def _walk(path, name, ancestors):
    """Yield (path, name, mode) for path and everything under it, following links."""
    try:
        info = os.stat(path)
    except OSError as exc:
        yield _io_error(path, exc)
        return
    key = (info.st_dev, info.st_ino)
    if stat.S_ISDIR(info.st_mode) and key in ancestors:
        yield _WalkError(
            f"File system loop found: {path} points to an ancestor {ancestors[key]}"
        )
        return
    yield path, name, info.st_mode
    if not stat.S_ISDIR(info.st_mode):
        return
    try:
        children = sorted(os.listdir(path))
    except OSError as exc:
        yield _io_error(path, exc)
        return
    inner = {**ancestors, key: path}
    for child in children:
        yield from _walk(os.path.join(path, child), child, inner)


def find_entries(paths, types=(), names=()):
    """Yield matching paths under each root; walk errors are reported on stderr."""
    wanted = set(types)
    patterns = [re.compile(name) for name in names]
    for root in paths:
        root = os.fspath(root)
        for item in _walk(root, _file_name(root), {}):
            if isinstance(item, _WalkError):
                sys.stderr.write(f"{root}: {item.message}")
                continue
            path, name, mode = item
            kind = _entry_type(mode)
            if kind is None or (wanted and kind not in wanted):
                continue
            if patterns and not any(pattern.search(name) for pattern in patterns):
                continue
            yield path.replace(os.sep, "/")


def _type_arg(text):
    try:
        return EntryType(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid value '{text}' for '--type <TYPE>'"
        ) from None


def _name_arg(text):
    try:
        return re.compile(text)
    except re.error as exc:
        raise argparse.ArgumentTypeError(
            f"invalid value '{text}' for '--name <NAME>': {exc}"
        ) from None


def main(argv=None):
    parser = argparse.ArgumentParser(prog="find", description="Find entries")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Search paths")
    parser.add_argument("-t", "--type", dest="types", action="append", type=_type_arg,
                        default=[], metavar="TYPE", help="Entry type: d, f or l")
    parser.add_argument("-n", "--name", dest="names", action="append", type=_name_arg,
                        default=[], metavar="NAME", help="Name pattern")
    args = parser.parse_intermixed_args(argv)

    for path in find_entries(args.paths or ["."], args.types, args.names):
        print(path)
    return 0