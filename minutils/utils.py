"""Helpers shared by the command-line tools."""

import io
import sys
from contextlib import contextmanager

STDIN_NAME = "-"


def lines_with_eol(stream):
    """Yield the lines of a stream, each with its line ending kept."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


@contextmanager
def open_input(path):
    """Open a path as UTF-8 text with line endings untouched; "-" means stdin."""
    if str(path) == STDIN_NAME:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding="utf-8", newline="")
        try:
            yield wrapper
        finally:
            wrapper.detach()
    else:
        with open(path, encoding="utf-8", newline="") as handle:
            yield handle


def _describe_error(path, exc):
    """Render an input error as "path: reason"."""
    if isinstance(exc, UnicodeDecodeError):
        return f"{path}: stream did not contain valid UTF-8"
    if isinstance(exc, OSError) and exc.strerror:
        return f"{path}: {exc.strerror} (os error {exc.errno})"
    return f"{path}: {exc}"