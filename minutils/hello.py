"""Greeting and exit-status commands."""

import enum
import sys

GREETING = "Hello, world!"


class ExitStatus(enum.IntEnum):
    """Process exit codes used by these commands."""

    SUCCESS = 0
    FAILURE = 1


def _finish(status):
    """Flush pending output and return the status as a plain integer."""
    sys.stdout.flush()
    return int(status)


def main(argv=None):
    """Print the greeting."""
    sys.stdout.write(f"{GREETING}\n")
    return _finish(ExitStatus.SUCCESS)


def true_main(argv=None):
    """Succeed without doing anything."""
    return _finish(ExitStatus.SUCCESS)


def false_main(argv=None):
    """Fail without doing anything."""
    return _finish(ExitStatus.FAILURE)