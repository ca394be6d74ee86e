"""Count lines, words, characters and bytes."""

import argparse
import sys
from enum import Enum

from .utils import _describe_error, lines_with_eol, open_input


class Metric(Enum):
    """A quantity counted per line; members are in output order."""

    LINES = "lines"
    WORDS = "words"
    CHARS = "chars"
    BYTES = "bytes"

    def measure(self, line):
        if self is Metric.LINES:
            return 1
        if self is Metric.WORDS:
            return len(line.split())
        if self is Metric.CHARS:
            return len(line)
        return len(line.encode("utf-8"))


def count_metrics(stream, metrics):
    """Total each metric over the lines of a text stream."""
    counts = dict.fromkeys(metrics, 0)
    for line in lines_with_eol(stream):
        for metric in counts:
            counts[metric] += metric.measure(line)
    return counts


def format_counts(counts, name=None):
    """Render counts right-aligned in 8 columns, followed by a name if given."""
    text = "".join(f"{count:>8}" for count in counts)
    return f"{text} {name}" if name is not None else text


def main(argv=None):
    parser = argparse.ArgumentParser(prog="wc", description="Count file contents")
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to process")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-c", "--bytes", action="store_true", help="Print the byte counts")
    group.add_argument("-m", "--chars", action="store_true", help="Print the character counts")
    parser.add_argument("-w", "--words", action="store_true", help="Print the word counts")
    parser.add_argument("-l", "--lines", action="store_true", help="Print the line counts")
    args = parser.parse_args(argv)

    selected = {
        Metric.LINES: args.lines,
        Metric.WORDS: args.words,
        Metric.CHARS: args.chars,
        Metric.BYTES: args.bytes,
    }
    metrics = [metric for metric, wanted in selected.items() if wanted]
    if not metrics:
        metrics = [Metric.LINES, Metric.WORDS, Metric.BYTES]

    files = args.files or ["-"]
    totals = [0] * len(metrics)
    for path in files:
        try:
            with open_input(path) as stream:
                counts = count_metrics(stream, metrics)
        except (OSError, UnicodeDecodeError) as exc:
            print(_describe_error(path, exc), file=sys.stderr)
            continue
        values = [counts[metric] for metric in metrics]
        totals = [total + value for total, value in zip(totals, values)]
        print(format_counts(values, None if path == "-" else path))
    if len(files) > 1:
        print(format_counts(totals, "total"))
    return 0