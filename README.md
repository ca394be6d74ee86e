# minutils

Small versions of classic Unix command-line utilities, written in plain
Python with no third-party dependencies. Each tool is installed as its own
command, and the pieces each command is built from can be imported as
library functions.

## Installation

From a checkout of the package:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command    | Does                                                                      |
|------------|---------------------------------------------------------------------------|
| `hello`    | Prints `Hello, world!`                                                    |
| `mu-true`  | Exits with status 0                                                       |
| `mu-false` | Exits with status 1                                                       |
| `echor`    | Prints its arguments joined by spaces (`-n`: no trailing newline)         |
| `catr`     | Concatenates files (`-n` number lines, `-b` number non-blank lines)       |
| `headr`    | First lines (`-n`, default 10) or bytes (`-c`) of each file               |
| `tailr`    | Last lines (`-n`, default 10) or bytes (`-c`); `+K` starts at the Kth; `-q` drops headers |
| `wcr`      | Line (`-l`), word (`-w`), byte (`-c`) or character (`-m`) counts          |
| `uniqr`    | Collapses adjacent repeated lines (`-c` to prefix counts)                 |
| `commr`    | Compares two sorted files column by column (`-1`, `-2`, `-3`, `-i`, `-d`) |
| `cutr`     | Selects bytes (`-b`), characters (`-c`) or fields (`-f`, `-d DELIM`)      |
| `grepr`    | Prints lines matching a regular expression (`-i`, `-v`, `-c`, `-r`)       |
| `findr`    | Walks directories, filtering by type (`-t f`, `-t d`, `-t l`) and name (`-n RE`) |
| `fortuner` | Prints a random fortune, or all fortunes matching `-m PATTERN`            |
| `calr`     | Prints a month (`-m MONTH`), a year (`YEAR`) or the current year (`-y`)   |

A file argument of `-` means standard input wherever the tool reads files.
Where no file is given, `catr`, `headr`, `wcr`, `uniqr`, `cutr` and `grepr`
read standard input, and `findr` searches the current directory.

## Examples

```
echor -n Hello there
catr -b notes.txt
headr -n 2 one.txt two.txt
tailr -n +3 log.txt
wcr -l -w notes.txt log.txt
uniqr -c input.txt output.txt
commr -i -d : file1.txt file2.txt
cutr -f 1,3-5 -d , movies.csv
grepr -ri then docs
findr . -t f -n '.*[.]csv'
fortuner -s 1 fortunes/
calr -m april 2020
```

### Notes on behaviour

- Patterns for `grepr`, `findr -n` and `fortuner -m` are Python regular
  expressions. `findr -t` and `findr -n` may each be given more than once;
  an entry is listed if it matches any of the given types and any of the
  given names.
- `cutr` position lists are comma-separated numbers or `N-M` ranges,
  counted from 1. Zero, a leading `+`, non-numbers and ranges whose first
  number is not lower than the second are rejected with
  `illegal list value: "..."` or a range error. With `-f`, input is read
  as delimited records with quoting, as the `csv` module does.
- `tailr -n 3` and `tailr -n -3` both mean the last three lines;
  `tailr -n +3` means from the third line onward.
- `uniqr` treats lines as equal when they differ only in their line
  ending, and writes to the optional second file instead of standard
  output.
- `fortuner` reads fortunes separated by lines holding only `%`; a
  directory is searched recursively. With `-s SEED` the random choice is
  repeatable. With `-m`, matching fortunes are printed and the name of each
  file they came from goes to standard error; `-i` makes the pattern
  case-insensitive.
- `calr` highlights today's date in reverse video. Months may be given as
  numbers, full English names or three-letter abbreviations, in any case;
  years must lie in 1 through 9999.

## Library use

Each module exposes the pieces its command is built from, for example:

```python
from minutils.cut import parse_pos, extract_fields
from minutils.tail import parse_position, tail_lines
from minutils.cal import format_calendar, month_name
from minutils.wc import Metric, count_metrics
from minutils.utils import lines_with_eol, open_input
```

`parse_pos("1,7,3-5")` returns the zero-based ranges
`[range(0, 1), range(6, 7), range(2, 5)]` and raises `PositionError`
for a list it cannot parse. `parse_position("+3")` returns `(3, True)`.
`lines_with_eol` iterates over a text stream keeping each line's ending,
and `open_input` is a context manager that opens a path as UTF-8 text, or
standard input for `-`.