"""Print a month or a whole year as a calendar."""

import argparse
import calendar
import re
import sys
from datetime import date

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = "Su Mo Tu We Th Fr Sa  "
_I32 = (-(2**31), 2**31 - 1)
_U32_MAX = 2**32 - 1


def _parse_int(text, low, high):
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def parse_year(text):
    """Parse a year in 1..=9999, raising ValueError otherwise."""
    year = _parse_int(text, *_I32)
    if not 1 <= year <= 9999:
        raise ValueError(f"{year} is not in 1..=9999")
    return year


def parse_month(text):
    """Parse a month name, three-letter abbreviation or number, raising ValueError."""
    if text.isascii():
        lowered = text.lower()
        for number, name in enumerate(_MONTHS, start=1):
            if lowered in (name.lower(), name[:3].lower()):
                return number
    if not re.fullmatch(r"\+?[0-9]+", text) or int(text) > _U32_MAX:
        raise ValueError(f'Invalid month "{text}"')
    month = int(text)
    if not 1 <= month <= 12:
        raise ValueError(f'month "{month}" not in the range 1 through 12')
    return month


def month_name(month):
    """Return the English name of a month number, or None if out of range."""
    return _MONTHS[month - 1] if 1 <= month <= 12 else None


def _month_cells(year, month, today):
    """Return the 42 two-column day cells of a month, Sunday first."""
    lead = date(year, month, 1).isoweekday() % 7
    cells = ["  "] * lead
    for day in range(1, calendar.monthrange(year, month)[1] + 1):
        if date(year, month, day) == today:
            cells.append(f"\x1b[7m{day}\x1b[0m")
        else:
            cells.append(f"{day:>2}")
    return cells + ["  "] * (42 - len(cells))


def format_calendar(year, month=None, today=None):
    """Render one month, or the whole year when month is None; highlight today."""
    if month is not None:
        lines = [f"{f'{month_name(month)} {year}':^20}  "]
        months = [month]
    else:
        lines = [f"{year:>32}"]
        months = list(range(1, 13))
    last = months[-1]
    for start in range(0, len(months), 3):
        chunk = months[start:start + 3]
        if len(chunk) > 1:
            lines.append("".join(f"{month_name(m):^20}  " for m in chunk))
        lines.append(_WEEKDAYS * len(chunk))
        cells = [_month_cells(year, m, today) for m in chunk]
        for week in range(6):
            lines.append("".join(
                "".join(f"{cell} " for cell in month_cells[week * 7:week * 7 + 7]) + " "
                for month_cells in cells
            ))
        if chunk[-1] != last:
            lines.append("")
    return "".join(f"{line}\n" for line in lines)


def _year_arg(text):
    try:
        return parse_year(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid value '{text}' for '[YEAR]': {exc}"
        ) from None


def _month_arg(text):
    try:
        return parse_month(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid value '{text}' for '--month <MONTH>': {exc}"
        ) from None


def main(argv=None):
    parser = argparse.ArgumentParser(prog="cal", description="Display a calendar")
    parser.add_argument("-y", "--year", dest="show_year", action="store_true",
                        help="Show whole current year")
    parser.add_argument("-m", "--month", type=_month_arg, metavar="MONTH",
                        help="Show given month of the current year")
    parser.add_argument("year", nargs="?", type=_year_arg, metavar="YEAR")
    args = parser.parse_args(argv)

    if args.show_year and args.month is not None:
        parser.error("the argument '--month <MONTH>' cannot be used with '--year'")
    if args.show_year and args.year is not None:
        parser.error("the argument '--year' cannot be used with '[YEAR]'")

    today = date.today()
    year = today.year if args.year is None else args.year
    month = args.month
    if month is None and args.year is None and not args.show_year:
        month = today.month
    sys.stdout.write(format_calendar(year, month, today))
    return 0