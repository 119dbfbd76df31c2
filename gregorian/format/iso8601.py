"""ISO 8601 date formatting and parsing.

This module converts Dates to and from the ISO 8601 calendar-date form:

    - YYYY-MM-DD (extended format)
    - -YYYY-MM-DD (negative years, astronomical numbering)

Parsing is lenient about padding ("2019-2-6" is accepted) and strict about
structure: exactly three dash-separated integer fields, month 1-12 and day
1-31. A day that does not exist in its month (e.g. "2019-04-31") is rolled
over by Date normalization rather than rejected.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.format import parse_iso_date, format_iso_date

    >>> parse_iso_date("2019-2-6")
    Date(2019, 2, 6)

    >>> format_iso_date(Date(2019, 2, 6))
    '2019-02-06'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregorian.errors import ParseError
from gregorian.format._fields import check_day, check_month, parse_int

if TYPE_CHECKING:
    from gregorian.core.date import Date

STAGE = "ISO"


def parse_iso_date(s: str) -> Date:
    """Parse a date in ISO 8601 form (year-month-day).

    Surrounding whitespace is not stripped here; ``parse_date`` does that
    for free-text input.

    Args:
        s: The string to parse.

    Returns:
        The parsed, normalized Date.

    Raises:
        ParseError: If the string does not have three integer fields, or
            the month or day is out of range.

    Examples:
        >>> parse_iso_date("2019-02-06")
        Date(2019, 2, 6)

        >>> parse_iso_date("-0044-03-15")
        Date(-44, 3, 15)

        >>> parse_iso_date("2019-13-01")
        Traceback (most recent call last):
        ...
        gregorian.errors.ParseError: parse ISO date '2019-13-01': invalid month 13
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date

    sign = ""
    body = s
    if s[:1] in ("-", "+"):
        sign, body = s[0], s[1:]

    parts = body.split("-")
    if len(parts) != 3:
        raise ParseError(s, "unknown format", stage=STAGE)

    year = parse_int(s, sign + parts[0], stage=STAGE, field="year")
    month = parse_int(s, parts[1], stage=STAGE, field="month")
    check_month(s, month, stage=STAGE)
    day = parse_int(s, parts[2], stage=STAGE, field="day")
    check_day(s, day, stage=STAGE)

    return Date(year, month, day)


def format_iso_date(value: Date) -> str:
    """Format a Date as an ISO 8601 string.

    The year is zero-padded to at least four digits and never truncated;
    negative years keep their sign in front of the padding. Years longer
    than the interpreter's int-to-str digit limit are still rendered, but
    ``parse_iso_date`` rejects them, so they do not read back.

    Args:
        value: The Date to format.

    Returns:
        String like '2024-01-15'.

    Raises:
        TypeError: If value is not a Date.

    Examples:
        >>> from gregorian import Date
        >>> format_iso_date(Date(2024, 1, 15))
        '2024-01-15'
        >>> format_iso_date(Date(12345, 6, 7))
        '12345-06-07'
    """
    from gregorian.core.date import Date

    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")

    year, month, day = value.year, value.month, value.day
    sign = "-" if year < 0 else ""
    return f"{sign}{_decimal(abs(year)).zfill(4)}-{month:02d}-{day:02d}"


# Stays below the interpreter's int-to-str digit limit (4300 by default)
_CHUNK_DIGITS = 4000
_CHUNK = 10**_CHUNK_DIGITS


def _decimal(n: int) -> str:
    """Render a non-negative int in decimal, however many digits it has."""
    if n < _CHUNK:
        return str(n)
    high, low = divmod(n, _CHUNK)
    return _decimal(high) + str(low).zfill(_CHUNK_DIGITS)


__all__ = ["parse_iso_date", "format_iso_date"]
