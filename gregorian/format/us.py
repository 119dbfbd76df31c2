"""U.S. slash-format date parsing.

Accepted forms:

    - M/D       year taken from the current-year supplier
    - M/D/YYYY  explicit year

Two-digit years ("2/6/19") are rejected rather than guessed at: any
explicit year below 100 is an error.

Examples:
    >>> from gregorian.format import parse_us_date
    >>> parse_us_date("2/6/2019")
    Date(2019, 2, 6)
    >>> parse_us_date("2/6", current_year=2020)
    Date(2020, 2, 6)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregorian._internal.constants import MIN_US_YEAR
from gregorian.clock import YearLike, current_year as resolve_current_year
from gregorian.errors import ParseError
from gregorian.format._fields import check_day, check_month, parse_int

if TYPE_CHECKING:
    from gregorian.core.date import Date

STAGE = "US"


def parse_us_date(s: str, *, current_year: YearLike | None = None) -> Date:
    """Parse a date in U.S. form (month/day or month/day/year).

    Args:
        s: The string to parse.
        current_year: Year (or zero-argument callable) to use when the
            year is omitted. Defaults to the active year source.

    Returns:
        The parsed, normalized Date.

    Raises:
        ParseError: If the field count is not 2 or 3, a field is not an
            integer, the month or day is out of range, or the year is
            shorter than three digits.
    """
    from gregorian.core.date import Date

    parts = s.split("/")
    if len(parts) not in (2, 3):
        raise ParseError(s, "unknown format", stage=STAGE)

    month = parse_int(s, parts[0], stage=STAGE, field="month")
    check_month(s, month, stage=STAGE)
    day = parse_int(s, parts[1], stage=STAGE, field="day")
    check_day(s, day, stage=STAGE)

    if len(parts) == 2:
        return Date(resolve_current_year(current_year), month, day)

    year = parse_int(s, parts[2], stage=STAGE, field="year")
    if year < MIN_US_YEAR:
        raise ParseError(s, "short years not allowed", stage=STAGE, field="year")
    return Date(year, month, day)


__all__ = ["parse_us_date"]
