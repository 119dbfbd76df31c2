"""Free-text date parsing.

``parse_date`` accepts either ISO 8601 ("2006-01-02") or U.S. ("1/2/2006",
"1/2") input and picks the parser by separator:

    - contains '/' -> U.S. format
    - contains '-' -> ISO format
    - otherwise    -> ParseError

For structured data (serialized values, JSON) use the ISO parser directly;
the U.S. form is meant for human input only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gregorian.clock import YearLike
from gregorian.errors import ParseError
from gregorian.format.iso8601 import parse_iso_date
from gregorian.format.us import parse_us_date

if TYPE_CHECKING:
    from gregorian.core.date import Date

logger = logging.getLogger(__name__)


def parse_date(text: str, *, current_year: YearLike | None = None) -> Date:
    """Parse a date in ISO 8601 or U.S. format.

    Args:
        text: The string to parse. Surrounding whitespace is ignored.
        current_year: Year (or zero-argument callable) used when a U.S.
            date omits the year.

    Returns:
        The parsed, normalized Date.

    Raises:
        ParseError: If the input is empty, in neither format, or invalid
            for the format it was dispatched to.
        TypeError: If text is not a string.

    Examples:
        >>> parse_date("2019-02-06")
        Date(2019, 2, 6)
        >>> parse_date(" 2/6/2019 ")
        Date(2019, 2, 6)
        >>> parse_date("2/6", current_year=2020)
        Date(2020, 2, 6)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    s = text.strip()
    if not s:
        raise ParseError(text, "empty date")

    try:
        if "/" in s:
            logger.debug("parsing %r as U.S. date", s)
            return parse_us_date(s, current_year=current_year)
        if "-" in s:
            logger.debug("parsing %r as ISO date", s)
            return parse_iso_date(s)
    except ParseError as exc:
        logger.debug("date rejected: %s", exc)
        raise

    raise ParseError(s, "unknown format")


__all__ = ["parse_date"]
