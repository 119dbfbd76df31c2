"""Date formatting and parsing.

This module provides functions for converting Dates to and from text:
    - ISO 8601 formatting and parsing
    - U.S. slash-format parsing
    - A dispatcher that accepts either

Functions:
    parse_date: Parse ISO 8601 or U.S. text.
    parse_iso_date: Parse ISO 8601 text only.
    parse_us_date: Parse U.S. text only.
    format_iso_date: Format a Date as ISO 8601.

Examples:
    >>> from gregorian.format import parse_date, format_iso_date
    >>> format_iso_date(parse_date("2/6/2019"))
    '2019-02-06'
"""

from __future__ import annotations

from gregorian.format.iso8601 import format_iso_date, parse_iso_date
from gregorian.format.parse import parse_date
from gregorian.format.us import parse_us_date

__all__: list[str] = [
    "parse_date",
    # ISO 8601
    "parse_iso_date",
    "format_iso_date",
    # U.S.
    "parse_us_date",
]
