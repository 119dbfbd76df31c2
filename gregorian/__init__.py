"""gregorian: Gregorian calendar dates with normalization and text parsing.

gregorian provides a small immutable Date type. Any integer (year, month,
day) triple is normalized into a real calendar date, and dates can be
parsed from ISO 8601 or U.S. slash-format text.

Core Types:
    Date: Calendar date (year, month, day)

Parsing and Formatting:
    parse_date: Parse ISO 8601 ("2006-01-02") or U.S. ("1/2/2006", "1/2")
    format_iso_date: Format a Date as ISO 8601

Current Year:
    current_year: The year used when a U.S. date omits it
    override_current_year: Pin the current year for a ``with`` block

Calendar Helpers:
    is_leap_year: Proleptic Gregorian leap year rule
    days_in_month: Month length for a given year

Exceptions:
    GregorianError: Base exception
    ParseError: Failed to parse a string

Example:
    >>> from gregorian import Date, parse_date
    >>> parse_date("2/6/2019")
    Date(2019, 2, 6)
    >>> Date(2019, 12, 31).add(days=1)
    Date(2020, 1, 1)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from gregorian.core.date import Date

# Calendar helpers
from gregorian._internal.calendar import days_in_month, is_leap_year

# Current year
from gregorian.clock import current_year, override_current_year, system_year

# Exceptions
from gregorian.errors import GregorianError, ParseError

# Format functions
from gregorian.format import (
    format_iso_date,
    parse_date,
    parse_iso_date,
    parse_us_date,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    # Calendar helpers
    "is_leap_year",
    "days_in_month",
    # Current year
    "current_year",
    "override_current_year",
    "system_year",
    # Exceptions
    "GregorianError",
    "ParseError",
    # Format functions
    "parse_date",
    "parse_iso_date",
    "parse_us_date",
    "format_iso_date",
]
