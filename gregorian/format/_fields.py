"""Field-level helpers shared by the ISO and U.S. parsers.

Both parsers only check that components are plausible (an integer, month
1-12, day 1-31). Calendar correctness is left to normalization, so the
parsers and the constructor agree on what a date is.

This module is not part of the public API.
"""

from __future__ import annotations

import re

from gregorian._internal.constants import MAX_DAY, MAX_MONTH, MIN_DAY, MIN_MONTH
from gregorian.errors import ParseError

# Optional sign, ASCII digits only. int() alone would also accept
# surrounding whitespace, underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str, part: str, *, stage: str, field: str) -> int:
    """Parse one component of ``text`` as a decimal integer.

    Raises:
        ParseError: Naming the field, if ``part`` is not an integer or has
            more digits than the interpreter will convert.
    """
    if not _INTEGER_RE.fullmatch(part):
        raise ParseError(
            text, f"{field}: invalid integer {part!r}", stage=stage, field=field
        )
    try:
        return int(part)
    except ValueError as exc:
        # Digit count beyond sys.get_int_max_str_digits()
        raise ParseError(text, f"{field}: {exc}", stage=stage, field=field) from exc


def check_month(text: str, month: int, *, stage: str) -> None:
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ParseError(text, f"invalid month {month}", stage=stage, field="month")


def check_day(text: str, day: int, *, stage: str) -> None:
    # 31 is allowed for every month; Date() rolls e.g. April 31 to May 1.
    if not MIN_DAY <= day <= MAX_DAY:
        raise ParseError(text, f"invalid day {day}", stage=stage, field="day")


__all__ = ["parse_int", "check_month", "check_day"]
