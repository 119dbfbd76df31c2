"""Calendar utilities for gregorian.

This module provides internal functions for calendar calculations:
leap year logic, month lengths, ordinal conversions and normalization of
out-of-range (year, month, day) triples.

Ordinal 1 = 0001-01-01 (January 1, year 1), proleptic Gregorian.

This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _days_before_year(year: int) -> int:
    # Python's // floors toward negative infinity, so this holds for
    # year 0 and negative years as well.
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def carry_month(year: int, month: int) -> tuple[int, int]:
    """Fold an arbitrary month number into the range 1-12.

    Month 13 is January of the next year, month 0 is December of the
    previous year, month -11 is January of the previous year.

    Examples:
        >>> carry_month(2019, 13)
        (2020, 1)
        >>> carry_month(2019, 0)
        (2018, 12)
    """
    carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    return year + carry, month_index + 1


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The month may lie outside 1-12 and the day outside the month; both are
    carried. The day is an offset from the first of the (carried) month, so
    day 0 lands on the last day of the previous month.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: Any integer month.
        day: Any integer day.

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    year, month = carry_month(year, month)
    return _days_before_year(year) + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Works for every integer ordinal: the 400-year cycle is exact, and
    divmod floors, so ordinals <= 0 land in year 0 and earlier.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, DAYS_PER_400_YEARS)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, DAYS_PER_100_YEARS)

    n4, n = divmod(n, DAYS_PER_4_YEARS)

    n1, n = divmod(n, DAYS_PER_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle overflows into a fifth "year"
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, MONTHS_PER_YEAR + 1):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def normalize(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Return the valid calendar date equivalent to (year, month, day).

    Overflow carries across months and years, accounting for month lengths
    and leap years. Every integer triple has exactly one answer.

    Examples:
        >>> normalize(2019, 13, 1)
        (2020, 1, 1)
        >>> normalize(2019, 2, 29)  # 2019 is not a leap year
        (2019, 3, 1)
        >>> normalize(2024, 3, 0)
        (2024, 2, 29)
    """
    if 1 <= month <= MONTHS_PER_YEAR and 1 <= day <= 28:
        return (year, month, day)
    return ordinal_to_ymd(ymd_to_ordinal(year, month, day))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "carry_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "normalize",
]
