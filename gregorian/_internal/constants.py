"""Internal constants for gregorian.

These constants define the calendar tables and the syntactic bounds used by
the text parsers. This module is not part of the public API.
"""

from __future__ import annotations

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

MONTHS_PER_YEAR: int = 12

# Gregorian cycle lengths in days
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461
DAYS_PER_YEAR: int = 365

# Syntactic bounds applied by the text parsers before normalization.
# Day 31 is accepted for every month; normalization rolls it over.
MIN_MONTH: int = 1
MAX_MONTH: int = 12
MIN_DAY: int = 1
MAX_DAY: int = 31

# U.S. years below this are treated as two-digit shorthand and rejected
MIN_US_YEAR: int = 100


__all__ = [
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "MONTHS_PER_YEAR",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MIN_DAY",
    "MAX_DAY",
    "MIN_US_YEAR",
]
