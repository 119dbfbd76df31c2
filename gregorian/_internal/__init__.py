"""Internal utilities for gregorian.

This module contains private implementation details:
    - Calendar arithmetic and normalization
    - Constants and calendar tables

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.calendar import (
    carry_month,
    days_in_month,
    is_leap_year,
    normalize,
    ordinal_to_ymd,
    ymd_to_ordinal,
)

__all__: list[str] = [
    "carry_month",
    "days_in_month",
    "is_leap_year",
    "normalize",
    "ordinal_to_ymd",
    "ymd_to_ordinal",
]
