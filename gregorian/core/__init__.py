"""Core value types for gregorian.

Types:
    Date: Calendar date (year, month, day), normalized on construction
"""

from __future__ import annotations

from gregorian.core.date import Date

__all__: list[str] = ["Date"]
