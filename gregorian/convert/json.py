"""JSON serialization and deserialization for Dates.

This module converts Dates to and from JSON-serializable dictionaries.

Functions:
    to_json: Convert a Date to a JSON-serializable dict.
    from_json: Create a Date from a JSON dict.

The JSON format is an ISO 8601 string with a type tag:

    {"_type": "Date", "value": "2024-01-15"}

Reading accepts ISO 8601 only, like ``deserialize_text``.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data
    {'_type': 'Date', 'value': '2024-01-15'}

    >>> from_json(data) == Date(2024, 1, 15)
    True
"""

from __future__ import annotations

from typing import Any

from gregorian.core.date import Date
from gregorian.errors import ParseError


def to_json(value: Date) -> dict[str, Any]:
    """Convert a Date to a JSON-serializable dictionary.

    Args:
        value: The Date to convert.

    Returns:
        A dictionary with `_type` and `value` keys.

    Raises:
        TypeError: If value is not a Date.
    """
    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.to_json()


def from_json(data: dict[str, Any]) -> Date:
    """Create a Date from a JSON dictionary.

    Unlike ``Date.from_json``, the `_type` tag is required here.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        The Date described by the dictionary.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
    """
    if not isinstance(data, dict):
        raise ParseError(repr(data), f"expected dict, got {type(data).__name__}")

    if "_type" not in data:
        raise ParseError(repr(data), "missing '_type' field")

    return Date.from_json(data)


__all__ = ["to_json", "from_json"]
