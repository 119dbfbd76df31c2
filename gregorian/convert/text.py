"""Text marshalling for Dates.

These are the hooks for structured (de)serialization frameworks: a Date
becomes ISO 8601 bytes, and only ISO 8601 is read back. The U.S. form is
deliberately not accepted here.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import serialize_text, deserialize_text

    >>> serialize_text(Date(2019, 2, 6))
    b'2019-02-06'

    >>> deserialize_text(b"2019-02-06")
    Date(2019, 2, 6)
"""

from __future__ import annotations

from gregorian.core.date import Date, TextLike


def serialize_text(value: Date) -> bytes:
    """Return ``value`` as ISO 8601 ASCII bytes.

    Raises:
        TypeError: If value is not a Date.
    """
    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.serialize_text()


def deserialize_text(data: TextLike) -> Date:
    """Parse ISO 8601 bytes or str into a Date.

    Raises:
        ParseError: If data is not an ISO 8601 date.
    """
    return Date.deserialize_text(data)


__all__ = ["serialize_text", "deserialize_text"]
