"""Gregorian exception hierarchy.

All gregorian-specific exceptions inherit from GregorianError.
"""

from __future__ import annotations


class GregorianError(Exception):
    """Base exception for all gregorian errors."""

    pass


class ParseError(GregorianError, ValueError):
    """Failed to parse a textual date.

    Raised when a string cannot be turned into a Date. Construction from
    integers never raises this; only text parsing does.

    Attributes:
        text: The input after surrounding whitespace is trimmed. Only
            the "empty date" error keeps the caller's untrimmed string.
        stage: Which parser rejected the input ("US" or "ISO"), or None
            when the input was rejected before a format was chosen.
        field: The offending component ("year", "month" or "day"), or None
            when the failure is not tied to a single field.
        cause: Human-readable reason.

    Examples:
        - Empty input
        - Unrecognized format
        - Malformed integer in a field
        - Month outside 1-12, day outside 1-31
        - Two-digit U.S. year
    """

    def __init__(
        self,
        text: str,
        cause: str,
        *,
        stage: str | None = None,
        field: str | None = None,
    ) -> None:
        self.text = text
        self.cause = cause
        self.stage = stage
        self.field = field
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.text.strip():
            return self.cause
        prefix = f"parse {self.stage} date" if self.stage else "parse date"
        return f"{prefix} {self.text!r}: {self.cause}"

    def __reduce__(self):
        return (
            _rebuild_parse_error,
            (self.text, self.cause, self.stage, self.field),
        )


def _rebuild_parse_error(
    text: str, cause: str, stage: str | None, field: str | None
) -> ParseError:
    return ParseError(text, cause, stage=stage, field=field)


__all__ = [
    "GregorianError",
    "ParseError",
]
