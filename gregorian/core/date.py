"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar. Construction never fails for integer
components: out-of-range months and days are normalized into a real date.
"""

from __future__ import annotations

from typing import Any, Union

from gregorian._internal.calendar import normalize, ordinal_to_ymd, ymd_to_ordinal
from gregorian.clock import YearLike
from gregorian.errors import ParseError

TextLike = Union[bytes, bytearray, memoryview, str]


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. Any integer triple is accepted and normalized: month 13
    is January of the next year, day 0 is the last day of the previous
    month, and Feb 29 of a common year is March 1.

    Internally the components are stored zero-based (year - 1, month - 1,
    day - 1), so ``Date()`` is January 1 of year 1, which is also what
    ``is_zero()`` tests for.

    Instances are immutable and hashable.

    Attributes:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2019, 13, 1)  # Month overflow carries into the year
        Date(2020, 1, 1)

        >>> Date(2019, 2, 29)  # Not a leap year
        Date(2019, 3, 1)

        >>> Date()
        Date(1, 1, 1)
    """

    __slots__ = ("_year", "_month", "_day")

    _year: int
    _month: int
    _day: int

    def __init__(self, year: int = 1, month: int = 1, day: int = 1) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year. Year 0 = 1 BCE in astronomical numbering.
            month: The month. Values outside 1-12 carry into the year.
            day: The day. Values outside the month carry into the month.

        Raises:
            TypeError: If any component is not an int.
        """
        y, m, d = normalize(
            _require_int("year", year),
            _require_int("month", month),
            _require_int("day", day),
        )
        object.__setattr__(self, "_year", y - 1)
        object.__setattr__(self, "_month", m - 1)
        object.__setattr__(self, "_day", d - 1)

    @classmethod
    def parse(cls, text: str, *, current_year: YearLike | None = None) -> Date:
        """Parse a date in ISO 8601 (2006-01-02) or U.S. (1/2/2006) format.

        Args:
            text: The string to parse.
            current_year: Year (or zero-argument callable) used when a
                U.S. date omits the year.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the text is not a valid date in either format.

        Examples:
            >>> Date.parse("2019-02-06")
            Date(2019, 2, 6)
            >>> Date.parse("2/6", current_year=2020)
            Date(2020, 2, 6)
        """
        from gregorian.format.parse import parse_date

        return parse_date(text, current_year=current_year)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number.

        The ordinal is the number of days since year 1, where
        ordinal 1 = 0001-01-01 (January 1, year 1).

        Examples:
            >>> Date.from_ordinal(1)
            Date(1, 1, 1)
            >>> Date.from_ordinal(738900)
            Date(2024, 1, 15)
        """
        year, month, day = ordinal_to_ymd(_require_int("ordinal", ordinal))
        return cls(year, month, day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year + 1

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month + 1

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day + 1

    def equal(self, other: Date) -> bool:
        """Report whether this date and other denote the same day."""
        return self._key() == other._key()

    def before(self, other: Date) -> bool:
        """Report whether this date is strictly earlier than other.

        Examples:
            >>> Date(2024, 1, 15).before(Date(2024, 1, 16))
            True
            >>> Date(2024, 1, 15).before(Date(2024, 1, 15))
            False
        """
        return self._key() < other._key()

    def add(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        """Return the date offset by the given years, months and days.

        The offsets are added to the public components and the result is
        normalized as a whole, so adding one month to January 31 gives
        March 2 (or March 3 in a common year), not the end of February.

        Args:
            years: Years to add (can be negative).
            months: Months to add (can be negative).
            days: Days to add (can be negative).

        Returns:
            A new Date.

        Examples:
            >>> Date(2024, 1, 15).add(days=20)
            Date(2024, 2, 4)
            >>> Date(2023, 1, 31).add(months=1)
            Date(2023, 3, 3)
            >>> Date(2024, 3, 1).add(days=-1)
            Date(2024, 2, 29)
        """
        return Date(
            self.year + _require_int("years", years),
            self.month + _require_int("months", months),
            self.day + _require_int("days", days),
        )

    def is_zero(self) -> bool:
        """Report whether this is the zero value, January 1 of year 1."""
        return self._year == 0 and self._month == 0 and self._day == 0

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date.

        Examples:
            >>> Date(1, 1, 1).to_ordinal()
            1
            >>> Date(2024, 1, 15).to_ordinal()
            738900
        """
        return ymd_to_ordinal(self.year, self.month, self.day)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        from gregorian.format.iso8601 import format_iso_date

        return format_iso_date(self)

    def serialize_text(self) -> bytes:
        """Return the ISO 8601 form as ASCII bytes.

        Examples:
            >>> Date(2006, 1, 2).serialize_text()
            b'2006-01-02'
        """
        return self.to_iso_format().encode("ascii")

    @classmethod
    def deserialize_text(cls, data: TextLike) -> Date:
        """Parse a Date from serialized text.

        Only ISO 8601 is accepted here. The U.S. form depends on the current
        year and is meant for human input, not stored values.

        Args:
            data: Bytes (UTF-8) or str in YYYY-MM-DD form.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If data is not valid UTF-8 or not an ISO date.
            TypeError: If data is not bytes-like or str.

        Examples:
            >>> Date.deserialize_text(b"2006-01-02")
            Date(2006, 1, 2)
        """
        from gregorian.format.iso8601 import parse_iso_date

        if isinstance(data, str):
            text = data
        elif isinstance(data, (bytes, bytearray, memoryview)):
            raw = bytes(data)
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseError(
                    raw.decode("utf-8", errors="replace"), "invalid UTF-8", stage="ISO"
                ) from exc
        else:
            raise TypeError(f"expected bytes or str, got {type(data).__name__}")

        if not text:
            raise ParseError(text, "empty date", stage="ISO")
        return parse_iso_date(text)

    def to_json(self) -> dict[str, Any]:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            {'_type': 'Date', 'value': '2024-01-15'}
        """
        return {"_type": "Date", "value": self.to_iso_format()}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Date:
        """Create a Date from a JSON dictionary.

        Raises:
            ParseError: If the data is not a dict, the type tag is wrong,
                or the value is not an ISO date.

        Examples:
            >>> Date.from_json({'_type': 'Date', 'value': '2024-01-15'})
            Date(2024, 1, 15)
        """
        if not isinstance(data, dict):
            raise ParseError(repr(data), f"expected dict, got {type(data).__name__}")

        type_tag = data.get("_type", "Date")
        if type_tag != "Date":
            raise ParseError(repr(data), f"expected _type 'Date', got {type_tag!r}")

        value = data.get("value")
        if not isinstance(value, str) or not value:
            raise ParseError(repr(data), "missing 'value' field for Date")

        return cls.deserialize_text(value)

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.equal(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return not other.before(self)

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return other.before(self)

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return not self.before(other)

    def __hash__(self) -> int:
        return hash(self._key())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Date is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Date is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Date], tuple[int, int, int]]:
        return (Date, (self.year, self.month, self.day))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        from gregorian.format.iso8601 import _decimal

        sign = "-" if self.year < 0 else ""
        return f"Date({sign}{_decimal(abs(self.year))}, {self.month}, {self.day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy, including the zero value."""
        return True


__all__ = ["Date"]
