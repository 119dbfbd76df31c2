"""Tests for internal calendar arithmetic."""

from __future__ import annotations

import datetime

import pytest

from gregorian._internal.calendar import (
    carry_month,
    days_in_month,
    is_leap_year,
    normalize,
    ordinal_to_ymd,
    ymd_to_ordinal,
)


class TestLeapYear:
    """Tests for is_leap_year."""

    @pytest.mark.parametrize("year", [2000, 2024, 1600, 4, 0, -4, -400])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4 (and by 400 at centuries) are leap."""
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2023, 2100, 1, -1, -100])
    def test_common_years(self, year: int) -> None:
        """Centuries not divisible by 400 and other years are common."""
        assert not is_leap_year(year)


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_february(self) -> None:
        """February depends on the leap year rule."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_thirty_day_months(self) -> None:
        """April, June, September and November have 30 days."""
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_invalid_month(self) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2023, 13)


class TestCarryMonth:
    """Tests for carry_month."""

    def test_in_range_unchanged(self) -> None:
        assert carry_month(2019, 6) == (2019, 6)

    def test_thirteen_is_next_january(self) -> None:
        assert carry_month(2019, 13) == (2020, 1)

    def test_zero_is_previous_december(self) -> None:
        assert carry_month(2019, 0) == (2018, 12)

    def test_large_negative(self) -> None:
        assert carry_month(2019, -11) == (2018, 1)
        assert carry_month(2019, -12) == (2017, 12)


class TestOrdinal:
    """Tests for ymd_to_ordinal and ordinal_to_ymd."""

    def test_epoch(self) -> None:
        """0001-01-01 is ordinal 1."""
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_matches_stdlib(self) -> None:
        """Ordinals agree with datetime.date.toordinal in its range."""
        for d in (
            datetime.date(1, 1, 1),
            datetime.date(1582, 10, 15),
            datetime.date(1900, 2, 28),
            datetime.date(2000, 2, 29),
            datetime.date(2000, 12, 31),
            datetime.date(2024, 1, 15),
            datetime.date(9999, 12, 31),
        ):
            assert ymd_to_ordinal(d.year, d.month, d.day) == d.toordinal()
            assert ordinal_to_ymd(d.toordinal()) == (d.year, d.month, d.day)

    def test_year_zero_and_before(self) -> None:
        """Ordinals <= 0 land in year 0 (a leap year) and earlier."""
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ordinal_to_ymd(-365) == (0, 1, 1)
        assert ordinal_to_ymd(-366) == (-1, 12, 31)
        assert ymd_to_ordinal(0, 2, 29) == ymd_to_ordinal(0, 3, 1) - 1

    def test_cycle_boundaries(self) -> None:
        """Last day of 400- and 4-year cycles round-trips."""
        for ymd in ((2000, 12, 31), (2004, 12, 31), (1600, 12, 31), (-400, 12, 31)):
            assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd

    def test_round_trip_range(self) -> None:
        """Every ordinal across several cycles maps back to itself."""
        start = ymd_to_ordinal(-801, 1, 1)
        for ordinal in range(start, start + 4 * 146_097, 97):
            assert ymd_to_ordinal(*ordinal_to_ymd(ordinal)) == ordinal


class TestNormalize:
    """Tests for normalize."""

    def test_valid_date_unchanged(self) -> None:
        assert normalize(2024, 1, 15) == (2024, 1, 15)
        assert normalize(2024, 2, 29) == (2024, 2, 29)

    def test_month_overflow(self) -> None:
        assert normalize(2019, 13, 1) == (2020, 1, 1)
        assert normalize(2019, 25, 1) == (2021, 1, 1)

    def test_month_underflow(self) -> None:
        assert normalize(2019, 0, 1) == (2018, 12, 1)
        assert normalize(2019, -1, 15) == (2018, 11, 15)

    def test_day_zero_is_last_of_previous_month(self) -> None:
        assert normalize(2024, 3, 0) == (2024, 2, 29)
        assert normalize(2023, 3, 0) == (2023, 2, 28)
        assert normalize(2024, 1, 0) == (2023, 12, 31)

    def test_day_overflow(self) -> None:
        assert normalize(2019, 1, 32) == (2019, 2, 1)
        assert normalize(2019, 4, 31) == (2019, 5, 1)
        assert normalize(2019, 2, 29) == (2019, 3, 1)
        assert normalize(2019, 12, 32) == (2020, 1, 1)

    def test_large_day_offsets(self) -> None:
        assert normalize(2019, 1, 366) == (2020, 1, 1)
        assert normalize(2020, 1, 367) == (2021, 1, 1)
        assert normalize(2020, 1, -365) == (2018, 12, 31)

    def test_closure(self) -> None:
        """Any integer inputs give an in-range month and day."""
        for year in (-401, -1, 0, 1, 1900, 2000, 2019, 2024):
            for month in range(-30, 31, 7):
                for day in range(-400, 401, 37):
                    y, m, d = normalize(year, month, day)
                    assert 1 <= m <= 12
                    assert 1 <= d <= days_in_month(y, m)

    def test_idempotent(self) -> None:
        for triple in ((2019, 13, 40), (0, -5, -5), (2024, 2, 30)):
            once = normalize(*triple)
            assert normalize(*once) == once
