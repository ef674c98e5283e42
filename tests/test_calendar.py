"""Tests for the internal calendar algorithm."""

from __future__ import annotations

import pytest

from horologe._internal.calendar import (
    civil_from_days,
    day_of_year,
    days_from_civil,
    days_in_month,
    days_in_year,
    is_leap_year,
    is_valid_date,
    weekday_from_days,
)


class TestLeapYears:
    """Tests for is_leap_year and month lengths."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2024, True),
            (2025, False),
            (2000, True),
            (1900, False),
            (2100, False),
            (2400, True),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        assert days_in_month(2025, 1) == 31
        assert days_in_month(2025, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29
        assert days_in_month(2025, 4) == 30
        assert days_in_month(2025, 12) == 31

    def test_days_in_month_rejects_bad_month(self) -> None:
        with pytest.raises(ValueError):
            days_in_month(2025, 13)

    def test_days_in_year(self) -> None:
        assert days_in_year(2024) == 366
        assert days_in_year(2025) == 365


class TestDayOfYear:
    """Tests for day_of_year."""

    def test_known_values(self) -> None:
        assert day_of_year(2025, 3, 15) == 74
        assert day_of_year(2024, 3, 15) == 75
        assert day_of_year(2025, 1, 1) == 1
        assert day_of_year(2025, 12, 31) == 365
        assert day_of_year(2024, 12, 31) == 366
        assert day_of_year(2024, 2, 29) == 60

    @pytest.mark.parametrize(
        ("ymd", "expected"),
        [
            ((2025, 13, 1), 366),
            ((2024, 13, 1), 367),
            ((2025, 0, 31), 0),
            ((2025, -1, 1), -60),
            ((2025, 2, 30), 61),
        ],
    )
    def test_out_of_range_fields_roll_over(
        self, ymd: tuple[int, int, int], expected: int
    ) -> None:
        assert day_of_year(*ymd) == expected


class TestDayCount:
    """Tests for days_from_civil and civil_from_days."""

    @pytest.mark.parametrize(
        ("ymd", "days"),
        [
            ((1970, 1, 1), 0),
            ((1969, 12, 31), -1),
            ((2000, 1, 1), 10_957),
            ((2000, 3, 1), 11_017),
            ((2024, 12, 28), 20_085),
            ((2025, 12, 28), 20_450),
            ((1900, 1, 1), -25_567),
            ((1, 1, 1), -719_162),
            ((0, 1, 1), -719_528),
            ((-1, 12, 31), -719_529),
        ],
    )
    def test_known_day_counts(self, ymd: tuple[int, int, int], days: int) -> None:
        assert days_from_civil(*ymd) == days
        assert civil_from_days(days) == ymd

    def test_round_trip_over_wide_range(self) -> None:
        """civil_from_days inverts days_from_civil across eras."""
        for days in range(-1_500_000, 1_500_000, 977):
            assert days_from_civil(*civil_from_days(days)) == days

    def test_consecutive_days_are_consecutive_dates(self) -> None:
        previous = civil_from_days(-800)
        for days in range(-799, 800):
            current = civil_from_days(days)
            year, month, day = previous
            if day < days_in_month(year, month):
                expected = (year, month, day + 1)
            elif month < 12:
                expected = (year, month + 1, 1)
            else:
                expected = (year + 1, 1, 1)
            assert current == expected
            previous = current

    def test_out_of_range_day_rolls_forward(self) -> None:
        assert days_from_civil(2025, 2, 30) == days_from_civil(2025, 3, 2)
        assert days_from_civil(2024, 2, 30) == days_from_civil(2024, 3, 1)

    @pytest.mark.parametrize(
        ("month", "folded"),
        [
            (0, (2024, 12)),
            (-1, (2024, 11)),
            (-12, (2023, 12)),
            (13, (2026, 1)),
            (14, (2026, 2)),
            (15, (2026, 3)),
            (25, (2027, 1)),
        ],
    )
    def test_out_of_range_month_folds_into_year(
        self, month: int, folded: tuple[int, int]
    ) -> None:
        assert days_from_civil(2025, month, 1) == days_from_civil(*folded, 1)

    def test_month_fifteen_is_march_of_next_year(self) -> None:
        assert days_from_civil(2025, 15, 1) == 20_513
        assert civil_from_days(20_513) == (2026, 3, 1)

    def test_valid_dates(self) -> None:
        assert is_valid_date(2024, 2, 29)
        assert not is_valid_date(2025, 2, 29)
        assert not is_valid_date(2025, 13, 1)
        assert not is_valid_date(2025, 4, 31)
        assert not is_valid_date(2025, 4, 0)


class TestWeekday:
    """Tests for weekday_from_days (Monday=0)."""

    @pytest.mark.parametrize(
        ("ymd", "weekday"),
        [
            ((1970, 1, 1), 3),  # Thursday
            ((1969, 12, 29), 0),  # Monday
            ((2000, 1, 1), 5),  # Saturday
            ((2024, 1, 15), 0),  # Monday
            ((2025, 12, 28), 6),  # Sunday
            ((1900, 1, 1), 0),  # Monday
        ],
    )
    def test_known_weekdays(self, ymd: tuple[int, int, int], weekday: int) -> None:
        assert weekday_from_days(days_from_civil(*ymd)) == weekday
