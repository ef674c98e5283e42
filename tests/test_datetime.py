"""Tests for DateTime class.

These tests verify calendar conversion to and from Instant, arithmetic,
boundaries and ordering.
"""

from __future__ import annotations

import pytest

from horologe import Date, DateTime, FixedClock, Instant, Interval, ParseError, Time


class TestDateTimeConstruction:
    """Tests for DateTime construction."""

    def test_fields(self) -> None:
        dt = DateTime(2025, 12, 28, 14, 30, 45, 123456)
        assert dt.year == 2025
        assert dt.month == 12
        assert dt.day == 28
        assert dt.hour == 14
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.microsecond == 123456
        assert dt.millisecond == 123

    def test_time_fields_default_to_zero(self) -> None:
        dt = DateTime(2025, 1, 1)
        assert (dt.hour, dt.minute, dt.second, dt.microsecond) == (0, 0, 0, 0)

    def test_constructor_never_validates(self) -> None:
        """Out-of-range fields are stored as given."""
        dt = DateTime(2025, 2, 30, 25, 61, 61, 2_000_000)
        assert dt.day == 30
        assert dt.hour == 25
        assert not dt.is_valid()

    def test_is_valid(self) -> None:
        assert DateTime(2024, 2, 29, 23, 59, 59, 999_999).is_valid()
        assert not DateTime(2025, 2, 29).is_valid()

    def test_now_with_fixed_clock(self, fixed_clock: FixedClock) -> None:
        assert DateTime.now(fixed_clock) == DateTime(2024, 12, 28, 14, 30)

    def test_combine_and_project(self) -> None:
        dt = DateTime.combine(Date(2025, 3, 15), Time(8, 5, 3, 7))
        assert dt == DateTime(2025, 3, 15, 8, 5, 3, 7)
        assert dt.date() == Date(2025, 3, 15)
        assert dt.time() == Time(8, 5, 3, 7)

    def test_replace(self) -> None:
        dt = DateTime(2025, 3, 15, 8, 5, 3, 7)
        assert dt.replace(hour=10) == DateTime(2025, 3, 15, 10, 5, 3, 7)
        assert dt.replace(microsecond=0) == DateTime(2025, 3, 15, 8, 5, 3, 0)
        assert dt == DateTime(2025, 3, 15, 8, 5, 3, 7)

    def test_from_iso_format(self) -> None:
        assert DateTime.from_iso_format("2025-12-28T14:30:45Z") == DateTime(2025, 12, 28, 14, 30, 45)

    def test_from_iso_format_raises(self) -> None:
        with pytest.raises(ParseError, match="month out of range"):
            DateTime.from_iso_format("2025-13-28T14:30:45Z")


class TestDateTimeInstantConversion:
    """Tests for to_instant and from_instant."""

    def test_known_instant_2024(self) -> None:
        dt = DateTime(2024, 12, 28, 14, 30, 0, 0)
        assert dt.to_instant().seconds == 1_735_396_200
        assert DateTime.from_instant(Instant(1_735_396_200)) == dt

    def test_known_instant_2025(self) -> None:
        dt = DateTime(2025, 12, 28, 14, 30, 0, 0)
        assert dt.to_instant().seconds == 1_766_932_200
        assert DateTime.from_instant(Instant(1_766_932_200)) == dt

    def test_epoch(self) -> None:
        assert DateTime(1970, 1, 1).to_instant() == Instant.epoch()

    def test_microseconds_become_nanoseconds(self) -> None:
        assert DateTime(1970, 1, 1, 0, 0, 0, 250).to_instant() == Instant(0, 250_000)

    def test_pre_epoch(self) -> None:
        assert DateTime(1969, 12, 31, 23, 59, 59).to_instant() == Instant(-1)
        assert DateTime.from_instant(Instant(-1, 500_000_000)) == DateTime(
            1969, 12, 31, 23, 59, 59, 500_000
        )
        assert DateTime(1900, 1, 1).to_instant().seconds == -2_208_988_800
        assert DateTime(1, 1, 1).to_instant().seconds == -62_135_596_800

    def test_sub_microsecond_truncates(self) -> None:
        assert DateTime.from_instant(Instant(0, 1_999)).microsecond == 1

    def test_round_trip_pre_and_post_epoch(self) -> None:
        """to_instant(from_instant(s, n)) == (s, n) at microsecond resolution."""
        seconds_samples = list(range(-70_000_000_000, 260_000_000_000, 7_777_777_777))
        seconds_samples += [-86_401, -86_400, -86_399, -1, 0, 1, 86_399, 86_400]
        nanos_samples = [0, 1_000, 500_000_000, 999_999_000]
        for seconds in seconds_samples:
            for nanos in nanos_samples:
                instant = Instant(seconds, nanos)
                back = DateTime.from_instant(instant).to_instant()
                assert (back.seconds, back.nanoseconds) == (seconds, nanos)

    def test_unix_helpers(self) -> None:
        assert DateTime.from_unix_seconds(0) == DateTime(1970, 1, 1)
        assert DateTime.from_unix_millis(-1) == DateTime(1969, 12, 31, 23, 59, 59, 999_000)
        assert DateTime(1970, 1, 1, 0, 0, 1, 500_000).to_unix_millis() == 1500
        assert DateTime(1969, 12, 31, 23, 59, 59, 500_000).to_unix_seconds() == -1

    def test_invalid_day_rolls_over(self) -> None:
        assert DateTime(2025, 2, 30).to_instant() == DateTime(2025, 3, 2).to_instant()


class TestDateTimeCalendarQueries:
    """Tests for weekday, day of year and leap year."""

    def test_day_of_week(self) -> None:
        assert DateTime(1970, 1, 1).day_of_week() == 3
        assert DateTime(2025, 12, 28, 23, 59).day_of_week() == 6
        assert DateTime(1969, 12, 31).day_of_week() == 2

    def test_day_of_year(self) -> None:
        assert DateTime(2025, 3, 15).day_of_year() == 74

    def test_day_of_year_out_of_range_month(self) -> None:
        assert DateTime(2025, 13, 1).day_of_year() == 366
        assert DateTime(2025, -1, 1).day_of_year() == -60

    def test_out_of_range_month_rolls_into_next_year(self) -> None:
        assert DateTime(2025, 15, 1).to_instant() == DateTime(2026, 3, 1).to_instant()
        assert DateTime.from_instant(DateTime(2025, 13, 1).to_instant()) == DateTime(2026, 1, 1)

    def test_is_leap_year(self) -> None:
        assert DateTime(2024, 6, 1).is_leap_year()
        assert not DateTime(2025, 6, 1).is_leap_year()


class TestDateTimeArithmetic:
    """Tests for add and subtract."""

    def test_add_interval(self) -> None:
        dt = DateTime(2025, 12, 28, 14, 30)
        assert dt + Interval.from_minutes(90) == DateTime(2025, 12, 28, 16, 0)
        assert dt.add(Interval.from_minutes(90)) == DateTime(2025, 12, 28, 16, 0)

    def test_add_crosses_year(self) -> None:
        dt = DateTime(2024, 12, 31, 23, 59, 59, 999_999)
        assert dt + Interval.from_microseconds(1) == DateTime(2025, 1, 1)

    def test_add_crosses_leap_day(self) -> None:
        assert DateTime(2024, 2, 28, 23).add_hours(2) == DateTime(2024, 2, 29, 1)
        assert DateTime(2025, 2, 28, 23).add_hours(2) == DateTime(2025, 3, 1, 1)

    def test_add_negative_crosses_epoch(self) -> None:
        assert DateTime(1970, 1, 1).add_days(-1) == DateTime(1969, 12, 31)
        assert DateTime(1970, 1, 1).add_seconds(-1) == DateTime(1969, 12, 31, 23, 59, 59)

    def test_add_unit_sugar(self) -> None:
        dt = DateTime(2025, 1, 31, 12)
        assert dt.add_seconds(30) == DateTime(2025, 1, 31, 12, 0, 30)
        assert dt.add_minutes(-30) == DateTime(2025, 1, 31, 11, 30)
        assert dt.add_hours(12) == DateTime(2025, 2, 1, 0)
        assert dt.add_days(29) == DateTime(2025, 3, 1, 12)

    def test_subtract_interval(self) -> None:
        dt = DateTime(2025, 1, 1)
        assert dt - Interval.from_milliseconds(500) == DateTime(2024, 12, 31, 23, 59, 59, 500_000)
        assert dt.subtract(Interval.from_days(366)) == DateTime(2024, 1, 1)

    def test_subtract_datetime(self) -> None:
        gap = DateTime(2025, 1, 1) - DateTime(2024, 12, 31, 12)
        assert gap == Interval.from_hours(12)

    def test_subtract_datetime_negative(self) -> None:
        gap = DateTime(2024, 1, 1).subtract(DateTime(2024, 1, 1, 0, 0, 0, 500_000))
        assert gap == Interval(-1, 500_000_000)
        assert gap.is_negative

    def test_interval_plus_datetime(self) -> None:
        assert Interval.from_days(1) + DateTime(2025, 1, 1) == DateTime(2025, 1, 2)

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            DateTime(2025, 1, 1) + 1  # type: ignore[operator]


class TestDateTimeBoundaries:
    """Tests for start/end of day, month and year."""

    def test_day_boundaries(self) -> None:
        dt = DateTime(2025, 6, 15, 13, 45, 10, 5)
        assert dt.start_of_day() == DateTime(2025, 6, 15)
        assert dt.end_of_day() == DateTime(2025, 6, 15, 23, 59, 59, 999_999)

    def test_month_boundaries(self) -> None:
        dt = DateTime(2025, 6, 15, 13, 45)
        assert dt.start_of_month() == DateTime(2025, 6, 1)
        assert dt.end_of_month() == DateTime(2025, 6, 30, 23, 59, 59, 999_999)

    @pytest.mark.parametrize(
        ("year", "last_day"),
        [(2024, 29), (2025, 28), (1900, 28), (2000, 29)],
    )
    def test_end_of_february(self, year: int, last_day: int) -> None:
        assert DateTime(year, 2, 10).end_of_month().day == last_day

    def test_start_of_year(self) -> None:
        assert DateTime(2025, 6, 15, 13, 45).start_of_year() == DateTime(2025, 1, 1)


class TestDateTimeComparison:
    """Tests for ordering, hashing and rendering."""

    def test_ordering_is_lexicographic(self) -> None:
        values = [
            DateTime(2024, 12, 31, 23, 59, 59, 999_999),
            DateTime(2025, 1, 1),
            DateTime(2025, 1, 1, 0, 0, 0, 1),
            DateTime(2025, 1, 1, 0, 0, 1),
            DateTime(2025, 1, 1, 0, 1),
            DateTime(2025, 1, 1, 1),
            DateTime(2025, 1, 2),
            DateTime(2025, 2, 1),
        ]
        assert sorted(reversed(values)) == values
        for earlier, later in zip(values, values[1:]):
            assert earlier < later
            assert later > earlier
            assert earlier <= later
            assert later >= earlier
            assert earlier != later

    def test_hash(self) -> None:
        assert hash(DateTime(2025, 1, 1)) == hash(DateTime(2025, 1, 1, 0, 0, 0, 0))
        assert len({DateTime(2025, 1, 1), DateTime(2025, 1, 1)}) == 1

    def test_str_canonical(self) -> None:
        assert str(DateTime(2025, 12, 28, 14, 30, 45)) == "2025-12-28T14:30:45.000000Z"
        assert str(DateTime(33, 1, 5, 1, 2, 3, 40)) == "0033-01-05T01:02:03.000040Z"

    def test_repr(self) -> None:
        assert repr(DateTime(2025, 12, 28, 14, 30, 45, 7)) == "DateTime(2025, 12, 28, 14, 30, 45, 7)"
