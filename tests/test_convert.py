"""Tests for JSON and Unix epoch conversion."""

from __future__ import annotations

import json

import pytest

from horologe import Date, DateTime, Instant, Interval, ParseError, Range, Time
from horologe.convert import (
    from_json,
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_json,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)


class TestToJson:
    """Tests for to_json output shape."""

    def test_datetime(self) -> None:
        assert to_json(DateTime(2025, 12, 28, 14, 30, 45, 7)) == {
            "_type": "DateTime",
            "year": 2025,
            "month": 12,
            "day": 28,
            "hour": 14,
            "minute": 30,
            "second": 45,
            "microsecond": 7,
        }

    def test_date_and_time(self) -> None:
        assert to_json(Date(2025, 12, 28)) == {
            "_type": "Date",
            "year": 2025,
            "month": 12,
            "day": 28,
        }
        assert to_json(Time(14, 30, 45, 7)) == {
            "_type": "Time",
            "hour": 14,
            "minute": 30,
            "second": 45,
            "microsecond": 7,
        }

    def test_exact_pairs(self) -> None:
        assert to_json(Interval.from_milliseconds(-500)) == {
            "_type": "Interval",
            "seconds": -1,
            "nanoseconds": 500_000_000,
        }
        assert to_json(Instant(1_735_396_200, 1)) == {
            "_type": "Instant",
            "seconds": 1_735_396_200,
            "nanoseconds": 1,
        }

    def test_range_nests_instants(self) -> None:
        data = to_json(Range(Instant(1), Instant(2)))
        assert data["_type"] == "Range"
        assert data["start"] == {"_type": "Instant", "seconds": 1, "nanoseconds": 0}

    def test_output_is_json_serializable(self) -> None:
        text = json.dumps(to_json(Range(Instant(1), Instant(2))))
        assert from_json(json.loads(text)) == Range(Instant(1), Instant(2))

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            to_json("2025-12-28")  # type: ignore[arg-type]


class TestFromJson:
    """Tests for from_json decoding and errors."""

    @pytest.mark.parametrize(
        "value",
        [
            DateTime(2025, 12, 28, 14, 30, 45, 123_456),
            Date(2024, 2, 29),
            Time(23, 59, 59, 999_999),
            Interval(-3, 1),
            Instant(-1, 999_999_999),
            Range(Instant(0), Instant(60)),
        ],
    )
    def test_decodes_each_type(self, value: object) -> None:
        assert from_json(to_json(value)) == value  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        [
            DateTime(12345, 1, 2, 3, 4, 5),
            DateTime(-44, 3, 15),
            DateTime(0, 1, 1),
            Date(12345, 1, 2),
            Date(-1, 12, 31),
        ],
    )
    def test_years_outside_four_digits_round_trip(self, value: object) -> None:
        assert from_json(to_json(value)) == value  # type: ignore[arg-type]

    def test_round_trip_through_json_text(self) -> None:
        value = DateTime(-44, 3, 15, 12)
        assert from_json(json.loads(json.dumps(to_json(value)))) == value

    @pytest.mark.parametrize(
        "value",
        [DateTime(2025, 2, 30), Time(25, 61, 0)],
    )
    def test_out_of_range_fields_are_kept(self, value: object) -> None:
        assert from_json(to_json(value)) == value  # type: ignore[arg-type]

    def test_nanoseconds_default_to_zero(self) -> None:
        assert from_json({"_type": "Instant", "seconds": 5}) == Instant(5)

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({}, "missing '_type'"),
            ({"_type": "Period"}, "unknown type"),
            ({"_type": "DateTime"}, "missing 'year' field for DateTime"),
            ({"_type": "Time", "hour": 1, "minute": 2, "second": 3}, "missing 'microsecond'"),
            ({"_type": "Date", "year": 2025, "month": 1.5, "day": 1}, "'month' must be an integer"),
            ({"_type": "Date", "year": "2025", "month": 1, "day": 1}, "'year' must be an integer"),
            ({"_type": "Interval"}, "missing 'seconds'"),
            ({"_type": "Interval", "seconds": "1"}, "must be an integer"),
            ({"_type": "Instant", "seconds": True}, "must be an integer"),
            (
                {"_type": "Range", "start": {"_type": "Date", "year": 2025, "month": 1, "day": 1},
                 "end": {"_type": "Instant", "seconds": 0}},
                "endpoints must be Instant",
            ),
        ],
    )
    def test_errors(self, data: dict, message: str) -> None:
        with pytest.raises(ParseError, match=message):
            from_json(data)

    def test_rejects_non_dict(self) -> None:
        with pytest.raises(ParseError, match="expected dict"):
            from_json([1, 2])  # type: ignore[arg-type]


class TestEpoch:
    """Tests for Unix epoch helpers."""

    def test_seconds(self) -> None:
        assert to_unix_seconds(DateTime(2024, 12, 28, 14, 30)) == 1_735_396_200
        assert from_unix_seconds(1_766_932_200) == DateTime(2025, 12, 28, 14, 30)

    def test_millis(self) -> None:
        assert to_unix_millis(DateTime(1970, 1, 1, 0, 0, 0, 500_000)) == 500
        assert from_unix_millis(-500) == DateTime(1969, 12, 31, 23, 59, 59, 500_000)

    def test_nanos(self) -> None:
        assert to_unix_nanos(DateTime(1970, 1, 1, 0, 0, 1, 1)) == 1_000_001_000
        assert from_unix_nanos(1_999) == DateTime(1970, 1, 1, 0, 0, 0, 1)

    def test_pre_epoch_floors(self) -> None:
        dt = DateTime(1969, 12, 31, 23, 59, 59, 999_999)
        assert to_unix_seconds(dt) == -1
        assert to_unix_millis(dt) == -1
        assert to_unix_nanos(dt) == -1_000
