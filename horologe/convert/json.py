"""JSON serialization and deserialization for temporal values.

This module provides functions for converting Horologe values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a value to a JSON-serializable dict.
    from_json: Create a value from a JSON dict.

Every dictionary carries a `_type` tag for polymorphic deserialization.
All values are stored as integer fields, so any year round-trips:

    {"_type": "DateTime", "year": 2025, "month": 12, "day": 28,
     "hour": 14, "minute": 30, "second": 45, "microsecond": 0}
    {"_type": "Date", "year": 2025, "month": 12, "day": 28}
    {"_type": "Time", "hour": 14, "minute": 30, "second": 45, "microsecond": 0}
    {"_type": "Interval", "seconds": -1, "nanoseconds": 500000000}
    {"_type": "Instant", "seconds": 1735396200, "nanoseconds": 0}
    {"_type": "Range", "start": {...Instant...}, "end": {...Instant...}}

Examples:
    >>> from horologe import DateTime
    >>> data = to_json(DateTime(2025, 12, 28, 14, 30, 45))
    >>> data["_type"]
    'DateTime'
    >>> from_json(data) == DateTime(2025, 12, 28, 14, 30, 45)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from horologe.errors import ParseError

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.datetime import DateTime
    from horologe.core.instant import Instant
    from horologe.core.interval import Interval
    from horologe.core.range import Range
    from horologe.core.time import Time

# Type alias for serializable values
TemporalType = Union["Date", "Time", "DateTime", "Interval", "Instant", "Range"]


_DATE_FIELDS = ("year", "month", "day")
_TIME_FIELDS = ("hour", "minute", "second", "microsecond")


def to_json(value: TemporalType) -> dict[str, Any]:
    """Convert a value to a JSON-serializable dictionary.

    Args:
        value: A Date, Time, DateTime, Interval, Instant or Range.

    Returns:
        A dictionary with a `_type` tag.

    Raises:
        TypeError: If value is not a supported type.

    Examples:
        >>> from horologe import Interval
        >>> to_json(Interval.from_milliseconds(-500))
        {'_type': 'Interval', 'seconds': -1, 'nanoseconds': 500000000}
    """
    from horologe.core.date import Date
    from horologe.core.datetime import DateTime
    from horologe.core.instant import Instant
    from horologe.core.interval import Interval
    from horologe.core.range import Range
    from horologe.core.time import Time

    if isinstance(value, DateTime):
        return _fields_to_json("DateTime", value, _DATE_FIELDS + _TIME_FIELDS)
    elif isinstance(value, Date):
        return _fields_to_json("Date", value, _DATE_FIELDS)
    elif isinstance(value, Time):
        return _fields_to_json("Time", value, _TIME_FIELDS)
    elif isinstance(value, (Interval, Instant)):
        return {
            "_type": type(value).__name__,
            "seconds": value.seconds,
            "nanoseconds": value.nanoseconds,
        }
    elif isinstance(value, Range):
        return {
            "_type": "Range",
            "start": to_json(value.start),
            "end": to_json(value.end),
        }
    else:
        raise TypeError(
            "expected Date, Time, DateTime, Interval, Instant or Range, "
            f"got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> TemporalType:
    """Create a value from a JSON dictionary produced by to_json().

    Args:
        data: Dictionary with a `_type` tag.

    Returns:
        The decoded value.

    Raises:
        ParseError: If the tag is missing or unknown, or the payload is
            malformed.

    Examples:
        >>> from_json({"_type": "Instant", "seconds": 0, "nanoseconds": 0})
        Instant(seconds=0, nanoseconds=0)

        >>> from_json({"_type": "Date", "year": 12345, "month": 1, "day": 2})
        Date(12345, 1, 2)
    """
    from horologe.core.date import Date
    from horologe.core.datetime import DateTime
    from horologe.core.instant import Instant
    from horologe.core.interval import Interval
    from horologe.core.range import Range
    from horologe.core.time import Time

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_tag = data.get("_type")
    if type_tag is None:
        raise ParseError("missing '_type' field")

    if type_tag == "DateTime":
        return DateTime(*_ints(data, type_tag, _DATE_FIELDS + _TIME_FIELDS))
    elif type_tag == "Date":
        return Date(*_ints(data, type_tag, _DATE_FIELDS))
    elif type_tag == "Time":
        return Time(*_ints(data, type_tag, _TIME_FIELDS))
    elif type_tag == "Interval":
        return Interval(*_pair(data, type_tag))
    elif type_tag == "Instant":
        return Instant(*_pair(data, type_tag))
    elif type_tag == "Range":
        start = from_json(data.get("start"))  # type: ignore[arg-type]
        end = from_json(data.get("end"))  # type: ignore[arg-type]
        if not isinstance(start, Instant) or not isinstance(end, Instant):
            raise ParseError("Range endpoints must be Instant values")
        return Range(start, end)
    else:
        raise ParseError(f"unknown type: {type_tag!r}")


def _fields_to_json(
    type_tag: str, value: object, names: tuple[str, ...]
) -> dict[str, Any]:
    data: dict[str, Any] = {"_type": type_tag}
    for name in names:
        data[name] = getattr(value, name)
    return data


def _check_int(data: dict[str, Any], name: str, type_tag: str) -> int:
    if name not in data:
        raise ParseError(f"missing '{name}' field for {type_tag}")
    field = data[name]
    if not isinstance(field, int) or isinstance(field, bool):
        raise ParseError(f"'{name}' must be an integer for {type_tag}")
    return field


def _ints(
    data: dict[str, Any], type_tag: str, names: tuple[str, ...]
) -> list[int]:
    return [_check_int(data, name, type_tag) for name in names]


def _pair(data: dict[str, Any], type_tag: str) -> tuple[int, int]:
    seconds = _check_int(data, "seconds", type_tag)
    if "nanoseconds" not in data:
        return (seconds, 0)
    return (seconds, _check_int(data, "nanoseconds", type_tag))


__all__ = ["to_json", "from_json"]
