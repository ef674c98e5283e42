"""Epoch conversion utilities for DateTime values.

This module provides functions for converting between DateTime and Unix
timestamps (seconds, milliseconds, nanoseconds). All conversions are
floored, so timestamps before 1970 map to the correct earlier moment.

The Unix epoch is 1970-01-01T00:00:00Z.

Examples:
    >>> from horologe import DateTime
    >>> to_unix_seconds(DateTime(1970, 1, 1))
    0
    >>> from_unix_seconds(-1)
    DateTime(1969, 12, 31, 23, 59, 59, 0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from horologe.core.datetime import DateTime


def to_unix_seconds(dt: DateTime) -> int:
    """Convert a DateTime to whole Unix seconds.

    Examples:
        >>> from horologe import DateTime
        >>> to_unix_seconds(DateTime(2024, 12, 28, 14, 30))
        1735396200
    """
    return dt.to_instant().to_seconds()


def from_unix_seconds(seconds: int) -> DateTime:
    """Create a DateTime from whole Unix seconds."""
    from horologe.core.datetime import DateTime

    return DateTime.from_unix_seconds(seconds)


def to_unix_millis(dt: DateTime) -> int:
    """Convert a DateTime to Unix milliseconds.

    Examples:
        >>> from horologe import DateTime
        >>> to_unix_millis(DateTime(1970, 1, 1, 0, 0, 0, 500_000))
        500
    """
    return dt.to_instant().to_milliseconds()


def from_unix_millis(millis: int) -> DateTime:
    """Create a DateTime from Unix milliseconds."""
    from horologe.core.datetime import DateTime

    return DateTime.from_unix_millis(millis)


def to_unix_nanos(dt: DateTime) -> int:
    """Convert a DateTime to Unix nanoseconds."""
    return dt.to_instant().to_nanoseconds()


def from_unix_nanos(nanos: int) -> DateTime:
    """Create a DateTime from Unix nanoseconds.

    Precision below one microsecond is truncated.

    Examples:
        >>> from_unix_nanos(1_999).microsecond
        1
    """
    from horologe.core.datetime import DateTime
    from horologe.core.instant import Instant

    return DateTime.from_instant(Instant.from_nanoseconds(nanos))


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_nanos",
    "from_unix_nanos",
]
