"""ISO 8601 formatting and parsing.

This module provides fixed-layout formatters for DateTime values and a
strict, position-based parser for a small ISO 8601 subset.

Functions:
    format_iso8601: YYYY-MM-DDThh:mm:ssZ (second precision).
    format_iso8601_millis: YYYY-MM-DDThh:mm:ss.fffZ.
    format_date: YYYY-MM-DD.
    format_time: hh:mm:ss.
    format_time_micros: hh:mm:ss.ffffff.
    format_epoch_seconds: Whole Unix seconds as a decimal string.
    format_human: "December 28, 2025 at 14:30".
    parse_iso8601: Parse a date or date-time string.
    parse_date: Parse exactly YYYY-MM-DD.
    parse_time: Parse hh:mm:ss[.f...][Z].

Grammar accepted by parse_iso8601:

    datetime := date [ "T" time ] [ "Z" | sign hh ":" mm ]
    date     := YYYY "-" MM "-" DD
    time     := hh ":" mm ":" ss [ "." 1*DIGIT ]

Fields sit at fixed positions. A UTC offset is accepted and ignored;
every value is read as UTC. The day is checked against 1-31 only, not
against the length of the month, so "2025-02-30" parses.

Examples:
    >>> from horologe import DateTime
    >>> format_iso8601(DateTime(2025, 12, 28, 14, 30, 45))
    '2025-12-28T14:30:45Z'

    >>> parse_iso8601("2025-12-28T14:30:45.5Z").value
    DateTime(2025, 12, 28, 14, 30, 45, 500000)

    >>> parse_iso8601("2025-13-28T14:30:45Z").error
    'month out of range: 13'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from horologe._internal.constants import EPOCH_DATE_PREFIX, MONTH_NAMES
from horologe._internal.fields import pad2, pad_micros, pad_year
from horologe.format.outcome import ParseOutcome

if TYPE_CHECKING:
    from horologe.core.date import Date
    from horologe.core.datetime import DateTime
    from horologe.core.time import Time

logger = logging.getLogger(__name__)

# Type aliases for values carrying date or time fields
DateLike = Union["Date", "DateTime"]
TimeLike = Union["Time", "DateTime"]

_FRACTION_TERMINATORS = frozenset("Z+-")


# Formatting


def date_part(value: DateLike, separator: str = "-") -> str:
    """Return the YYYY-MM-DD portion of a Date or DateTime."""
    return separator.join(
        (pad_year(value.year), pad2(value.month), pad2(value.day))
    )


def time_part(value: TimeLike, separator: str = ":") -> str:
    """Return the hh:mm:ss portion of a Time or DateTime."""
    return separator.join(
        (pad2(value.hour), pad2(value.minute), pad2(value.second))
    )


def format_iso8601(value: DateTime) -> str:
    """Format a DateTime at second precision with a trailing Z.

    Examples:
        >>> from horologe import DateTime
        >>> format_iso8601(DateTime(2025, 12, 28, 14, 30, 45, 999999))
        '2025-12-28T14:30:45Z'
    """
    return f"{date_part(value)}T{time_part(value)}Z"


def format_iso8601_millis(value: DateTime) -> str:
    """Format a DateTime with exactly three fractional digits.

    The microsecond field is truncated, not rounded.

    Examples:
        >>> from horologe import DateTime
        >>> format_iso8601_millis(DateTime(2025, 12, 28, 14, 30, 45, 123999))
        '2025-12-28T14:30:45.123Z'
    """
    millis = value.microsecond // 1000
    return f"{date_part(value)}T{time_part(value)}.{millis:03d}Z"


def format_date(value: DateLike) -> str:
    """Format the date fields as YYYY-MM-DD."""
    return date_part(value)


def format_time(value: TimeLike) -> str:
    """Format the time fields as hh:mm:ss."""
    return time_part(value)


def format_time_micros(value: TimeLike) -> str:
    """Format the time fields as hh:mm:ss.ffffff."""
    return f"{time_part(value)}.{pad_micros(value.microsecond)}"


def format_epoch_seconds(value: DateTime) -> str:
    """Format a DateTime as whole Unix seconds in decimal.

    Sub-second precision is dropped (floored toward the past).

    Examples:
        >>> from horologe import DateTime
        >>> format_epoch_seconds(DateTime(2024, 12, 28, 14, 30))
        '1735396200'
    """
    return str(value.to_instant().to_seconds())


def format_human(value: DateTime) -> str:
    """Format a DateTime for people, in English.

    A month outside 1-12 has no name and is written as its number.

    Examples:
        >>> from horologe import DateTime
        >>> format_human(DateTime(2025, 12, 28, 14, 30, 45))
        'December 28, 2025 at 14:30'

        >>> format_human(DateTime(2025, 13, 1))
        '13 1, 2025 at 00:00'
    """
    month = value.month
    month_name = MONTH_NAMES[month] if 1 <= month <= 12 else str(month)
    return (
        f"{month_name} {value.day}, {pad_year(value.year)}"
        f" at {pad2(value.hour)}:{pad2(value.minute)}"
    )


# Parsing


def _digits(text: str) -> int | None:
    """Return the integer value of an all-ASCII-digit string, else None."""
    if text and text.isascii() and text.isdigit():
        return int(text)
    return None


def _fail(message: str, s: str) -> ParseOutcome:
    logger.debug("rejected %r: %s", s, message)
    return ParseOutcome.failure(message)


def _fraction_to_micros(digits: str) -> int:
    """Scale a fractional-second digit string to microseconds.

    Three digits are milliseconds, six are microseconds. Shorter strings
    are right-padded with zeros, longer ones are truncated.

    Examples:
        >>> _fraction_to_micros("5")
        500000
        >>> _fraction_to_micros("123")
        123000
        >>> _fraction_to_micros("123456789")
        123456
    """
    length = len(digits)
    value = int(digits)
    if length == 3:
        return value * 1000
    if length == 6:
        return value
    if length < 6:
        return value * 10 ** (6 - length)
    return value // 10 ** (length - 6)


def _is_valid_offset(suffix: str) -> bool:
    """Check a ±hh:mm suffix. The offset itself is not applied."""
    if len(suffix) != 6 or suffix[0] not in "+-" or suffix[3] != ":":
        return False
    hours = _digits(suffix[1:3])
    minutes = _digits(suffix[4:6])
    return (
        hours is not None
        and minutes is not None
        and hours <= 23
        and minutes <= 59
    )


def parse_iso8601(s: str) -> ParseOutcome[DateTime]:
    """Parse an ISO 8601 date or date-time string.

    Validation runs in a fixed order and stops at the first problem,
    each with its own message:

    1. At least 10 characters.
    2. '-' at positions 4 and 7, digits for year, month and day.
    3. Month in 1-12, day in 1-31.
    4. Exactly 10 characters: a date at midnight.
    5. 'T' at position 10 and at least 19 characters.
    6. ':' at positions 13 and 16, hour in 0-23, minute and second in 0-59.
    7. Optional '.' at position 19 followed by digits up to 'Z', '+', '-'
       or the end. The digits are scaled to microseconds.
    8. Optional suffix: 'Z' or '±hh:mm'. Nothing else may follow.

    Args:
        s: The string to parse.

    Returns:
        A successful outcome with a DateTime, or a failure with a message.

    Examples:
        >>> parse_iso8601("2025-12-28").value
        DateTime(2025, 12, 28, 0, 0, 0, 0)

        >>> parse_iso8601("2025-12-28T14:30:45+05:30").value
        DateTime(2025, 12, 28, 14, 30, 45, 0)

        >>> parse_iso8601("2025-12").error
        'string too short for datetime'
    """
    from horologe.core.datetime import DateTime

    length = len(s)
    if length < 10:
        return _fail("string too short for datetime", s)

    if s[4] != "-" or s[7] != "-":
        return _fail("expected '-' at positions 4 and 7", s)

    year = _digits(s[0:4])
    if year is None:
        return _fail(f"invalid year: {s[0:4]!r}", s)
    month = _digits(s[5:7])
    if month is None:
        return _fail(f"invalid month: {s[5:7]!r}", s)
    day = _digits(s[8:10])
    if day is None:
        return _fail(f"invalid day: {s[8:10]!r}", s)

    if not 1 <= month <= 12:
        return _fail(f"month out of range: {month}", s)
    if not 1 <= day <= 31:
        return _fail(f"day out of range: {day}", s)

    if length == 10:
        return ParseOutcome.success(DateTime(year, month, day))

    if s[10] != "T":
        return _fail("expected 'T' between date and time", s)
    if length < 19:
        return _fail("string too short for time component", s)

    if s[13] != ":" or s[16] != ":":
        return _fail("expected ':' at positions 13 and 16", s)

    hour = _digits(s[11:13])
    if hour is None:
        return _fail(f"invalid hour: {s[11:13]!r}", s)
    minute = _digits(s[14:16])
    if minute is None:
        return _fail(f"invalid minute: {s[14:16]!r}", s)
    second = _digits(s[17:19])
    if second is None:
        return _fail(f"invalid second: {s[17:19]!r}", s)

    if hour > 23:
        return _fail(f"hour out of range: {hour}", s)
    if minute > 59:
        return _fail(f"minute out of range: {minute}", s)
    if second > 59:
        return _fail(f"second out of range: {second}", s)

    microsecond = 0
    position = 19
    if length > 19 and s[19] == ".":
        position = 20
        while position < length and s[position] not in _FRACTION_TERMINATORS:
            if not (s[position].isascii() and s[position].isdigit()):
                return _fail(
                    f"unexpected character in fractional seconds: {s[position]!r}",
                    s,
                )
            position += 1
        fraction = s[20:position]
        if not fraction:
            return _fail("missing digits after '.'", s)
        microsecond = _fraction_to_micros(fraction)

    suffix = s[position:]
    if suffix and suffix != "Z":
        if suffix[0] not in "+-":
            return _fail(f"unexpected trailing characters: {suffix!r}", s)
        if not _is_valid_offset(suffix):
            return _fail(f"invalid UTC offset: {suffix!r}", s)

    return ParseOutcome.success(
        DateTime(year, month, day, hour, minute, second, microsecond)
    )


def parse_date(s: str) -> ParseOutcome[Date]:
    """Parse a string that is exactly YYYY-MM-DD.

    Examples:
        >>> parse_date("2024-02-29").value
        Date(2024, 2, 29)

        >>> parse_date("2024-02-29T00:00:00Z").error
        'date must be exactly 10 characters'
    """
    if len(s) != 10:
        return _fail("date must be exactly 10 characters", s)
    return parse_iso8601(s).map(lambda dt: dt.date())


def parse_time(s: str) -> ParseOutcome[Time]:
    """Parse a bare time of day, hh:mm:ss with optional fraction and Z.

    The time is checked by placing it on 1970-01-01 and running the full
    date-time grammar. A trailing 'Z' is added when missing, so a time
    that already carries a numeric offset is rejected.

    Examples:
        >>> parse_time("14:30:45.25").value
        Time(14, 30, 45, 250000)

        >>> parse_time("14:30").error
        'string too short for time'
    """
    if len(s) < 8:
        return _fail("string too short for time", s)
    text = EPOCH_DATE_PREFIX + s
    if not s.endswith("Z"):
        text += "Z"
    return parse_iso8601(text).map(lambda dt: dt.time())


__all__ = [
    "format_iso8601",
    "format_iso8601_millis",
    "format_date",
    "format_time",
    "format_time_micros",
    "format_epoch_seconds",
    "format_human",
    "parse_iso8601",
    "parse_date",
    "parse_time",
]
