"""Horologe: exact durations, instants and UTC calendar date/times.

Horologe keeps time as normalized (seconds, nanoseconds) pairs, converts
between the UTC timeline and calendar fields with a closed-form proleptic
Gregorian algorithm, and reads and writes a strict ISO 8601 / RFC 3339
subset.

Core Types:
    Interval: Signed span of elapsed time, nanosecond precision
    Instant: Absolute point in time since 1970-01-01T00:00:00Z
    DateTime: UTC calendar date and time, microsecond precision
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, microsecond)
    Range: Half-open span between two instants [start, end)

Clock:
    Clock: Protocol consumed by now()-style constructors
    SystemClock: Host clock
    FixedClock: Deterministic clock for tests

Format Functions:
    parse_iso8601: Parse a date or date-time string into a ParseOutcome
    format_iso8601: Format a DateTime at second precision
    format_rfc3339: Format a DateTime at microsecond precision
    Formatter / FormatterConfig: Configurable formatting

Exceptions:
    HorologeError: Base exception
    ValidationError: Invalid configuration
    ParseError: Failed parse, raised by ParseOutcome.unwrap()
    ClockError: Host clock could not be read

Example:
    >>> from horologe import DateTime, Interval, FixedClock
    >>> start = DateTime.now(FixedClock(1_735_396_200))
    >>> str(start + Interval.from_minutes(90))
    '2024-12-28T16:00:00.000000Z'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from horologe.core.interval import Interval
from horologe.core.instant import Instant
from horologe.core.date import Date
from horologe.core.time import Time
from horologe.core.datetime import DateTime
from horologe.core.range import Range

# Clock
from horologe.clock import Clock, FixedClock, SystemClock

# Exceptions
from horologe.errors import (
    ClockError,
    HorologeError,
    ParseError,
    ValidationError,
)

# Format functions
from horologe.format import (
    Formatter,
    FormatterConfig,
    ParseOutcome,
    format_iso8601,
    format_rfc3339,
    parse_date,
    parse_iso8601,
    parse_time,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Interval",
    "Instant",
    "Date",
    "Time",
    "DateTime",
    "Range",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    # Exceptions
    "HorologeError",
    "ValidationError",
    "ParseError",
    "ClockError",
    # Format functions
    "parse_iso8601",
    "parse_date",
    "parse_time",
    "format_iso8601",
    "format_rfc3339",
    "Formatter",
    "FormatterConfig",
    "ParseOutcome",
]
