"""DateTime class combining a UTC calendar date and time of day.

This module provides the DateTime class. It is the calendar ("civil")
view of the UTC timeline and converts to and from Instant through the
algebraic day-count transform in horologe._internal.calendar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from horologe._internal.calendar import (
    civil_from_days,
    day_of_year,
    days_from_civil,
    days_in_month,
    is_leap_year,
    is_valid_date,
    weekday_from_days,
)
from horologe._internal.constants import (
    NANOS_PER_MICROSECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe._internal.fields import compare_fields, pad2, pad_micros, pad_year
from horologe.core.date import Date
from horologe.core.instant import Instant
from horologe.core.interval import Interval
from horologe.core.time import Time

if TYPE_CHECKING:
    from horologe.clock import Clock


class DateTime:
    """A UTC calendar date and time of day with microsecond precision.

    DateTime stores its seven fields as given. The constructor never
    normalizes or validates; day 31 in a 30-day month is accepted and
    only resolved (rolled forward) once the value passes through
    to_instant(). Every operation returns a new DateTime.

    Arithmetic goes through Instant: the value is converted to an Instant,
    shifted by an Interval, and converted back.

    Ordering is lexicographic on
    (year, month, day, hour, minute, second, microsecond).

    Attributes:
        year: The year (astronomical numbering, can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        microsecond: The microsecond (0-999999).

    Examples:
        >>> dt = DateTime(2024, 12, 28, 14, 30)
        >>> dt.to_instant().seconds
        1735396200
        >>> str(dt)
        '2024-12-28T14:30:00.000000Z'

        >>> DateTime(2024, 2, 28, 23, 0).add_hours(2)
        DateTime(2024, 2, 29, 1, 0, 0, 0)

        >>> DateTime(2025, 1, 1) - DateTime(2024, 12, 31, 12)
        Interval(seconds=43200, nanoseconds=0)
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_microsecond",
    )

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond

    # Construction

    @classmethod
    def now(cls, clock: Clock | None = None) -> DateTime:
        """Return the current UTC date and time as reported by a clock.

        Args:
            clock: Clock to read. Defaults to the system clock.

        Raises:
            ClockError: If the clock cannot be read.

        Examples:
            >>> from horologe.clock import FixedClock
            >>> DateTime.now(FixedClock(0))
            DateTime(1970, 1, 1, 0, 0, 0, 0)
        """
        return cls.from_instant(Instant.now(clock))

    @classmethod
    def from_instant(cls, instant: Instant) -> DateTime:
        """Convert an Instant to its UTC calendar fields.

        The seconds are split into a day count and a time of day with
        floored division, so pre-epoch instants land on the right day.
        Sub-microsecond precision is truncated.

        Args:
            instant: The instant to convert.

        Returns:
            The corresponding DateTime.

        Examples:
            >>> DateTime.from_instant(Instant(-1, 500_000_000))
            DateTime(1969, 12, 31, 23, 59, 59, 500000)
        """
        days, time_of_day = divmod(instant.seconds, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, rest = divmod(time_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        microsecond = instant.nanoseconds // NANOS_PER_MICROSECOND
        return cls(year, month, day, hour, minute, second, microsecond)

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> DateTime:
        """Create a DateTime from whole Unix seconds."""
        return cls.from_instant(Instant.from_seconds(seconds))

    @classmethod
    def from_unix_millis(cls, millis: int) -> DateTime:
        """Create a DateTime from Unix milliseconds."""
        return cls.from_instant(Instant.from_milliseconds(millis))

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse an ISO 8601 string, raising on failure.

        This is the raising counterpart of horologe.format.parse_iso8601().

        Raises:
            ParseError: If the string does not match the grammar.

        Examples:
            >>> DateTime.from_iso_format("2025-12-28T14:30:45.5Z")
            DateTime(2025, 12, 28, 14, 30, 45, 500000)
        """
        from horologe.format.iso8601 import parse_iso8601

        return parse_iso8601(s).unwrap()

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Join a Date and a Time into one DateTime."""
        return cls(
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            time.microsecond,
        )

    # Fields

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def microsecond(self) -> int:
        return self._microsecond

    @property
    def millisecond(self) -> int:
        """Return the millisecond part of the microsecond field (truncated)."""
        return self._microsecond // 1000

    def date(self) -> Date:
        """Return the date portion."""
        return Date(self._year, self._month, self._day)

    def time(self) -> Time:
        """Return the time-of-day portion."""
        return Time(self._hour, self._minute, self._second, self._microsecond)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with the given fields replaced.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).replace(hour=10)
            DateTime(2024, 1, 15, 10, 30, 45, 0)
        """
        return DateTime(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
            self._hour if hour is None else hour,
            self._minute if minute is None else minute,
            self._second if second is None else second,
            self._microsecond if microsecond is None else microsecond,
        )

    # Calendar queries

    def _day_count(self) -> int:
        return days_from_civil(self._year, self._month, self._day)

    def to_instant(self) -> Instant:
        """Convert to an Instant on the UTC timeline.

        Returns:
            Instant with seconds = days * 86400 + h * 3600 + m * 60 + s and
            nanoseconds = microsecond * 1000.
        """
        seconds = (
            self._day_count() * SECONDS_PER_DAY
            + self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )
        return Instant(seconds, self._microsecond * NANOS_PER_MICROSECOND)

    def to_unix_seconds(self) -> int:
        return self.to_instant().to_seconds()

    def to_unix_millis(self) -> int:
        return self.to_instant().to_milliseconds()

    def day_of_week(self) -> int:
        """Return the day of week (Monday=0, Sunday=6).

        Examples:
            >>> DateTime(1970, 1, 1).day_of_week()  # Thursday
            3
        """
        return weekday_from_days(self._day_count())

    def day_of_year(self) -> int:
        """Return the 1-based day within the year."""
        return day_of_year(self._year, self._month, self._day)

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def is_valid(self) -> bool:
        """Return True if every field is within its calendar range."""
        return (
            is_valid_date(self._year, self._month, self._day)
            and 0 <= self._hour <= 23
            and 0 <= self._minute <= 59
            and 0 <= self._second <= 59
            and 0 <= self._microsecond <= 999_999
        )

    # Arithmetic

    def add(self, interval: Interval) -> DateTime:
        """Return this moment shifted forward by an Interval."""
        return DateTime.from_instant(self.to_instant().add(interval))

    @overload
    def subtract(self, other: Interval) -> DateTime: ...

    @overload
    def subtract(self, other: DateTime) -> Interval: ...

    def subtract(self, other: Interval | DateTime) -> DateTime | Interval:
        """Shift backward by an Interval, or measure the gap to another DateTime.

        Args:
            other: An Interval to subtract, or a DateTime to measure from.

        Returns:
            A DateTime when given an Interval, an Interval when given a
            DateTime.
        """
        if isinstance(other, DateTime):
            return self.to_instant() - other.to_instant()
        return DateTime.from_instant(self.to_instant().subtract(other))

    def add_seconds(self, seconds: int) -> DateTime:
        return self.add(Interval.from_seconds(seconds))

    def add_minutes(self, minutes: int) -> DateTime:
        return self.add(Interval.from_minutes(minutes))

    def add_hours(self, hours: int) -> DateTime:
        return self.add(Interval.from_hours(hours))

    def add_days(self, days: int) -> DateTime:
        return self.add(Interval.from_days(days))

    def __add__(self, other: object) -> DateTime:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> DateTime:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Interval) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Interval: ...

    def __sub__(self, other: object) -> DateTime | Interval:
        if not isinstance(other, (Interval, DateTime)):
            return NotImplemented
        return self.subtract(other)

    # Boundaries (built from fields, no Instant round trip)

    def start_of_day(self) -> DateTime:
        return DateTime(self._year, self._month, self._day)

    def end_of_day(self) -> DateTime:
        """Return the last representable microsecond of the day."""
        return DateTime(self._year, self._month, self._day, 23, 59, 59, 999_999)

    def start_of_month(self) -> DateTime:
        return DateTime(self._year, self._month, 1)

    def end_of_month(self) -> DateTime:
        """Return the last representable microsecond of the month.

        Examples:
            >>> DateTime(2024, 2, 10).end_of_month()
            DateTime(2024, 2, 29, 23, 59, 59, 999999)
        """
        last_day = days_in_month(self._year, self._month)
        return DateTime(self._year, self._month, last_day, 23, 59, 59, 999_999)

    def start_of_year(self) -> DateTime:
        return DateTime(self._year, 1, 1)

    # Comparison

    def _fields(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._microsecond,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) >= 0

    def __hash__(self) -> int:
        return hash(("DateTime",) + self._fields())

    def __repr__(self) -> str:
        return (
            f"DateTime({self._year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second}, {self._microsecond})"
        )

    def __str__(self) -> str:
        """Return the canonical form YYYY-MM-DDThh:mm:ss.ffffffZ."""
        return (
            f"{pad_year(self._year)}-{pad2(self._month)}-{pad2(self._day)}"
            f"T{pad2(self._hour)}:{pad2(self._minute)}:{pad2(self._second)}"
            f".{pad_micros(self._microsecond)}Z"
        )


__all__ = ["DateTime"]
