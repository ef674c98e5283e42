"""Date class representing a calendar date.

This module provides the Date class, the date-only projection of a
DateTime in the proleptic Gregorian calendar.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horologe._internal.calendar import (
    civil_from_days,
    day_of_year,
    days_from_civil,
    is_leap_year,
    is_valid_date,
    weekday_from_days,
)
from horologe._internal.fields import compare_fields, pad2, pad_year

if TYPE_CHECKING:
    from horologe.core.datetime import DateTime


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date stores its year, month and day fields exactly as given. Nothing
    is normalized or rejected at construction time, so Date(2025, 2, 30)
    is a legal value; calendar arithmetic rolls such a date into the
    following month. Use is_valid() to check a date against the calendar.

    Dates order by (year, month, day).

    Attributes:
        year: The year (astronomical numbering, can be zero or negative).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2025, 3, 15)
        >>> d.day_of_year()
        74
        >>> d.day_of_week()  # Saturday
        5
        >>> str(d)
        '2025-03-15'
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def from_days(cls, days: int) -> Date:
        """Create a Date from a signed day count since 1970-01-01.

        Examples:
            >>> Date.from_days(-1)
            Date(1969, 12, 31)
        """
        year, month, day = civil_from_days(days)
        return cls(year, month, day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    def to_days(self) -> int:
        """Return the signed day count since 1970-01-01."""
        return days_from_civil(self._year, self._month, self._day)

    def day_of_week(self) -> int:
        """Return the day of week (Monday=0, Sunday=6)."""
        return weekday_from_days(self.to_days())

    def day_of_year(self) -> int:
        """Return the 1-based day within the year."""
        return day_of_year(self._year, self._month, self._day)

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def is_valid(self) -> bool:
        """Return True if the fields name a real calendar day."""
        return is_valid_date(self._year, self._month, self._day)

    def to_datetime(self) -> DateTime:
        """Return midnight at the start of this date."""
        from horologe.core.datetime import DateTime

        return DateTime(self._year, self._month, self._day)

    def _fields(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) >= 0

    def __hash__(self) -> int:
        return hash(("Date",) + self._fields())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return f"{pad_year(self._year)}-{pad2(self._month)}-{pad2(self._day)}"


__all__ = ["Date"]
