"""Time class representing a time of day.

This module provides the Time class, the time-only projection of a
DateTime with microsecond precision.
"""

from __future__ import annotations

from horologe._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from horologe._internal.fields import compare_fields, pad2, pad_micros


class Time:
    """A time of day with microsecond precision.

    Time carries no date and no timezone. Its fields are stored as given;
    range checks happen only when a Time is produced by the parser.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        microsecond: The microsecond component (0-999999).

    Examples:
        >>> t = Time(14, 30, 45, 250000)
        >>> t.seconds_since_midnight
        52245
        >>> str(t)
        '14:30:45.250000'
    """

    __slots__ = ("_hour", "_minute", "_second", "_microsecond")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond

    @classmethod
    def midnight(cls) -> Time:
        """Return 00:00:00."""
        return cls()

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
    def seconds_since_midnight(self) -> int:
        """Return whole seconds since midnight.

        The microsecond component is not included.
        """
        return (
            self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    def _fields(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._microsecond)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return compare_fields(self._fields(), other._fields()) >= 0

    def __hash__(self) -> int:
        return hash(("Time",) + self._fields())

    def __repr__(self) -> str:
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"{self._microsecond})"
        )

    def __str__(self) -> str:
        """Return hh:mm:ss, with .ffffff appended when microseconds are set."""
        text = f"{pad2(self._hour)}:{pad2(self._minute)}:{pad2(self._second)}"
        if self._microsecond:
            text += f".{pad_micros(self._microsecond)}"
        return text


__all__ = ["Time"]
