"""Interval class representing a signed span of elapsed time.

This module provides the Interval class for representing durations with
nanosecond precision as a normalized (seconds, nanoseconds) pair.
"""

from __future__ import annotations

from horologe._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from horologe._internal.normalize import normalize, split_nanos, total_nanos


class Interval:
    """A signed span of time with nanosecond precision.

    Interval represents elapsed time, which can be positive, negative,
    or zero. It stores a whole-second count and a sub-second remainder.

    The internal representation is normalized such that:
    - `_nanos` is always in the range [0, 1_000_000_000)
    - `_seconds` carries the sign and may be any integer

    The value is `seconds + nanoseconds / 1e9` with floored semantics,
    so half a second in the negative direction is stored as
    `seconds=-1, nanoseconds=500_000_000`.

    Attributes:
        seconds: The whole seconds component (can be negative).
        nanoseconds: The sub-second component [0, 1e9).

    Examples:
        >>> Interval.from_milliseconds(3500)
        Interval(seconds=3, nanoseconds=500000000)

        >>> Interval.from_milliseconds(-500)
        Interval(seconds=-1, nanoseconds=500000000)

        >>> Interval.from_seconds(10) + Interval.from_seconds(5)
        Interval(seconds=15, nanoseconds=0)

        >>> str(Interval.from_seconds(5415) + Interval.from_milliseconds(500))
        '1h30m15.5s'
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Create an Interval from a raw (seconds, nanoseconds) pair.

        Both values can be positive, negative, or out of range. The
        resulting interval is normalized to canonical form.

        Args:
            seconds: Number of whole seconds.
            nanoseconds: Number of nanoseconds, folded into seconds as needed.

        Examples:
            >>> Interval(1, 1_500_000_000)
            Interval(seconds=2, nanoseconds=500000000)

            >>> Interval(0, -1)
            Interval(seconds=-1, nanoseconds=999999999)
        """
        self._seconds, self._nanos = normalize(seconds, nanoseconds)

    @classmethod
    def _from_total(cls, nanos: int) -> Interval:
        """Create an Interval from a total nanosecond count."""
        seconds, remainder = split_nanos(nanos)
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._nanos = remainder
        return instance

    @classmethod
    def zero(cls) -> Interval:
        """Create a zero-length interval.

        Examples:
            >>> Interval.zero()
            Interval(seconds=0, nanoseconds=0)
        """
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Interval:
        """Create an Interval from a number of days.

        Args:
            days: Number of days (can be negative).

        Returns:
            An Interval of exactly `days * 86400` seconds.
        """
        return cls(seconds=days * SECONDS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> Interval:
        """Create an Interval from a number of hours.

        Examples:
            >>> Interval.from_hours(2)
            Interval(seconds=7200, nanoseconds=0)
        """
        return cls(seconds=hours * SECONDS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> Interval:
        """Create an Interval from a number of minutes."""
        return cls(seconds=minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> Interval:
        """Create an Interval from a number of whole seconds."""
        return cls(seconds=seconds)

    @classmethod
    def from_seconds_float(cls, seconds: float) -> Interval:
        """Create an Interval from fractional seconds.

        The value is rounded to the nearest nanosecond.

        Args:
            seconds: Number of seconds as a float (can be negative).

        Returns:
            The closest representable Interval.

        Examples:
            >>> Interval.from_seconds_float(1.25)
            Interval(seconds=1, nanoseconds=250000000)

            >>> Interval.from_seconds_float(-0.5)
            Interval(seconds=-1, nanoseconds=500000000)
        """
        return cls._from_total(round(seconds * NANOS_PER_SECOND))

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Interval:
        """Create an Interval from a number of milliseconds.

        Examples:
            >>> Interval.from_milliseconds(1500)
            Interval(seconds=1, nanoseconds=500000000)
        """
        return cls._from_total(milliseconds * NANOS_PER_MILLISECOND)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Interval:
        """Create an Interval from a number of microseconds."""
        return cls._from_total(microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Interval:
        """Create an Interval from a number of nanoseconds."""
        return cls._from_total(nanoseconds)

    @property
    def seconds(self) -> int:
        """Return the whole seconds component (carries the sign)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the sub-second component.

        This is always in the range [0, 1_000_000_000), even for negative
        intervals.
        """
        return self._nanos

    def to_nanoseconds(self) -> int:
        """Return the exact total in nanoseconds."""
        return total_nanos(self._seconds, self._nanos)

    def to_microseconds(self) -> int:
        """Return the total in whole microseconds, floored."""
        return self.to_nanoseconds() // NANOS_PER_MICROSECOND

    def to_milliseconds(self) -> int:
        """Return the total in whole milliseconds, floored.

        Examples:
            >>> Interval.from_milliseconds(-1).to_milliseconds()
            -1
        """
        return self.to_nanoseconds() // NANOS_PER_MILLISECOND

    def to_seconds(self) -> float:
        """Return the total as fractional seconds.

        Note: This conversion may lose precision for very large values.
        For exact calculations, use to_nanoseconds().

        Examples:
            >>> Interval.from_milliseconds(-500).to_seconds()
            -0.5
        """
        return self._seconds + self._nanos / NANOS_PER_SECOND

    def to_minutes(self) -> float:
        """Return the total as fractional minutes."""
        return self.to_seconds() / SECONDS_PER_MINUTE

    def to_hours(self) -> float:
        """Return the total as fractional hours."""
        return self.to_seconds() / SECONDS_PER_HOUR

    def to_days(self) -> float:
        """Return the total as fractional days."""
        return self.to_seconds() / SECONDS_PER_DAY

    @property
    def is_zero(self) -> bool:
        """Return True if this is a zero-length interval."""
        return self._seconds == 0 and self._nanos == 0

    @property
    def is_negative(self) -> bool:
        """Return True if the total value is below zero.

        The sign is judged on the whole value, not the seconds field alone.
        Because the nanosecond field is never negative, the two agree:
        any negative value has a negative seconds field.

        Examples:
            >>> Interval.from_milliseconds(-1).is_negative
            True
            >>> Interval.zero().is_negative
            False
        """
        return self.to_nanoseconds() < 0

    def add(self, other: Interval) -> Interval:
        """Return the sum of two intervals."""
        return Interval._from_total(self.to_nanoseconds() + other.to_nanoseconds())

    def subtract(self, other: Interval) -> Interval:
        """Return the difference of two intervals."""
        return Interval._from_total(self.to_nanoseconds() - other.to_nanoseconds())

    def multiply(self, factor: int) -> Interval:
        """Scale this interval by an integer factor.

        Examples:
            >>> Interval.from_seconds(30).multiply(3)
            Interval(seconds=90, nanoseconds=0)
        """
        return Interval._from_total(self.to_nanoseconds() * factor)

    def floor_divide(self, divisor: int) -> Interval:
        """Divide this interval by an integer, flooring to the nanosecond.

        Raises:
            ZeroDivisionError: If divisor is zero.

        Examples:
            >>> Interval.from_seconds(100).floor_divide(3)
            Interval(seconds=33, nanoseconds=333333333)
        """
        if divisor == 0:
            raise ZeroDivisionError("integer division or modulo by zero")
        return Interval._from_total(self.to_nanoseconds() // divisor)

    def negate(self) -> Interval:
        """Return the interval with the opposite sign.

        Examples:
            >>> Interval.from_milliseconds(-500).negate()
            Interval(seconds=0, nanoseconds=500000000)
        """
        return Interval._from_total(-self.to_nanoseconds())

    def abs(self) -> Interval:
        """Return the magnitude of this interval.

        Examples:
            >>> Interval.from_milliseconds(-500).abs()
            Interval(seconds=0, nanoseconds=500000000)
        """
        return Interval._from_total(abs(self.to_nanoseconds()))

    def __add__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Interval:
        """Support sum() by handling 0 + Interval."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Interval:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> Interval:
        """Support scalar * Interval."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Interval:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.floor_divide(other)

    def __neg__(self) -> Interval:
        return self.negate()

    def __pos__(self) -> Interval:
        return self

    def __abs__(self) -> Interval:
        return self.abs()

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Order lexicographically on (seconds, nanoseconds).

        Examples:
            >>> Interval.from_milliseconds(-500) < Interval.zero()
            True
        """
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(("Interval", self._seconds, self._nanos))

    def __bool__(self) -> bool:
        """Return True if this is a non-zero interval."""
        return not self.is_zero

    def __repr__(self) -> str:
        return f"Interval(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return a compact human-readable rendering.

        The magnitude is broken into days, hours, minutes and seconds and
        only the nonzero units are written. The seconds unit carries any
        fractional remainder. Negative values get a leading "-".

        Returns:
            String like "2h", "1h30m15.5s", "-0.25s" or "0s".
        """
        if self.is_zero:
            return "0s"

        total = self.to_nanoseconds()
        magnitude = abs(total)
        days, rest = divmod(magnitude, NANOS_PER_DAY)
        hours, rest = divmod(rest, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        secs, frac = divmod(rest, NANOS_PER_SECOND)

        parts: list[str] = []
        if days:
            parts.append(f"{days}d")
        if hours:
            parts.append(f"{hours}h")
        if minutes:
            parts.append(f"{minutes}m")
        if secs or frac:
            text = str(secs)
            if frac:
                text += f".{frac:09d}".rstrip("0")
            parts.append(f"{text}s")

        sign = "-" if total < 0 else ""
        return sign + "".join(parts)


__all__ = ["Interval"]
