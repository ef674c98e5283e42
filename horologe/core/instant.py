"""Instant class representing an absolute point in time.

This module provides the Instant class: a count of time since the Unix
epoch (1970-01-01T00:00:00Z) with nanosecond precision.
"""

from __future__ import annotations

from typing import overload

from horologe._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)
from horologe._internal.normalize import normalize, split_nanos, total_nanos
from horologe.clock import SYSTEM_CLOCK, Clock
from horologe.core.interval import Interval


class Instant:
    """An absolute point in time, measured from the Unix epoch.

    Instant shares its representation with Interval: a signed whole-second
    count plus a nanosecond field in [0, 1_000_000_000). The meaning is
    different, though. An Interval is a span; an Instant is a position on
    the UTC timeline. Instants before 1970 have negative seconds.

    Arithmetic follows from that distinction:
    - Instant + Interval -> Instant
    - Instant - Interval -> Instant
    - Instant - Instant -> Interval

    Attributes:
        seconds: Whole seconds since the epoch (floored).
        nanoseconds: Sub-second component [0, 1e9).

    Examples:
        >>> Instant.from_milliseconds(1500)
        Instant(seconds=1, nanoseconds=500000000)

        >>> Instant.from_milliseconds(-1).to_seconds()
        -1

        >>> later = Instant.from_seconds(10)
        >>> later.elapsed_since(Instant.from_seconds(4))
        6000
    """

    __slots__ = ("_seconds", "_nanos")

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        """Create an Instant from a raw (seconds, nanoseconds) pair.

        Args:
            seconds: Whole seconds since the epoch.
            nanoseconds: Nanoseconds, folded into seconds as needed.
        """
        self._seconds, self._nanos = normalize(seconds, nanoseconds)

    @classmethod
    def _from_total(cls, nanos: int) -> Instant:
        seconds, remainder = split_nanos(nanos)
        instance = object.__new__(cls)
        instance._seconds = seconds
        instance._nanos = remainder
        return instance

    @classmethod
    def epoch(cls) -> Instant:
        """Return 1970-01-01T00:00:00Z."""
        return cls()

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant as reported by a clock.

        Args:
            clock: Clock to read. Defaults to the system clock.

        Returns:
            The current Instant.

        Raises:
            ClockError: If the clock cannot be read.

        Examples:
            >>> from horologe.clock import FixedClock
            >>> Instant.now(FixedClock(1_700_000_000, 250))
            Instant(seconds=1700000000, nanoseconds=250)
        """
        source = clock if clock is not None else SYSTEM_CLOCK
        seconds, nanoseconds = source.wall_clock_now()
        return cls(seconds, nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: int) -> Instant:
        """Create an Instant from whole seconds since the epoch."""
        return cls(seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Instant:
        """Create an Instant from milliseconds since the epoch."""
        return cls._from_total(milliseconds * NANOS_PER_MILLISECOND)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Instant:
        """Create an Instant from microseconds since the epoch."""
        return cls._from_total(microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Instant:
        """Create an Instant from nanoseconds since the epoch."""
        return cls._from_total(nanoseconds)

    @property
    def seconds(self) -> int:
        """Return whole seconds since the epoch (floored)."""
        return self._seconds

    @property
    def nanoseconds(self) -> int:
        """Return the sub-second component [0, 1e9)."""
        return self._nanos

    def to_seconds(self) -> int:
        """Return whole seconds since the epoch, floored.

        Examples:
            >>> Instant(-1, 500_000_000).to_seconds()
            -1
        """
        return self._seconds

    def to_milliseconds(self) -> int:
        """Return whole milliseconds since the epoch, floored."""
        return self.to_nanoseconds() // NANOS_PER_MILLISECOND

    def to_microseconds(self) -> int:
        """Return whole microseconds since the epoch, floored."""
        return self.to_nanoseconds() // NANOS_PER_MICROSECOND

    def to_nanoseconds(self) -> int:
        """Return the exact nanosecond count since the epoch."""
        return total_nanos(self._seconds, self._nanos)

    def elapsed_since(self, earlier: Instant) -> int:
        """Return the signed number of milliseconds from `earlier` to self.

        Each side is floored to milliseconds before subtracting.

        Args:
            earlier: The reference instant.

        Returns:
            Milliseconds, negative if `earlier` is actually later.
        """
        return self.to_milliseconds() - earlier.to_milliseconds()

    def duration_since(self, earlier: Instant) -> Interval:
        """Return the exact Interval from `earlier` to self."""
        return Interval.from_nanoseconds(
            self.to_nanoseconds() - earlier.to_nanoseconds()
        )

    def is_after(self, other: Instant) -> bool:
        return self > other

    def is_before(self, other: Instant) -> bool:
        return self < other

    def add(self, interval: Interval) -> Instant:
        """Return the instant shifted forward by an Interval."""
        return Instant._from_total(self.to_nanoseconds() + interval.to_nanoseconds())

    def subtract(self, interval: Interval) -> Instant:
        """Return the instant shifted backward by an Interval."""
        return Instant._from_total(self.to_nanoseconds() - interval.to_nanoseconds())

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> Instant:
        return self.__add__(other)

    @overload
    def __sub__(self, other: Interval) -> Instant: ...

    @overload
    def __sub__(self, other: Instant) -> Interval: ...

    def __sub__(self, other: object) -> Instant | Interval:
        if isinstance(other, Interval):
            return self.subtract(other)
        if isinstance(other, Instant):
            return self.duration_since(other)
        return NotImplemented

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(("Instant", self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Instant(seconds={self._seconds}, nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return the instant in canonical RFC 3339 form (microseconds)."""
        from horologe.core.datetime import DateTime

        return str(DateTime.from_instant(self))


__all__ = ["Instant"]
