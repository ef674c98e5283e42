"""Clock capability consumed by now()-style constructors.

Horologe never reads the host clock directly from its value types.
Instead, Instant.now() and DateTime.now() accept any object satisfying
the Clock protocol, which makes deterministic tests a matter of passing
a FixedClock.

Classes:
    Clock: Protocol for wall-clock and monotonic readings.
    SystemClock: Production clock backed by the time module.
    FixedClock: Deterministic, manually advanced clock for tests.
"""

from __future__ import annotations

import logging
import time
from typing import Protocol, runtime_checkable

from horologe._internal.constants import NANOS_PER_SECOND
from horologe._internal.normalize import normalize, total_nanos
from horologe.core.interval import Interval
from horologe.errors import ClockError

logger = logging.getLogger(__name__)


@runtime_checkable
class Clock(Protocol):
    """Source of the current time.

    Both reads are expected to be atomic, thread-safe and non-blocking.
    Callers neither retry nor cache them.
    """

    def wall_clock_now(self) -> tuple[int, int]:
        """Return (epoch_seconds, nanosecond_offset) since 1970-01-01 UTC.

        The nanosecond offset is in [0, 999_999_999].
        """
        ...

    def monotonic_now_nanoseconds(self) -> int:
        """Return a non-decreasing nanosecond reading with arbitrary origin."""
        ...


class SystemClock:
    """Production clock wrapping ``time.time_ns()`` and ``time.monotonic_ns()``.

    Satisfies Clock via structural subtyping. Host failures surface as
    ClockError.
    """

    def wall_clock_now(self) -> tuple[int, int]:
        try:
            nanos = time.time_ns()
        except OSError as exc:
            logger.error("wall clock read failed: %s", exc)
            raise ClockError(f"wall clock unavailable: {exc}") from exc
        return divmod(nanos, NANOS_PER_SECOND)

    def monotonic_now_nanoseconds(self) -> int:
        try:
            return time.monotonic_ns()
        except OSError as exc:
            logger.error("monotonic clock read failed: %s", exc)
            raise ClockError(f"monotonic clock unavailable: {exc}") from exc

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock that only moves when told to.

    The wall and monotonic readings advance together. The monotonic
    reading starts at zero.

    Examples:
        >>> clock = FixedClock(1_700_000_000)
        >>> clock.wall_clock_now()
        (1700000000, 0)
        >>> clock.advance_nanoseconds(1_500_000_000)
        >>> clock.wall_clock_now()
        (1700000001, 500000000)
        >>> clock.monotonic_now_nanoseconds()
        1500000000
    """

    def __init__(self, seconds: int = 0, nanoseconds: int = 0) -> None:
        self._seconds, self._nanos = normalize(seconds, nanoseconds)
        self._monotonic = 0

    def wall_clock_now(self) -> tuple[int, int]:
        return (self._seconds, self._nanos)

    def monotonic_now_nanoseconds(self) -> int:
        return self._monotonic

    def set(self, seconds: int, nanoseconds: int = 0) -> None:
        """Jump the wall clock. The monotonic reading is left alone."""
        self._seconds, self._nanos = normalize(seconds, nanoseconds)

    def advance_nanoseconds(self, nanoseconds: int) -> None:
        """Move both readings forward.

        Raises:
            ValueError: If nanoseconds is negative.
        """
        if nanoseconds < 0:
            raise ValueError(f"cannot move a clock backwards, got {nanoseconds}")
        self._seconds, self._nanos = normalize(
            0, total_nanos(self._seconds, self._nanos) + nanoseconds
        )
        self._monotonic += nanoseconds

    def advance(self, interval: Interval) -> None:
        """Move both readings forward by an Interval."""
        self.advance_nanoseconds(interval.to_nanoseconds())

    def __repr__(self) -> str:
        return f"FixedClock(seconds={self._seconds}, nanoseconds={self._nanos})"


SYSTEM_CLOCK: Clock = SystemClock()


__all__ = ["Clock", "SystemClock", "FixedClock", "SYSTEM_CLOCK"]
