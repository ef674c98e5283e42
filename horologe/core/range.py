"""Range class representing a half-open span between two instants.

This module provides the Range class for [start, end) spans on the UTC
timeline, with containment and overlap queries.
"""

from __future__ import annotations

from horologe.core.instant import Instant
from horologe.core.interval import Interval


class Range:
    """A half-open span of time [start, end) between two Instants.

    The range uses half-open semantics:
    - Start is inclusive (contained in the range)
    - End is exclusive (not contained in the range)

    This makes ranges composable: [a, b) and [b, c) touch without
    overlapping.

    No ordering is enforced between start and end. A range whose end is
    before its start contains nothing and reports a negative duration.

    Attributes:
        start: Start of the range (inclusive).
        end: End of the range (exclusive).

    Examples:
        >>> r = Range(Instant.from_seconds(1000), Instant.from_seconds(2000))
        >>> r.contains(Instant.from_seconds(1500))
        True
        >>> Instant.from_seconds(2000) in r  # End is exclusive
        False
        >>> r.duration_ms()
        1000000
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        self._start = start
        self._end = end

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    @property
    def is_empty(self) -> bool:
        """Return True if no instant satisfies start <= i < end."""
        return self._end <= self._start

    def contains(self, instant: Instant) -> bool:
        """Return True if start <= instant < end."""
        return self._start <= instant < self._end

    def __contains__(self, instant: object) -> bool:
        """Support 'instant in range' syntax."""
        if not isinstance(instant, Instant):
            return False
        return self.contains(instant)

    def duration_ms(self) -> int:
        """Return end minus start in milliseconds.

        Each endpoint is floored to milliseconds first. The result is
        negative when end is before start.
        """
        return self._end.to_milliseconds() - self._start.to_milliseconds()

    def duration(self) -> Interval:
        """Return the exact length of the range as an Interval."""
        return self._end - self._start

    def overlaps(self, other: Range) -> bool:
        """Return True if the two ranges share at least one instant.

        Ranges that only touch at a boundary do not overlap.

        Examples:
            >>> a = Range(Instant.from_seconds(0), Instant.from_seconds(10))
            >>> b = Range(Instant.from_seconds(10), Instant.from_seconds(20))
            >>> a.overlaps(b)
            False
        """
        return self._start < other._end and other._start < self._end

    def intersection(self, other: Range) -> Range | None:
        """Return the overlapping part of two ranges, or None.

        The result is never empty: if no instant lies in both ranges,
        including when either range is reversed, None is returned.

        Examples:
            >>> a = Range(Instant.from_seconds(0), Instant.from_seconds(10))
            >>> b = Range(Instant.from_seconds(5), Instant.from_seconds(20))
            >>> a.intersection(b)
            Range(Instant(seconds=5, nanoseconds=0), Instant(seconds=10, nanoseconds=0))
        """
        result = Range(max(self._start, other._start), min(self._end, other._end))
        if result.is_empty:
            return None
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash(("Range", self._start, self._end))

    def __repr__(self) -> str:
        return f"Range({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        return f"[{self._start}, {self._end})"


__all__ = ["Range"]
