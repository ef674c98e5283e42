"""Normalization of (seconds, nanoseconds) pairs.

Interval and Instant share one representation: a signed whole-second
count plus a sub-second field kept in [0, 1_000_000_000). The true value
is seconds + nanoseconds / 1e9 with floored semantics, so -0.5 seconds is
stored as (-1, 500_000_000).

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.constants import NANOS_PER_SECOND


def normalize(seconds: int, nanoseconds: int) -> tuple[int, int]:
    """Fold any nanosecond overflow or underflow into the seconds field.

    Args:
        seconds: Raw seconds (any sign).
        nanoseconds: Raw nanoseconds (any sign, any magnitude).

    Returns:
        Tuple of (seconds, nanoseconds) with 0 <= nanoseconds < 1e9.

    Examples:
        >>> normalize(0, 1_500_000_000)
        (1, 500000000)
        >>> normalize(0, -500_000_000)
        (-1, 500000000)
    """
    extra = nanoseconds // NANOS_PER_SECOND
    remainder = nanoseconds - extra * NANOS_PER_SECOND
    return (seconds + extra, remainder)


def split_nanos(total: int) -> tuple[int, int]:
    """Split a total nanosecond count into a normalized pair."""
    return normalize(0, total)


def total_nanos(seconds: int, nanoseconds: int) -> int:
    """Return the exact value of a pair in nanoseconds."""
    return seconds * NANOS_PER_SECOND + nanoseconds


__all__ = ["normalize", "split_nanos", "total_nanos"]
