"""Field helpers shared by Date, Time and DateTime.

Date, Time and DateTime are independent types. Behaviour they have in
common (zero padding and ordering) lives here as free functions over
explicit field tuples rather than in a base class.

This module is not part of the public API.
"""

from __future__ import annotations


def pad_year(year: int) -> str:
    """Zero-pad a year to at least four digits.

    Wider years pass through unmodified. Negative years keep the sign in
    front of a four-digit padded magnitude.

    Examples:
        >>> pad_year(2025)
        '2025'
        >>> pad_year(33)
        '0033'
        >>> pad_year(12345)
        '12345'
        >>> pad_year(-44)
        '-0044'
    """
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def pad2(value: int) -> str:
    """Zero-pad a field to two digits."""
    return f"{value:02d}"


def pad_micros(microsecond: int) -> str:
    """Zero-pad a microsecond field to six digits."""
    return f"{microsecond:06d}"


def compare_fields(left: tuple[int, ...], right: tuple[int, ...]) -> int:
    """Compare two field tuples lexicographically.

    Returns:
        -1, 0 or 1 as left is less than, equal to or greater than right.
    """
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


__all__ = [
    "pad_year",
    "pad2",
    "pad_micros",
    "compare_fields",
]
