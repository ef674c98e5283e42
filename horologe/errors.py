"""Horologe exception hierarchy.

All Horologe-specific exceptions inherit from HorologeError.
"""

from __future__ import annotations


class HorologeError(Exception):
    """Base exception for all Horologe errors."""

    pass


class ValidationError(HorologeError):
    """Invalid configuration or input values.

    Typed value constructors never raise this; it is reserved for
    settings objects that cannot work with the values given.

    Examples:
        - A formatter separator that is not exactly one character
    """

    pass


class ParseError(HorologeError):
    """Failed to parse a string or serialized representation.

    The parse functions themselves report failures through ParseOutcome.
    This exception is raised when a caller asks for the value of a failed
    outcome, or by the raising conveniences built on top of them.

    Examples:
        - Month outside 1-12 in "2025-13-01"
        - Missing 'T' separator between date and time
        - Unknown "_type" tag in a JSON payload
    """

    pass


class ClockError(HorologeError):
    """The host clock could not be read.

    Raised from now()-style constructors when the underlying clock
    query fails. No retry is attempted.
    """

    pass


__all__ = [
    "HorologeError",
    "ValidationError",
    "ParseError",
    "ClockError",
]
