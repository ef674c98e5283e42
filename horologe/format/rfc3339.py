"""RFC 3339 formatting and parsing.

RFC 3339 is a profile of ISO 8601 for internet timestamps. Compared with
the general parser in horologe.format.iso8601, it differs in two ways:

1. The emitted form always carries six fractional digits and 'Z'.
2. Parsing requires a full date-time with a 'Z' or '±hh:mm' suffix.

Functions:
    format_rfc3339: Format a DateTime as YYYY-MM-DDThh:mm:ss.ffffffZ.
    parse_rfc3339: Parse a full RFC 3339 timestamp.

Examples:
    >>> from horologe import DateTime
    >>> format_rfc3339(DateTime(2025, 12, 28, 14, 30, 45, 7))
    '2025-12-28T14:30:45.000007Z'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from horologe._internal.fields import pad_micros
from horologe.format.iso8601 import (
    _fail,
    _is_valid_offset,
    date_part,
    parse_iso8601,
    time_part,
)
from horologe.format.outcome import ParseOutcome

if TYPE_CHECKING:
    from horologe.core.datetime import DateTime


def format_rfc3339(value: DateTime) -> str:
    """Format a DateTime at full microsecond precision.

    The fraction is always exactly six digits, so the output parses back
    to an identical DateTime.

    Examples:
        >>> from horologe import DateTime
        >>> format_rfc3339(DateTime(2025, 12, 28, 14, 30, 45))
        '2025-12-28T14:30:45.000000Z'
    """
    return (
        f"{date_part(value)}T{time_part(value)}"
        f".{pad_micros(value.microsecond)}Z"
    )


def parse_rfc3339(s: str) -> ParseOutcome[DateTime]:
    """Parse an RFC 3339 timestamp.

    The general ISO 8601 grammar applies, and in addition the string must
    contain a time and end in 'Z' or a '±hh:mm' offset.

    Examples:
        >>> parse_rfc3339("2025-12-28T14:30:45.000007Z").value
        DateTime(2025, 12, 28, 14, 30, 45, 7)

        >>> parse_rfc3339("2025-12-28T14:30:45").error
        'RFC 3339 requires a time and a UTC offset'
    """
    outcome = parse_iso8601(s)
    if outcome.is_failure:
        return outcome
    if len(s) == 10 or not (s.endswith("Z") or _is_valid_offset(s[-6:])):
        return _fail("RFC 3339 requires a time and a UTC offset", s)
    return outcome


__all__ = ["format_rfc3339", "parse_rfc3339"]
