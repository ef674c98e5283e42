"""Temporal formatting and parsing.

This module provides functions for converting DateTime values to and from
strings:
    - ISO 8601 fixed-layout formatting and strict parsing
    - RFC 3339 full-precision formatting and parsing
    - A configurable Formatter

Parse functions never raise for bad input; they return a ParseOutcome.

Examples:
    >>> from horologe import DateTime
    >>> from horologe.format import parse_iso8601, format_rfc3339

    >>> outcome = parse_iso8601("2025-12-28T14:30:45Z")
    >>> outcome.value.year
    2025

    >>> format_rfc3339(DateTime(2025, 12, 28, 14, 30, 45))
    '2025-12-28T14:30:45.000000Z'
"""

from __future__ import annotations

from horologe.format.formatter import Formatter, FormatterConfig
from horologe.format.iso8601 import (
    format_date,
    format_epoch_seconds,
    format_human,
    format_iso8601,
    format_iso8601_millis,
    format_time,
    format_time_micros,
    parse_date,
    parse_iso8601,
    parse_time,
)
from horologe.format.outcome import ParseOutcome
from horologe.format.rfc3339 import format_rfc3339, parse_rfc3339

__all__: list[str] = [
    # ISO 8601
    "format_iso8601",
    "format_iso8601_millis",
    "format_date",
    "format_time",
    "format_time_micros",
    "format_epoch_seconds",
    "format_human",
    "parse_iso8601",
    "parse_date",
    "parse_time",
    # RFC 3339
    "format_rfc3339",
    "parse_rfc3339",
    # Configurable
    "Formatter",
    "FormatterConfig",
    "ParseOutcome",
]
