"""Temporal conversion utilities.

This module provides functions for converting Horologe values to and from
other representations:
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds, nanoseconds)

Examples:
    >>> from horologe import DateTime
    >>> from horologe.convert import to_json, from_json

    >>> dt = DateTime(2025, 12, 28, 14, 30, 45)
    >>> from_json(to_json(dt)) == dt
    True
"""

from __future__ import annotations

from horologe.convert.epoch import (
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)
from horologe.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_nanos",
    "from_unix_nanos",
]
