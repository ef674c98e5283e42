"""Core temporal types.

This module provides the fundamental temporal types:
    - Interval: Signed span of elapsed time with nanosecond precision
    - Instant: Absolute point in time since the Unix epoch
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with microsecond precision
    - DateTime: UTC calendar date and time
    - Range: Half-open span between two instants [start, end)
"""

from __future__ import annotations

from horologe.core.interval import Interval
from horologe.core.instant import Instant
from horologe.core.date import Date
from horologe.core.time import Time
from horologe.core.datetime import DateTime
from horologe.core.range import Range

__all__: list[str] = [
    "Interval",
    "Instant",
    "Date",
    "Time",
    "DateTime",
    "Range",
]
