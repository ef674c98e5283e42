"""Internal utilities for Horologe.

This module contains private implementation details:
    - Constants and calendar tables
    - Calendar arithmetic (leap years, day counts)
    - (seconds, nanoseconds) normalization
    - Field padding and comparison helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.calendar import (
    civil_from_days,
    day_of_year,
    days_from_civil,
    days_in_month,
    is_leap_year,
)
from horologe._internal.normalize import normalize

__all__: list[str] = [
    "civil_from_days",
    "day_of_year",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "normalize",
]
