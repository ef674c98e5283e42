"""Internal constants for Horologe.

These constants define the unit conversions and calendar tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
MICROS_PER_SECOND: int = 1_000_000
MILLIS_PER_SECOND: int = 1_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

NANOS_PER_MINUTE: int = SECONDS_PER_MINUTE * NANOS_PER_SECOND
NANOS_PER_HOUR: int = SECONDS_PER_HOUR * NANOS_PER_SECOND
NANOS_PER_DAY: int = SECONDS_PER_DAY * NANOS_PER_SECOND

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Days in a 400-year Gregorian cycle
DAYS_PER_ERA: int = 146_097

# Days from 0000-03-01 to 1970-01-01
EPOCH_DAY_OFFSET: int = 719_468

# 1970-01-01 was a Thursday (Monday=0)
EPOCH_WEEKDAY: int = 3

# Placeholder date used when parsing bare times
EPOCH_DATE_PREFIX: str = "1970-01-01T"


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "MICROS_PER_SECOND",
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "DAYS_PER_ERA",
    "EPOCH_DAY_OFFSET",
    "EPOCH_WEEKDAY",
    "EPOCH_DATE_PREFIX",
]
