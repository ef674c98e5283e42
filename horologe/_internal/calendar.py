"""Calendar utilities for Horologe.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic, month lengths, and the conversion between
civil dates and a signed count of days since 1970-01-01.

The day-count transform is purely algebraic. It shifts the year to start
on March 1 so the leap day falls at the end, then decomposes the date into
a 400-year era, a year of the era and a day of the era. Floored division
keeps it valid for any integer year, including year 0 and negative years.

This module is not part of the public API.
"""

from __future__ import annotations

from horologe._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
    EPOCH_DAY_OFFSET,
    EPOCH_WEEKDAY,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2025)  # Not divisible by 4
        False
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Day of year, 1 for January 1st. The count runs from January 1 of
        `year`, with out-of-range fields rolled over as in
        days_from_civil(), so month 13 day 1 gives 366 in a common year.

    Examples:
        >>> day_of_year(2025, 3, 15)
        74
        >>> day_of_year(2024, 3, 15)
        75
        >>> day_of_year(2025, 2, 30)  # Same day as March 2
        61
    """
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a civil date to a signed day count since 1970-01-01.

    Out-of-range fields are not rejected. The month is first folded into
    the year (month 13 is January of the next year, month 0 is December
    of the previous one), then extra days roll into the following months
    (2025-02-30 counts as 2025-03-02).

    Args:
        year: The year (any integer).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        Days since the epoch, negative before 1970-01-01.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(1969, 12, 31)
        -1
        >>> days_from_civil(2000, 3, 1)
        11017
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    # Years start on March 1 so February is the last month
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = (month + 9) % 12
    day_of_shifted_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365
        + year_of_era // 4
        - year_of_era // 100
        + day_of_shifted_year
    )
    return era * DAYS_PER_ERA + day_of_era - EPOCH_DAY_OFFSET


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert a signed day count since 1970-01-01 to a civil date.

    This is the exact inverse of days_from_civil() for valid dates.

    Args:
        days: Days since the epoch (can be negative).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
        >>> civil_from_days(20085)
        (2024, 12, 28)
    """
    z = days + EPOCH_DAY_OFFSET
    era = z // DAYS_PER_ERA
    day_of_era = z - era * DAYS_PER_ERA  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365  # [0, 399]
    day_of_shifted_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_shifted_year + 2) // 153  # [0, 11]
    day = day_of_shifted_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week (Monday=0, Sunday=6) for a day count.

    Examples:
        >>> weekday_from_days(0)  # 1970-01-01 was a Thursday
        3
    """
    return (days + EPOCH_WEEKDAY) % 7


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True if the fields name a real calendar day."""
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "days_from_civil",
    "civil_from_days",
    "weekday_from_days",
    "is_valid_date",
]
