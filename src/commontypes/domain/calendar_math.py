"""Proleptic Gregorian calendar arithmetic shared by Date and Instant.

Pure functions over ``(year, month, day)`` triples plus the
relative-weekday resolver. Nothing here validates its input: callers
check ranges before these functions run, and out-of-range components
give unspecified results.

Weekdays follow ISO-8601: Monday = 1 ... Sunday = 7.
"""

from __future__ import annotations

from datetime import date, timedelta
from enum import IntEnum

_DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class Weekday(IntEnum):
    """ISO-8601 day of the week."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def parse(cls, name: str) -> Weekday:
        """Look up a weekday by full name or three-letter abbreviation.

        Matching is case-insensitive: ``"monday"``, ``"Mon"``, ``"MON"``.
        Raises ``ValueError`` for anything else.
        """
        key = name.strip().upper()
        for member in cls:
            if key in (member.name, member.name[:3]):
                return member
        raise ValueError(f"Unknown weekday: {name!r}")


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year* (28..31)."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based day of the year (1..366)."""
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return _DAYS_BEFORE_MONTH[month - 1] + leap_day + day


def ordinal(year: int, month: int, day: int) -> int:
    """Days since 0001-01-01, which is day 1 (a Monday)."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + day_of_year(year, month, day)


def day_of_week(year: int, month: int, day: int) -> int:
    """ISO day of the week (Monday = 1 ... Sunday = 7)."""
    return (ordinal(year, month, day) - 1) % 7 + 1


def _weeks_in_year(year: int) -> int:
    # A year has 53 ISO weeks when it starts on a Thursday, or on a
    # Wednesday in a leap year.
    def jan1_shift(y: int) -> int:
        return (y + y // 4 - y // 100 + y // 400) % 7

    if jan1_shift(year) == 4 or jan1_shift(year - 1) == 3:
        return 53
    return 52


def iso_week(year: int, month: int, day: int) -> int:
    """ISO-8601 week number (1..53).

    Week 1 is the week holding the year's first Thursday. Early January
    days may belong to the last week of the previous year, and late
    December days to week 1 of the next one.
    """
    week = (day_of_year(year, month, day) - day_of_week(year, month, day) + 10) // 7
    if week < 1:
        return _weeks_in_year(year - 1)
    if week > _weeks_in_year(year):
        return 1
    return week


def iso_year(year: int, month: int, day: int) -> int:
    """The ISO week-numbering year the date belongs to."""
    week = iso_week(year, month, day)
    if month == 1 and week >= 52:
        return year - 1
    if month == 12 and week == 1:
        return year + 1
    return year


# --- Relative-weekday resolver ---


def _dow(day: date) -> int:
    return day_of_week(day.year, day.month, day.day)


def previous_weekday(day: date, weekday: int) -> date:
    """Nearest date strictly before *day* falling on *weekday*."""
    back = (_dow(day) - weekday - 1) % 7 + 1
    return day - timedelta(days=back)


def next_weekday(day: date, weekday: int) -> date:
    """Nearest date strictly after *day* falling on *weekday*."""
    ahead = (weekday - _dow(day) - 1) % 7 + 1
    return day + timedelta(days=ahead)


def weekday_this_week(day: date, weekday: int) -> date:
    """The date falling on *weekday* in *day*'s Monday-to-Sunday week."""
    return day + timedelta(days=weekday - _dow(day))
