"""Date — a calendar day (year, month, day) in ``YYYY-MM-DD`` form.

The wrapped datetime is always 00:00:00 UTC, so a Date carries no time
of day and no zone of its own.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Self

from commontypes.domain.calendar_math import Weekday
from commontypes.domain.clock import Clock
from commontypes.domain.errors import InvalidValue
from commontypes.domain.temporal import TemporalValue, check_date, parse_with_format
from commontypes.domain.zone import utc

DATE_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})"
    r"-(?P<month>0[1-9]|1[0-2])"
    r"-(?P<day>0[1-9]|[12][0-9]|3[01])"
)


class Date(TemporalValue):
    """Immutable calendar date, validated at construction."""

    MONDAY = Weekday.MONDAY
    TUESDAY = Weekday.TUESDAY
    WEDNESDAY = Weekday.WEDNESDAY
    THURSDAY = Weekday.THURSDAY
    FRIDAY = Weekday.FRIDAY
    SATURDAY = Weekday.SATURDAY
    SUNDAY = Weekday.SUNDAY

    @classmethod
    def _normalize(cls, moment: datetime) -> datetime:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)

    @classmethod
    def from_values(cls, year: int, month: int, day: int) -> Self:
        """Build from components.

        Raises ``InvalidValue`` for a year outside [1-9999], a month
        outside [1-12], a day outside [1-31] or past the month's end.
        """
        year, month, day = check_date(year, month, day)
        return cls(datetime(year, month, day, tzinfo=utc()))

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse the canonical ``YYYY-MM-DD`` form."""
        match = DATE_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidValue("value", value, "a date in 'YYYY-MM-DD' format")
        return cls.from_values(int(match["year"]), int(match["month"]), int(match["day"]))

    @classmethod
    def from_format(cls, value: str, pattern: str) -> Self:
        """Parse with a ``strptime`` pattern, e.g. ``"%d/%m/%Y"``.

        Parsed offsets (``%z``) are honoured: the moment is converted to
        UTC before the time of day is dropped.
        """
        return cls(parse_with_format(value, pattern, "date"))

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_datetime(value)

    def is_past(self, *, clock: Clock | None = None) -> bool:
        return self < type(self).today(clock=clock)

    def is_future(self, *, clock: Clock | None = None) -> bool:
        return self > type(self).today(clock=clock)

    def is_today(self, *, clock: Clock | None = None) -> bool:
        return self == type(self).today(clock=clock)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
