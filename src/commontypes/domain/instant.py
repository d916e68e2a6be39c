"""Instant — a point in time, always stored and rendered in UTC.

Canonical form is ATOM-style ``YYYY-MM-DDTHH:MM:SS+00:00``. Whatever
offset an input carries, the stored value is converted to UTC, so two
Instants for the same absolute time compare equal and format the same.
Microseconds are kept (see :meth:`Instant.format` and the accessors) but
are not part of the canonical string.
"""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from typing import Any, Self

from commontypes.domain.clock import Clock, now_utc
from commontypes.domain.date import Date
from commontypes.domain.errors import InvalidValue
from commontypes.domain.temporal import (
    TemporalValue,
    check_date,
    check_range,
    parse_with_format,
)
from commontypes.domain.zone import offset_zone, utc

INSTANT_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})"
    r"-(?P<month>0[1-9]|1[0-2])"
    r"-(?P<day>0[1-9]|[12][0-9]|3[01])"
    r"T(?P<hours>[01][0-9]|2[0-3])"
    r":(?P<minutes>[0-5][0-9])"
    r":(?P<seconds>[0-5][0-9])"
    r"(?P<offset>[+-][0-9]{2}:[0-9]{2})"
)


class Instant(TemporalValue):
    """Immutable UTC date-time with microsecond precision."""

    @classmethod
    def from_values(
        cls,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        microseconds: int = 0,
        zone: tzinfo | None = None,
    ) -> Self:
        """Build from components read in *zone* (default UTC).

        Each out-of-range component raises ``InvalidValue`` naming the
        field and its accepted range.
        """
        check_date(year, month, day)
        check_range("hours", hours, 0, 23)
        check_range("minutes", minutes, 0, 59)
        check_range("seconds", seconds, 0, 59)
        check_range("microseconds", microseconds, 0, 999_999)
        return cls(
            datetime(year, month, day, hours, minutes, seconds, microseconds, tzinfo=zone or utc())
        )

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse ``YYYY-MM-DDTHH:MM:SS±HH:MM``; the offset is required."""
        match = INSTANT_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidValue("value", value, "an instant in 'YYYY-MM-DDTHH:MM:SS±HH:MM' format")
        return cls.from_values(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hours"]),
            int(match["minutes"]),
            int(match["seconds"]),
            zone=offset_zone(match["offset"]),
        )

    @classmethod
    def from_format(cls, value: str, pattern: str, zone: tzinfo | None = None) -> Self:
        """Parse with a ``strptime`` pattern, e.g. ``"%Y-%m-%d %H:%M:%S.%f"``.

        A result without offset is read in *zone* (default UTC); a parsed
        offset (``%z``) takes precedence over *zone*.
        """
        moment = parse_with_format(value, pattern, "instant")
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=zone or utc())
        return cls(moment)

    @classmethod
    def from_timestamp(cls, seconds: float) -> Self:
        """Build from seconds since the Unix epoch."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise InvalidValue("timestamp", seconds, "a number of seconds since 1970-01-01")
        try:
            return cls(datetime.fromtimestamp(seconds, utc()))
        except (OverflowError, OSError, ValueError):
            raise InvalidValue("timestamp", seconds, "within years [1-9999]") from None

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_datetime(value)

    @classmethod
    def now(cls, *, clock: Clock | None = None) -> Self:
        """Current instant, from *clock* or the default clock."""
        return cls(now_utc(clock))

    # --- Transformations ---

    def start_of_day(self) -> Self:
        """00:00:00.000000 of the same UTC day."""
        return type(self)(self.value.replace(hour=0, minute=0, second=0, microsecond=0))

    def end_of_day(self) -> Self:
        """Last representable instant of the same UTC day: 23:59:59.999999."""
        return type(self)(self.value.replace(hour=23, minute=59, second=59, microsecond=999_999))

    def midnight(self) -> Self:
        """Alias of :meth:`end_of_day`: the *end* of the day, not its start."""
        return self.end_of_day()

    def to_date(self) -> Date:
        """The calendar day of this instant (UTC)."""
        return Date.from_values(self.year, self.month, self.day)

    # --- Accessors ---

    @property
    def hour(self) -> int:
        return self.value.hour

    @property
    def minute(self) -> int:
        return self.value.minute

    @property
    def second(self) -> int:
        return self.value.second

    @property
    def microsecond(self) -> int:
        return self.value.microsecond

    # --- Predicates ---

    def is_past(self, *, clock: Clock | None = None) -> bool:
        return self.value < now_utc(clock)

    def is_future(self, *, clock: Clock | None = None) -> bool:
        return self.value > now_utc(clock)

    def is_today(self, *, clock: Clock | None = None) -> bool:
        """Whether this instant lies within today's UTC day, bounds included."""
        start = type(self).today(clock=clock)
        return start <= self <= start.end_of_day()

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}+00:00"
        )
