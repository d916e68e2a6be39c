"""TemporalValue — shared machinery for the Date and Instant value types.

Both types wrap a single timezone-aware ``datetime`` that is converted
to the shared UTC zone at construction. Subclasses decide how the value
is normalized further (Date floors to midnight) and how it renders.

INVARIANT: ``value`` is always aware and expressed in UTC. Instances are
frozen; every transformation returns a new instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Self

from commontypes.domain.calendar_math import (
    Weekday,
    day_of_week,
    day_of_year,
    days_in_month,
    iso_week,
    weekday_this_week,
)
from commontypes.domain.clock import Clock, now_utc
from commontypes.domain.contract import ValueObject
from commontypes.domain.errors import InvalidValue
from commontypes.domain.relative import Modifier, PreviousWeekday, apply_modifiers
from commontypes.domain.zone import utc

EPOCH = datetime(1970, 1, 1, tzinfo=utc())

MIN_YEAR = 1
MAX_YEAR = 9999

# One strftime directive; ``%%`` is matched as a unit so ``%%Y`` stays literal.
_DIRECTIVE = re.compile(r"%.")


def check_range(field: str, value: Any, low: int, high: int) -> int:
    """Return *value* if it is an int within ``[low, high]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValue(field, value, f"an integer between [{low}-{high}]")
    if not low <= value <= high:
        raise InvalidValue(field, value, f"between [{low}-{high}]")
    return value


def check_date(year: Any, month: Any, day: Any) -> tuple[int, int, int]:
    """Validate calendar components, rejecting days the month lacks."""
    check_range("year", year, MIN_YEAR, MAX_YEAR)
    check_range("month", month, 1, 12)
    check_range("day", day, 1, 31)
    last_day = days_in_month(year, month)
    if day > last_day:
        raise InvalidValue("day", day, f"between [1-{last_day}] for {year:04d}-{month:02d}")
    return year, month, day


def parse_with_format(value: Any, pattern: str, type_name: str) -> datetime:
    """``strptime`` *value* with *pattern*, raising ``InvalidValue``.

    Fields the pattern leaves out take strptime's defaults
    (1900-01-01 00:00:00.000000). The whole input must be consumed.
    """
    if not isinstance(value, str) or not isinstance(pattern, str):
        raise InvalidValue("value", value, f"a {type_name} string matching {pattern!r}")
    try:
        return datetime.strptime(value, pattern)
    except ValueError:
        raise InvalidValue("value", value, f"a valid {type_name} matching {pattern!r}") from None


@dataclass(frozen=True, order=True, repr=False)
class TemporalValue(ValueObject):
    """Base class wrapping an aware UTC ``datetime``."""

    value: datetime

    def __post_init__(self) -> None:
        moment = self.value
        if not isinstance(moment, datetime):
            raise TypeError(f"{type(self).__name__} wraps a datetime, got {type(moment).__name__}")
        if moment.tzinfo is None or moment.utcoffset() is None:
            moment = moment.replace(tzinfo=utc())
        try:
            moment = moment.astimezone(utc())
        except OverflowError:
            raise InvalidValue("year", moment.year, "between [1-9999] once converted to UTC") from None
        object.__setattr__(self, "value", self._normalize(moment))

    @classmethod
    def _normalize(cls, moment: datetime) -> datetime:
        return moment

    @classmethod
    def _from_day(cls, day: date) -> Self:
        return cls(datetime(day.year, day.month, day.day, tzinfo=utc()))

    # --- Factories shared by Date and Instant ---

    @classmethod
    def from_datetime(cls, moment: datetime | date) -> Self:
        """Wrap a ``datetime`` or ``date``; naive values are read as UTC."""
        if isinstance(moment, datetime):
            return cls(moment)
        if isinstance(moment, date):
            return cls._from_day(moment)
        raise InvalidValue("value", moment, "a datetime or date")

    @classmethod
    def today(cls, zone: tzinfo | None = None, *, clock: Clock | None = None) -> Self:
        """Today's calendar day (as seen in *zone*, default UTC) at 00:00 UTC."""
        return cls._from_day(_local_today(zone, clock))

    @classmethod
    def yesterday(cls, zone: tzinfo | None = None, *, clock: Clock | None = None) -> Self:
        return cls._from_day(_local_today(zone, clock) - timedelta(days=1))

    @classmethod
    def tomorrow(cls, zone: tzinfo | None = None, *, clock: Clock | None = None) -> Self:
        return cls._from_day(_local_today(zone, clock) + timedelta(days=1))

    @classmethod
    def this_week(cls, weekday: int, *, clock: Clock | None = None) -> Self:
        """*weekday* of the current Monday..Sunday week (past or future)."""
        return cls._from_day(weekday_this_week(_local_today(None, clock), weekday))

    @classmethod
    def last(cls, weekday: int, *, clock: Clock | None = None) -> Self:
        """Closest *weekday* strictly before today.

        Today itself is never returned: on a Monday, ``last(MONDAY)`` is
        the Monday one week earlier.
        """
        return cls.today(clock=clock).modify(PreviousWeekday(Weekday(weekday)))

    @classmethod
    def monday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.MONDAY, clock=clock)

    @classmethod
    def tuesday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.TUESDAY, clock=clock)

    @classmethod
    def wednesday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.WEDNESDAY, clock=clock)

    @classmethod
    def thursday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.THURSDAY, clock=clock)

    @classmethod
    def friday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.FRIDAY, clock=clock)

    @classmethod
    def saturday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.SATURDAY, clock=clock)

    @classmethod
    def sunday_this_week(cls, *, clock: Clock | None = None) -> Self:
        return cls.this_week(Weekday.SUNDAY, clock=clock)

    @classmethod
    def last_monday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.MONDAY, clock=clock)

    @classmethod
    def last_tuesday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.TUESDAY, clock=clock)

    @classmethod
    def last_wednesday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.WEDNESDAY, clock=clock)

    @classmethod
    def last_thursday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.THURSDAY, clock=clock)

    @classmethod
    def last_friday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.FRIDAY, clock=clock)

    @classmethod
    def last_saturday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.SATURDAY, clock=clock)

    @classmethod
    def last_sunday(cls, *, clock: Clock | None = None) -> Self:
        return cls.last(Weekday.SUNDAY, clock=clock)

    # --- Transformations ---

    def modify(self, modifier: str | Modifier) -> Self:
        """Return a new instance with *modifier* applied (see ``relative``)."""
        return type(self)(apply_modifiers(self.value, modifier))

    # --- Accessors ---

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def day_of_week(self) -> int:
        """ISO day of the week, Monday = 1 ... Sunday = 7."""
        return day_of_week(self.year, self.month, self.day)

    @property
    def day_of_year(self) -> int:
        return day_of_year(self.year, self.month, self.day)

    @property
    def week(self) -> int:
        """ISO-8601 week number."""
        return iso_week(self.year, self.month, self.day)

    def timestamp(self) -> int:
        """Whole seconds since the Unix epoch (floored)."""
        return (self.value - EPOCH) // timedelta(seconds=1)

    def to_datetime(self) -> datetime:
        return self.value

    def format(self, pattern: str) -> str:
        """Render with a ``strftime`` pattern.

        ``%Y`` is always four digits (``0007``), whatever the platform's
        ``strftime`` does for years below 1000.
        """
        year = f"{self.year:04d}"
        padded = _DIRECTIVE.sub(lambda m: year if m.group() == "%Y" else m.group(), pattern)
        return self.value.strftime(padded)

    def serialize(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"


def _local_today(zone: tzinfo | None, clock: Clock | None) -> date:
    return now_utc(clock).astimezone(zone or utc()).date()
