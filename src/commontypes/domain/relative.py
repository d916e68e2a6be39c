"""Relative modifiers applied by ``Date.modify()`` and ``Instant.modify()``.

Modifiers are explicit closed-form operations:

- :class:`Shift`: add a signed amount of a calendar/clock unit.
- :class:`PreviousWeekday` / :class:`NextWeekday`: nearest occurrence of
  a weekday strictly before/after the current day.
- :class:`WeekdayThisWeek`: the weekday inside the current Monday..Sunday
  week.

:func:`parse_modifier` accepts a closed textual grammar for the same
operations, one or more clauses separated by whitespace::

    "+1 day"   "-2 weeks"   "+3 months +1 day"
    "previous monday"   "last fri"   "next sunday"   "monday this week"

Anything outside that grammar is rejected with ``InvalidValue``.

Weekday modifiers reset the time of day to 00:00:00. Month and year
shifts clamp the day to the last day of the target month
(2020-01-31 + 1 month = 2020-02-29).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

from commontypes.domain.calendar_math import (
    Weekday,
    days_in_month,
    next_weekday,
    previous_weekday,
    weekday_this_week,
)
from commontypes.domain.errors import InvalidValue


class Unit(StrEnum):
    """Units accepted by :class:`Shift`."""

    MICROSECOND = "microsecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


_FIXED_UNITS: dict[Unit, timedelta] = {
    Unit.MICROSECOND: timedelta(microseconds=1),
    Unit.SECOND: timedelta(seconds=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.DAY: timedelta(days=1),
    Unit.WEEK: timedelta(weeks=1),
}

_UNIT_ALIASES: dict[str, Unit] = {
    "usec": Unit.MICROSECOND,
    "sec": Unit.SECOND,
    "min": Unit.MINUTE,
    **{unit.value: unit for unit in Unit},
}


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _shift_months(moment: datetime, months: int) -> datetime:
    index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if not 1 <= year <= 9999:
        raise OverflowError("date value out of range")
    return moment.replace(year=year, month=month, day=min(moment.day, days_in_month(year, month)))


@dataclass(frozen=True)
class Shift:
    """Add ``amount`` ``unit``\\s (negative amounts move backwards)."""

    amount: int
    unit: Unit

    def apply(self, moment: datetime) -> datetime:
        if self.unit is Unit.MONTH:
            return _shift_months(moment, self.amount)
        if self.unit is Unit.YEAR:
            return _shift_months(moment, self.amount * 12)
        return moment + self.amount * _FIXED_UNITS[self.unit]


@dataclass(frozen=True)
class PreviousWeekday:
    """Nearest *weekday* strictly before the current day, at 00:00."""

    weekday: Weekday

    def apply(self, moment: datetime) -> datetime:
        day = previous_weekday(moment.date(), self.weekday)
        return _midnight(moment).replace(year=day.year, month=day.month, day=day.day)


@dataclass(frozen=True)
class NextWeekday:
    """Nearest *weekday* strictly after the current day, at 00:00."""

    weekday: Weekday

    def apply(self, moment: datetime) -> datetime:
        day = next_weekday(moment.date(), self.weekday)
        return _midnight(moment).replace(year=day.year, month=day.month, day=day.day)


@dataclass(frozen=True)
class WeekdayThisWeek:
    """*weekday* within the current Monday..Sunday week, at 00:00."""

    weekday: Weekday

    def apply(self, moment: datetime) -> datetime:
        day = weekday_this_week(moment.date(), self.weekday)
        return _midnight(moment).replace(year=day.year, month=day.month, day=day.day)


Modifier = Shift | PreviousWeekday | NextWeekday | WeekdayThisWeek

_WEEKDAY = r"(?P<{name}>[a-z]+)"
_CLAUSE = re.compile(
    r"(?P<shift>(?P<sign>[+-]?)\s*(?P<amount>[0-9]+)\s*(?P<unit>[a-z]+?)s?)(?=\s|$)"
    r"|(?:previous|last)\s+" + _WEEKDAY.format(name="previous") + r"(?=\s|$)"
    r"|next\s+" + _WEEKDAY.format(name="next") + r"(?=\s|$)"
    r"|" + _WEEKDAY.format(name="this_week") + r"\s+this\s+week(?=\s|$)",
)


def _weekday(name: str, text: str) -> Weekday:
    try:
        return Weekday.parse(name)
    except ValueError:
        raise InvalidValue("modifier", text, "a known weekday name") from None


def parse_modifier(text: str) -> tuple[Modifier, ...]:
    """Parse a textual modifier into closed-form operations.

    Raises ``InvalidValue`` when any part of *text* falls outside the
    grammar documented in this module.
    """
    if not isinstance(text, str):
        raise InvalidValue("modifier", text, "a modifier string")
    normalized = text.strip().lower()
    if not normalized:
        raise InvalidValue("modifier", text, "a non-empty modifier")

    modifiers: list[Modifier] = []
    pos = 0
    while pos < len(normalized):
        if normalized[pos].isspace():
            pos += 1
            continue
        match = _CLAUSE.match(normalized, pos)
        if match is None:
            raise InvalidValue(
                "modifier",
                text,
                "'±N unit', 'previous <weekday>', 'next <weekday>' or '<weekday> this week'",
            )
        if match["shift"]:
            unit = _UNIT_ALIASES.get(match["unit"])
            if unit is None:
                raise InvalidValue("modifier", text, f"a unit among {', '.join(Unit)}")
            amount = int(match["amount"])
            modifiers.append(Shift(-amount if match["sign"] == "-" else amount, unit))
        elif match["previous"]:
            modifiers.append(PreviousWeekday(_weekday(match["previous"], text)))
        elif match["next"]:
            modifiers.append(NextWeekday(_weekday(match["next"], text)))
        else:
            modifiers.append(WeekdayThisWeek(_weekday(match["this_week"], text)))
        pos = match.end()
    return tuple(modifiers)


def apply_modifiers(moment: datetime, modifier: str | Modifier) -> datetime:
    """Apply *modifier* (a modifier object or textual grammar) to *moment*.

    Raises ``InvalidValue`` if the result leaves the supported year range.
    """
    modifiers = parse_modifier(modifier) if isinstance(modifier, str) else (modifier,)
    try:
        for step in modifiers:
            moment = step.apply(moment)
    except OverflowError:
        raise InvalidValue("year", modifier, "between [1-9999] after modification") from None
    return moment
