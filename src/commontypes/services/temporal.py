"""TemporalService — parse, inspect, resolve, and shift dates and instants.

Each method returns a :class:`ServiceResult`; an ``InvalidValue`` raised
by a value type becomes a failed result with code ``INVALID_VALUE``.
"""

from __future__ import annotations

import re
from typing import Any, Literal

from commontypes.domain.calendar_math import Weekday
from commontypes.domain.date import Date
from commontypes.domain.errors import InvalidValue
from commontypes.domain.instant import Instant
from commontypes.domain.integers import Age, Count, Duration
from commontypes.domain.relative import Shift, Unit, parse_modifier
from commontypes.domain.zone import offset_zone
from commontypes.services.base import BaseService
from commontypes.services.result import ServiceResult

# Plain ASCII decimal, optional minus sign. No spaces, underscores or "+".
_INT_LITERAL = re.compile(r"-?[0-9]+")

Kind = Literal["date", "instant"]
Relative = Literal["today", "yesterday", "tomorrow"]

_TYPES: dict[str, type[Date] | type[Instant]] = {"date": Date, "instant": Instant}
_CHECKABLE: dict[str, Any] = {
    "date": Date,
    "instant": Instant,
    "age": Age,
    "count": Count,
    "duration": Duration,
}


def describe_date(value: Date | Instant, display_format: str | None = None) -> dict[str, Any]:
    """Calendar fields shared by both temporal types."""
    data: dict[str, Any] = {
        "value": value.serialize(),
        "year": value.year,
        "month": value.month,
        "day": value.day,
        "day_of_week": value.day_of_week,
        "weekday": Weekday(value.day_of_week).name.title(),
        "day_of_year": value.day_of_year,
        "week": value.week,
        "timestamp": value.timestamp(),
    }
    if display_format:
        data["formatted"] = value.format(display_format)
    return data


def describe_instant(value: Instant, display_format: str | None = None) -> dict[str, Any]:
    data = describe_date(value, display_format)
    data.update(
        date=value.to_date().serialize(),
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        microsecond=value.microsecond,
    )
    return data


def _clamp_warnings(original: Date | Instant, shifted: Date | Instant, modifier: str) -> list[str]:
    """Note when a pure month/year shift landed on an earlier day of the month."""
    clauses = parse_modifier(modifier)
    calendar_only = all(
        isinstance(c, Shift) and c.unit in (Unit.MONTH, Unit.YEAR) for c in clauses
    )
    if calendar_only and shifted.day < original.day:
        return [f"day {original.day} clamped to {shifted.day}, the last day of the month"]
    return []


class TemporalService(BaseService):
    """Service-layer facade over the Date and Instant value types."""

    def _describe(self, value: Date | Instant, display_format: str | None) -> dict[str, Any]:
        if isinstance(value, Instant):
            return describe_instant(value, display_format)
        return describe_date(value, display_format)

    def parse(
        self,
        kind: Kind,
        value: str,
        *,
        pattern: str | None = None,
        offset: str | None = None,
        display_format: str | None = None,
    ) -> ServiceResult:
        """Parse *value* as a date or instant (canonical form or *pattern*)."""
        op = f"parse_{kind}"
        try:
            if kind == "date":
                parsed: Date | Instant = (
                    Date.from_format(value, pattern) if pattern else Date.from_string(value)
                )
            elif pattern:
                zone = offset_zone(offset) if offset else None
                parsed = Instant.from_format(value, pattern, zone)
            else:
                parsed = Instant.from_string(value)
        except InvalidValue as exc:
            return self._invalid(op, exc)
        return ServiceResult.success(op, self._describe(parsed, display_format))

    def relative_day(
        self,
        kind: Kind,
        which: Relative,
        *,
        offset: str | None = None,
        display_format: str | None = None,
    ) -> ServiceResult:
        """Today, yesterday, or tomorrow according to the service clock."""
        op = f"{kind}_{which}"
        try:
            zone = offset_zone(offset) if offset else self._zone
        except InvalidValue as exc:
            return self._invalid(op, exc)
        factory = getattr(_TYPES[kind], which)
        value = factory(zone, clock=self._clock)
        return ServiceResult.success(
            op, self._describe(value, display_format), meta=self._clock_meta(zone)
        )

    def now(self, *, display_format: str | None = None) -> ServiceResult:
        value = Instant.now(clock=self._clock)
        return ServiceResult.success(
            "instant_now", describe_instant(value, display_format), meta=self._clock_meta()
        )

    def weekday(
        self,
        kind: Kind,
        name: str,
        *,
        mode: Literal["this_week", "last"],
        display_format: str | None = None,
    ) -> ServiceResult:
        """Resolve a named weekday in this week, or its last occurrence."""
        op = f"{kind}_{mode}"
        try:
            weekday = Weekday.parse(name)
        except ValueError:
            return self._invalid(op, InvalidValue("weekday", name, "a weekday name"))
        cls = _TYPES[kind]
        if mode == "this_week":
            value = cls.this_week(weekday, clock=self._clock)
        else:
            value = cls.last(weekday, clock=self._clock)
        return ServiceResult.success(
            op, self._describe(value, display_format), meta=self._clock_meta()
        )

    def shift(
        self,
        kind: Kind,
        value: str,
        modifier: str,
        *,
        display_format: str | None = None,
    ) -> ServiceResult:
        """Apply a textual modifier to a canonical date or instant."""
        op = f"shift_{kind}"
        try:
            original = _TYPES[kind].from_string(value)
            shifted = original.modify(modifier)
        except InvalidValue as exc:
            return self._invalid(op, exc)
        data = self._describe(shifted, display_format)
        data["original"] = original.serialize()
        data["modifier"] = modifier
        warnings = _clamp_warnings(original, shifted, modifier)
        return ServiceResult.success(op, data, warnings=warnings)

    def end_of_day(self, value: str, *, display_format: str | None = None) -> ServiceResult:
        """Last instant (23:59:59.999999) of the instant's UTC day."""
        try:
            end = Instant.from_string(value).end_of_day()
        except InvalidValue as exc:
            return self._invalid("end_of_day", exc)
        data = describe_instant(end, display_format)
        data["precise"] = end.format("%Y-%m-%d %H:%M:%S.%f")
        return ServiceResult.success("end_of_day", data)

    def check(self, kind: str, value: str) -> ServiceResult:
        """Report whether *value* is valid for the value type *kind*.

        Integer kinds read *value* as a decimal literal first.
        """
        cls = _CHECKABLE.get(kind)
        if cls is None:
            return self._invalid(
                "check", InvalidValue("kind", kind, f"one of {', '.join(_CHECKABLE)}")
            )
        raw: Any = value
        if int in cls.raw_types and _INT_LITERAL.fullmatch(value):
            raw = int(value)
        return ServiceResult.success(
            "check", {"kind": kind, "value": value, "valid": cls.is_valid(raw)}
        )
