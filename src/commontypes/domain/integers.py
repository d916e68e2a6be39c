"""Non-negative integer value types: Age, Count, Duration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar, Self

from commontypes.domain.contract import ValueObject
from commontypes.domain.errors import InvalidValue


@dataclass(frozen=True, order=True)
class NonNegativeInt(ValueObject):
    """An ``int`` greater than or equal to zero (booleans excluded)."""

    raw_types: ClassVar[tuple[type, ...]] = (int,)
    field_name: ClassVar[str] = "value"

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidValue(self.field_name, self.value, "an integer")
        if self.value < 0:
            raise InvalidValue(self.field_name, self.value, "a positive integer, or zero")

    @classmethod
    def from_raw(cls, value: Any) -> Self:
        return cls(value)

    @classmethod
    def from_int(cls, value: int) -> Self:
        return cls(value)

    def to_int(self) -> int:
        return self.value

    def serialize(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class Age(NonNegativeInt):
    """An age in years."""

    field_name = "age"


class Count(NonNegativeInt):
    """A number of items."""

    field_name = "count"


class Duration(NonNegativeInt):
    """A span of time in whole seconds."""

    field_name = "duration"

    @classmethod
    def from_seconds(cls, seconds: int) -> Self:
        return cls(seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> Self:
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise InvalidValue("minutes", minutes, "an integer")
        return cls(minutes * 60)

    @classmethod
    def from_hours(cls, hours: int) -> Self:
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise InvalidValue("hours", hours, "an integer")
        return cls(hours * 3600)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        """Whole seconds of *delta*; sub-second remainders are dropped."""
        if delta < timedelta(0):
            raise InvalidValue("duration", delta, "a positive span, or zero")
        return cls(delta // timedelta(seconds=1))

    def to_seconds(self) -> int:
        return self.value

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.value)

    def format(self, separator: str = ":") -> str:
        """Minutes and remaining seconds, e.g. ``"2:5"`` for 125 seconds."""
        minutes, seconds = divmod(self.value, 60)
        return f"{minutes}{separator}{seconds}"
