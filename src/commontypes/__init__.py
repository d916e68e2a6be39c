"""commontypes — immutable, self-validating value types."""

from commontypes.domain.calendar_math import Weekday
from commontypes.domain.clock import Clock, FixedClock, SystemClock, use_clock
from commontypes.domain.contract import ValueObject
from commontypes.domain.date import Date
from commontypes.domain.errors import InvalidValue
from commontypes.domain.instant import Instant
from commontypes.domain.integers import Age, Count, Duration
from commontypes.domain.zone import offset_zone, utc

__version__ = "0.1.0"

__all__ = [
    "Age",
    "Clock",
    "Count",
    "Date",
    "Duration",
    "FixedClock",
    "Instant",
    "InvalidValue",
    "SystemClock",
    "ValueObject",
    "Weekday",
    "offset_zone",
    "use_clock",
    "utc",
]
