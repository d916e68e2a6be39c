"""Injectable clock for the ambient-time factories and predicates.

``now()``, ``today()``, ``is_past()`` and friends never call
``datetime.now()`` directly. They take an explicit ``clock=`` argument
and fall back to the context-local default clock, which is the real
system clock unless overridden with :func:`use_clock` or
:func:`set_default_clock`.

Usage::

    with use_clock(FixedClock(datetime(2020, 1, 6, tzinfo=UTC))):
        assert str(Date.today()) == "2020-01-06"
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timedelta
from typing import Protocol

from commontypes.domain.zone import utc

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Injectable time source."""

    def now_utc(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...  # pragma: no cover


class SystemClock:
    """Production clock — real system time."""

    def now_utc(self) -> datetime:
        return datetime.now(utc())


class FixedClock:
    """Test clock — always returns the same instant.

    Naive datetimes are rejected; aware ones are converted to UTC.
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None or fixed.utcoffset() is None:
            raise ValueError("FixedClock requires a timezone-aware datetime.")
        self._fixed = fixed.astimezone(utc())

    def now_utc(self) -> datetime:
        return self._fixed

    def advance(self, **delta: float) -> None:
        """Move the fixed time forward (``clock.advance(days=1)``)."""
        self._fixed = self._fixed + timedelta(**delta)

    def __repr__(self) -> str:
        return f"FixedClock({self._fixed.isoformat()})"


_SYSTEM_CLOCK = SystemClock()
_default_clock: ContextVar[Clock] = ContextVar("_default_clock", default=_SYSTEM_CLOCK)


def get_default_clock() -> Clock:
    """Return the clock used when no explicit ``clock=`` is given."""
    return _default_clock.get()


def set_default_clock(clock: Clock) -> None:
    """Replace the default clock for the current context."""
    logger.debug("Default clock set to %r", clock)
    _default_clock.set(clock)


def reset_default_clock() -> None:
    """Restore the real system clock as the default."""
    _default_clock.set(_SYSTEM_CLOCK)


@contextmanager
def use_clock(clock: Clock) -> Generator[Clock]:
    """Temporarily install *clock* as the default clock."""
    token = _default_clock.set(clock)
    try:
        yield clock
    finally:
        _default_clock.reset(token)


def resolve_clock(clock: Clock | None = None) -> Clock:
    """Return *clock*, or the default clock when None."""
    return clock if clock is not None else _default_clock.get()


def now_utc(clock: Clock | None = None) -> datetime:
    """Current UTC time from *clock* (or the default clock)."""
    return resolve_clock(clock).now_utc()
