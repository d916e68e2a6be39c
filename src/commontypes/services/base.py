"""BaseService — shared plumbing for commontypes services.

A service is built with the clock and the zone that decides which
calendar day is "today", so operations that read the current time are
deterministic under a :class:`~commontypes.domain.clock.FixedClock`.
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING, Any

from commontypes.domain.clock import FixedClock
from commontypes.domain.errors import InvalidValue
from commontypes.domain.zone import format_offset, utc
from commontypes.services.result import ServiceResult

if TYPE_CHECKING:
    from commontypes.domain.clock import Clock

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes.

    Usage::

        class TemporalService(BaseService):
            def parse_date(self, value: str) -> ServiceResult:
                try:
                    date = Date.from_string(value)
                except InvalidValue as exc:
                    return self._invalid("parse_date", exc)
                return ServiceResult.success("parse_date", {"value": str(date)})
    """

    def __init__(self, clock: Clock, zone: tzinfo | None = None) -> None:
        self._clock = clock
        self._zone = zone or utc()

    def _clock_meta(self, zone: tzinfo | None = None) -> dict[str, Any]:
        """The ``meta`` block for results that depend on the current time."""
        return {
            "clock": "fixed" if isinstance(self._clock, FixedClock) else "system",
            "now": self._clock.now_utc().isoformat(),
            "zone": format_offset(zone or self._zone),
        }

    def _invalid(self, op: str, exc: InvalidValue) -> ServiceResult:
        """Failed result for a value the domain layer rejected."""
        logger.debug("%s rejected %r: %s", op, exc.value, exc)
        return ServiceResult.failure(op, "INVALID_VALUE", str(exc), exc.to_detail())
