"""Constant-offset zones: the shared UTC constant and ``±HH:MM`` offsets.

The UTC zone is created lazily, once per process. Initialization is
guarded by a lock (double-checked) so concurrent first callers all get
the same object; later reads never take the lock.
"""

from __future__ import annotations

import logging
import re
import threading
from datetime import timedelta, timezone, tzinfo

from commontypes.domain.errors import InvalidValue

logger = logging.getLogger(__name__)

OFFSET_PATTERN = re.compile(r"(?P<sign>[+-])(?P<hours>[0-9]{2}):(?P<minutes>[0-9]{2})")

_utc: tzinfo | None = None
_utc_lock = threading.Lock()


def utc() -> tzinfo:
    """Return the process-wide UTC zone."""
    global _utc
    if _utc is None:
        with _utc_lock:
            if _utc is None:
                _utc = timezone.utc
                logger.debug("UTC zone initialized")
    return _utc


def offset_zone(text: str) -> tzinfo:
    """Parse a ``±HH:MM`` offset into a constant-offset zone.

    ``+00:00`` and ``-00:00`` both return the shared UTC constant.
    """
    match = OFFSET_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidValue("offset", text, "a '±HH:MM' offset")
    hours = int(match["hours"])
    minutes = int(match["minutes"])
    if hours > 23 or minutes > 59:
        raise InvalidValue("offset", text, "between [-23:59, +23:59]")
    delta = timedelta(hours=hours, minutes=minutes)
    if not delta:
        return utc()
    return timezone(-delta if match["sign"] == "-" else delta)


def format_offset(zone: tzinfo) -> str:
    """Render the (constant) offset of *zone* as ``±HH:MM``."""
    delta = zone.utcoffset(None) or timedelta(0)
    sign = "-" if delta < timedelta(0) else "+"
    total_minutes = abs(int(delta.total_seconds())) // 60
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"
