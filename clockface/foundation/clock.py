"""Timezone-aware clock utilities.

All timestamps in clockface MUST be timezone-aware.  This module is the
single source of "now".  The chart measures event ages against one
reference instant captured at startup, never against a fresh reading per
frame.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def display_zone(name: str | None = None) -> tzinfo | None:
    """Resolve the zone used for time-of-day placement.

    ``None`` means the process's local zone (``datetime.astimezone()`` default).
    """
    if name is None:
        return None
    return ZoneInfo(name)


def to_display(ts: datetime, zone: tzinfo | None = None) -> datetime:
    """Convert an aware timestamp into the display zone."""
    return ts.astimezone(zone)
