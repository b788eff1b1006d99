"""Controlled enumerations for the clockface domain.

Every categorical field in the domain MUST reference an enum defined here.
"""

from __future__ import annotations

from enum import Enum


class TimeRange(str, Enum):
    """Lookback windows offered by the range selector."""

    DAY = "24h"
    FOUR_DAYS = "4d"
    MONTH = "month"

    @property
    def hours(self) -> float:
        """Maximum event age (in hours) admitted by this window."""
        return _RANGE_HOURS[self]


_RANGE_HOURS: dict[TimeRange, float] = {
    TimeRange.DAY: 24.0,
    TimeRange.FOUR_DAYS: 96.0,
    TimeRange.MONTH: 720.0,
}


class PanMode(str, Enum):
    """States of the drag-to-pan gesture."""

    IDLE = "idle"
    DRAGGING = "dragging"
