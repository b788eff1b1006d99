"""Event records — the immutable input the chart is drawn from.

An ``Event`` is what the data-loading collaborator hands us, validated at
the boundary.  A ``ChartEvent`` wraps it with the two values the chart
needs and that must be computed exactly once: the local minute of day
(which fixes the ray's angle) and the age relative to the reference "now"
(which decides range membership).
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from pydantic import BaseModel, Field, field_validator

from clockface.foundation.clock import to_display


class Event(BaseModel):
    """A single time-stamped occurrence.  Immutable after creation."""

    id: str = Field(..., min_length=1, max_length=128, description="Unique, stable identifier")
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    description: str = ""
    severity: int = Field(..., ge=0, le=100, description="Magnitude, 0 = trivial, 100 = extreme")
    timestamp: datetime = Field(..., description="When the event happened (timezone-aware)")

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def timestamp_must_be_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v


class ChartEvent(BaseModel):
    """An Event plus its load-time derived placement values."""

    event: Event
    local_time: datetime = Field(..., description="Timestamp in the display zone")
    minutes_of_day: int = Field(..., ge=0, lt=1440)
    age_hours: float = Field(..., description="Hours between the reference now and the timestamp")

    model_config = {"frozen": True}

    @classmethod
    def from_event(cls, event: Event, now: datetime, zone: tzinfo | None = None) -> ChartEvent:
        local = to_display(event.timestamp, zone)
        return cls(
            event=event,
            local_time=local,
            minutes_of_day=local.hour * 60 + local.minute,
            age_hours=(now - event.timestamp).total_seconds() / 3600.0,
        )

    # ── Shortcuts ────────────────────────────────────────────────────────

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def name(self) -> str:
        return self.event.name

    @property
    def location(self) -> str:
        return self.event.location

    @property
    def severity(self) -> int:
        return self.event.severity

    def to_dict(self) -> dict:
        data = self.event.model_dump(mode="json")
        data.update(
            minutes_of_day=self.minutes_of_day,
            age_hours=round(self.age_hours, 4),
            local_time=self.local_time.isoformat(),
        )
        return data
