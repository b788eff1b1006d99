"""Event loading — raw payloads in, validated ChartEvents out.

This is the boundary of the system.  Everything past this point may
assume: ids are unique, severities are within 0–100, timestamps are
timezone-aware, and the derived placement values were computed against a
single reference "now".
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from clockface.domain.event import ChartEvent, Event

logger = logging.getLogger(__name__)


class EventLoadError(ValueError):
    """Raised when a payload cannot be turned into events."""


class DuplicateEventIdError(EventLoadError):
    """Raised when two events share an id."""

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Duplicate event id: {event_id!r}")


def build_chart_events(
    events: Iterable[Event],
    now: datetime,
    zone: tzinfo | None = None,
) -> list[ChartEvent]:
    """Derive chart placement for already-validated events."""
    seen: set[str] = set()
    result: list[ChartEvent] = []
    for event in events:
        if event.id in seen:
            raise DuplicateEventIdError(event.id)
        seen.add(event.id)
        result.append(ChartEvent.from_event(event, now, zone))
    return result


def load_events(
    raw: Any,
    now: datetime,
    zone: tzinfo | None = None,
) -> list[ChartEvent]:
    """Validate a list of raw event dicts.

    Items without an ``id`` are assigned ``e-{index}``.
    """
    if not isinstance(raw, list):
        raise EventLoadError(f"Expected a list of events, got {type(raw).__name__}")

    events: list[Event] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise EventLoadError(f"Event #{index} is not an object")
        payload = {"id": f"e-{index}", **item}
        try:
            events.append(Event.model_validate(payload))
        except ValidationError as exc:
            raise EventLoadError(f"Event #{index} is invalid: {exc.error_count()} error(s)") from exc

    chart_events = build_chart_events(events, now, zone)
    logger.info("Loaded %d event(s)", len(chart_events))
    return chart_events


def load_events_file(path: str | Path, now: datetime, zone: tzinfo | None = None) -> list[ChartEvent]:
    """Load events from a JSON file holding a list of event objects."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise EventLoadError(f"{path}: cannot read events file ({exc.strerror or exc})") from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EventLoadError(f"{path}: not valid JSON ({exc.msg})") from exc
    return load_events(raw, now, zone)
