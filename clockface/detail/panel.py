"""Detail view collaborator — what the chart tells the outside world about
the current selection.

The controller only knows the ``DetailListener`` interface.  ``DetailPanel``
is the default implementation: it keeps the text fields a detail card
shows, so any surface (HTML template, terminal, JSON) can display them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

from clockface.domain.event import ChartEvent
from clockface.foundation.formatting import format_date, format_time

logger = logging.getLogger(__name__)

EMPTY_HINT = "Select a ray to inspect event name, location, and local time."


class DetailListener(ABC):
    """Receives selection changes from the InteractionController."""

    @abstractmethod
    def on_selection_changed(self, event: ChartEvent | None) -> None:
        """Called with the full event on selection, or None when cleared."""
        ...


class EventDetail(BaseModel):
    """Display-ready fields of a selected event."""

    event_id: str
    name: str
    location: str
    time: str
    date: str
    severity: str
    description: str

    model_config = {"frozen": True}

    @classmethod
    def from_event(cls, event: ChartEvent) -> EventDetail:
        return cls(
            event_id=event.id,
            name=event.name,
            location=event.location,
            time=format_time(event.local_time),
            date=format_date(event.local_time),
            severity=f"{event.severity}/100",
            description=event.event.description,
        )


class DetailPanel(DetailListener):
    """Holds the detail card for the current selection."""

    def __init__(self) -> None:
        self._detail: EventDetail | None = None

    @property
    def detail(self) -> EventDetail | None:
        return self._detail

    def on_selection_changed(self, event: ChartEvent | None) -> None:
        self._detail = EventDetail.from_event(event) if event is not None else None
        logger.debug("Detail panel now showing %s", event.id if event else "nothing")

    def to_dict(self) -> dict:
        if self._detail is None:
            return {"selected": False, "hint": EMPTY_HINT}
        return {"selected": True, **self._detail.model_dump()}
