"""clockface — radial time-of-day event chart.

This is the application entry point.  It loads the event set once against
a single reference "now", then wires the HTTP and WebSocket endpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import FastAPI

from clockface.api.chart import create_chart_router
from clockface.api.ws_chart import create_chart_ws_router
from clockface.config import Settings, settings
from clockface.data.sample import sample_events
from clockface.domain.event import ChartEvent
from clockface.foundation.clock import display_zone, utc_now
from clockface.loader import load_events_file

logger = logging.getLogger(__name__)


def load_dataset(app_settings: Settings) -> list[ChartEvent]:
    """Events from ``events_path`` if configured, otherwise the demo set."""
    now = utc_now()
    zone = display_zone(app_settings.display_timezone)
    if app_settings.events_path:
        logger.info("Loading events from %s", app_settings.events_path)
        return load_events_file(app_settings.events_path, now, zone)
    logger.info("No events_path configured, using the built-in sample")
    return sample_events(now, zone)


def create_app(
    events: Sequence[ChartEvent] | None = None,
    app_settings: Settings | None = None,
) -> FastAPI:
    app_settings = app_settings or settings
    chart_events = list(events) if events is not None else load_dataset(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="Radial time-of-day event chart",
        version="0.1.0",
    )
    app.include_router(create_chart_router(chart_events, app_settings))
    app.include_router(create_chart_ws_router(chart_events, app_settings))
    return app


# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

# ── App ──────────────────────────────────────────────────────────────────────

app = create_app()
