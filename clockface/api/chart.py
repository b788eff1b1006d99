"""HTTP endpoints: event listing, stateless SVG render, health."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import APIRouter, Query, Response

from clockface.config import Settings
from clockface.domain.enums import TimeRange
from clockface.domain.event import ChartEvent
from clockface.domain.view_state import ViewState
from clockface.render.svg import render_svg
from clockface.session import ChartSession


def create_chart_router(events: Sequence[ChartEvent], settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health() -> dict:
        return {"status": "ok", "app": settings.app_name, "event_count": len(events)}

    @router.get("/events")
    async def list_events(
        time_range: TimeRange | None = Query(None, alias="range"),
    ) -> list[dict]:
        limit = time_range.hours if time_range is not None else None
        return [e.to_dict() for e in events if limit is None or e.age_hours <= limit]

    @router.get("/chart.svg")
    async def chart_svg(
        time_range: TimeRange = Query(TimeRange.DAY, alias="range"),
    ) -> Response:
        session = ChartSession(events, settings, view=ViewState(active_range=time_range))
        body = render_svg(
            session.controller.plan,
            session.controller.transform,
            size=settings.chart_center * 2,
            title=f"{settings.app_name} ({time_range.value})",
        )
        return Response(content=body, media_type="image/svg+xml")

    return router
