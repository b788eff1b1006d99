"""WebSocket endpoint for interactive chart sessions.

Path: /ws/chart

Each connection owns a fresh ChartSession (its own ViewState).  Every
incoming JSON message is one user action, validated at the boundary and
applied to the session; the reply carries the resulting view, transform
and detail card, plus the render plan whenever the chart was redrawn.

Invalid messages are answered with an error and the session continues.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from clockface.config import Settings
from clockface.domain.event import ChartEvent
from clockface.models.interaction import parse_action
from clockface.session import ChartSession

logger = logging.getLogger(__name__)


def create_chart_ws_router(events: Sequence[ChartEvent], settings: Settings) -> APIRouter:
    """Factory that wires the chart endpoint to a concrete event set."""
    router = APIRouter()

    @router.websocket("/ws/chart")
    async def chart_session(websocket: WebSocket) -> None:
        await websocket.accept()
        session = ChartSession(events, settings)
        logger.info("Chart session connected")

        # Initial frame
        await websocket.send_json({"status": "ok", **session.snapshot(include_plan=True)})

        try:
            while True:
                raw = await websocket.receive_json()

                # ── Validate at the boundary ─────────────────────────────
                try:
                    action = parse_action(raw)
                except ValidationError as exc:
                    logger.debug("Rejected interaction message: %s", exc)
                    await websocket.send_json({
                        "status": "error",
                        "detail": "Interaction message validation failed",
                        "errors": exc.errors(include_url=False, include_context=False, include_input=False),
                    })
                    continue

                # ── Apply & reply ────────────────────────────────────────
                rendered = session.apply(action)
                await websocket.send_json({
                    "status": "ok",
                    "action": action.action,
                    **session.snapshot(include_plan=rendered),
                })

        except WebSocketDisconnect:
            logger.info("Chart session disconnected")

    return router
