"""ChartSession — one interactive view over the shared, immutable event set.

A session bundles the ViewState-owning controller with its detail panel
and applies validated interaction messages to them.  Sessions share
nothing mutable, so each client connection gets its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from clockface.config import Settings
from clockface.core.controller import InteractionController, ZoomConfig
from clockface.core.pipeline import HazeConfig, RenderPipeline
from clockface.core.projector import EventProjector, ProjectionConfig
from clockface.detail.panel import DetailPanel
from clockface.domain.event import ChartEvent
from clockface.domain.render import Point
from clockface.domain.view_state import ViewState
from clockface.foundation.randomness import RandomSource, make_random_source
from clockface.models.interaction import (
    InteractionAction,
    PanEndAction,
    PanMoveAction,
    PanStartAction,
    RenderAction,
    SelectAction,
    SetRangeAction,
    ZoomAction,
)

logger = logging.getLogger(__name__)


def build_pipeline(settings: Settings, rng: RandomSource | None = None) -> RenderPipeline:
    """Wire projector and haze bounds from *settings*."""
    projection = ProjectionConfig(
        base_length=settings.base_length,
        length_range=settings.length_range,
        base_spread=settings.base_spread,
        spread_range=settings.spread_range,
        haze_base=settings.haze_base,
        haze_divisor=settings.haze_divisor,
        inner_radius=settings.inner_radius,
        center=Point(x=settings.chart_center, y=settings.chart_center),
    )
    haze = HazeConfig(
        jitter_deg=settings.haze_jitter_deg,
        scale_min=settings.haze_scale_min,
        scale_max=settings.haze_scale_max,
    )
    return RenderPipeline(
        projector=EventProjector(projection),
        haze=haze,
        rng=rng or make_random_source(settings.haze_seed),
    )


def build_zoom(settings: Settings) -> ZoomConfig:
    return ZoomConfig(
        in_factor=settings.zoom_in_factor,
        out_factor=settings.zoom_out_factor,
        scale_min=settings.scale_min,
        scale_max=settings.scale_max,
    )


class ChartSession:
    """Controller + detail panel for a single viewer."""

    def __init__(
        self,
        events: Sequence[ChartEvent],
        settings: Settings,
        view: ViewState | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.panel = DetailPanel()
        self.controller = InteractionController(
            events,
            pipeline=build_pipeline(settings, rng),
            view=view,
            listener=self.panel,
            zoom=build_zoom(settings),
        )

    def apply(self, action: InteractionAction) -> bool:
        """Apply one action.  Returns True if the chart was re-rendered."""
        ctl = self.controller
        if isinstance(action, SetRangeAction):
            ctl.set_range(action.range)
            return True
        if isinstance(action, SelectAction):
            return ctl.select_event(action.event_id)
        if isinstance(action, ZoomAction):
            ctl.zoom(action.delta_y)
        elif isinstance(action, PanStartAction):
            ctl.begin_pan(action.x, action.y)
        elif isinstance(action, PanMoveAction):
            ctl.update_pan(action.x, action.y)
        elif isinstance(action, PanEndAction):
            ctl.end_pan()
        elif isinstance(action, RenderAction):
            ctl.render()
            return True
        return False

    def snapshot(self, include_plan: bool = False) -> dict[str, Any]:
        """JSON-ready view of the session state."""
        payload: dict[str, Any] = {
            "view": self.controller.view.to_dict(),
            "transform": self.controller.transform.model_dump(),
            "detail": self.panel.to_dict(),
        }
        if include_plan:
            payload["plan"] = self.controller.plan.model_dump()
        return payload
