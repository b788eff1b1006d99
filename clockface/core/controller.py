"""InteractionController — the sole owner and mutator of a ViewState.

Every public method is a discrete user-input handler that runs to
completion: range click, ray activation, wheel tick, pointer drag.  After
a state change that affects what is drawn, the controller re-runs the
render pipeline and keeps the resulting plan as ``plan``.

Pan gesture state machine:

    IDLE --begin_pan--> DRAGGING --end_pan--> IDLE
                          |   ^
                          +---+ update_pan  (no-op while IDLE)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from clockface.core.pipeline import RenderPipeline
from clockface.detail.panel import DetailListener
from clockface.domain.enums import PanMode, TimeRange
from clockface.domain.event import ChartEvent
from clockface.domain.render import ChartTransform, RenderPlan
from clockface.domain.view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoomConfig:
    """Wheel zoom factors and scale bounds."""

    in_factor: float = 1.12
    out_factor: float = 0.89
    scale_min: float = 0.7
    scale_max: float = 5.0

    def __post_init__(self) -> None:
        if self.in_factor <= 1.0:
            raise ValueError("in_factor must be > 1")
        if not 0.0 < self.out_factor < 1.0:
            raise ValueError("out_factor must be in (0, 1)")
        if not 0.0 < self.scale_min <= 1.0 <= self.scale_max:
            raise ValueError("scale bounds must satisfy 0 < scale_min <= 1 <= scale_max")


class InteractionController:
    """Handles user actions against one ViewState.

    Args:
        events: The immutable event set, loaded once.
        pipeline: Render pipeline used after each visual change.
        view: The session's ViewState (a default one is created if omitted).
        listener: Detail-view collaborator notified on selection changes.
        zoom: Zoom factors and clamping bounds.
    """

    def __init__(
        self,
        events: Sequence[ChartEvent],
        pipeline: RenderPipeline | None = None,
        view: ViewState | None = None,
        listener: DetailListener | None = None,
        zoom: ZoomConfig | None = None,
    ) -> None:
        self._events: tuple[ChartEvent, ...] = tuple(events)
        self._by_id: dict[str, ChartEvent] = {e.id: e for e in self._events}
        self._pipeline = pipeline or RenderPipeline()
        self._view = view or ViewState()
        self._listener = listener
        self._zoom = zoom or ZoomConfig()
        self._view.scale = self._clamp_scale(self._view.scale)
        self._plan: RenderPlan = self.render()

    # ── Read access ──────────────────────────────────────────────────────

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def plan(self) -> RenderPlan:
        """Most recent render plan."""
        return self._plan

    @property
    def events(self) -> tuple[ChartEvent, ...]:
        return self._events

    @property
    def transform(self) -> ChartTransform:
        return ChartTransform(
            translate_x=self._view.pan_x,
            translate_y=self._view.pan_y,
            scale=self._view.scale,
        )

    @property
    def selected_event(self) -> ChartEvent | None:
        if self._view.selected_id is None:
            return None
        return self._by_id.get(self._view.selected_id)

    # ── Rendering ────────────────────────────────────────────────────────

    def render(self) -> RenderPlan:
        """Re-run the pipeline, clearing a selection that fell out of range."""
        plan = self._pipeline.render(self._events, self._view)
        if plan.selection_stale:
            logger.debug("Selection %s filtered out, clearing", self._view.selected_id)
            self._view.selected_id = None
            self._notify(None)
        self._plan = plan
        return plan

    # ── Range & selection ────────────────────────────────────────────────

    def set_range(self, time_range: TimeRange | str) -> RenderPlan:
        """Switch the lookback window.  Always clears the selection."""
        self._view.active_range = TimeRange(time_range)
        self._view.selected_id = None
        plan = self.render()
        self._notify(None)
        logger.info(
            "Range set to %s (%d visible event(s))",
            self._view.active_range.value,
            len(plan.visible_ids),
        )
        return plan

    def select_event(self, event_id: str) -> bool:
        """Select a currently visible event.

        Returns False (and changes nothing) when the id is unknown or
        filtered out by the active range; such requests can legitimately
        race a range change in the UI.
        """
        if event_id not in self._plan.visible_ids:
            logger.debug("Ignoring selection of non-visible event %s", event_id)
            return False
        self._view.selected_id = event_id
        self.render()
        self._notify(self._by_id[event_id])
        return True

    # ── Zoom ─────────────────────────────────────────────────────────────

    def zoom(self, delta_y: float) -> ChartTransform:
        """Apply one wheel tick.  Negative delta zooms in, anything else out."""
        factor = self._zoom.in_factor if delta_y < 0 else self._zoom.out_factor
        self._view.scale = self._clamp_scale(self._view.scale * factor)
        return self.transform

    def _clamp_scale(self, scale: float) -> float:
        return max(self._zoom.scale_min, min(self._zoom.scale_max, scale))

    # ── Pan ──────────────────────────────────────────────────────────────

    def begin_pan(self, pointer_x: float, pointer_y: float) -> None:
        view = self._view
        view.drag_origin_x = pointer_x - view.pan_x
        view.drag_origin_y = pointer_y - view.pan_y
        view.pan_mode = PanMode.DRAGGING

    def update_pan(self, pointer_x: float, pointer_y: float) -> ChartTransform:
        """Move the chart with the pointer; ignored unless a drag is active."""
        view = self._view
        if view.pan_mode is not PanMode.DRAGGING:
            return self.transform
        view.pan_x = pointer_x - view.drag_origin_x
        view.pan_y = pointer_y - view.drag_origin_y
        return self.transform

    def end_pan(self) -> None:
        self._view.pan_mode = PanMode.IDLE

    # ── Internals ────────────────────────────────────────────────────────

    def _notify(self, event: ChartEvent | None) -> None:
        if self._listener is not None:
            self._listener.on_selection_changed(event)
