"""Render Pipeline — turns the event set and a ViewState into a RenderPlan.

Stages:
    1. Filter:  keep events whose age fits the active range.
    2. Order:   ascending severity (stable), so dominant rays draw last.
    3. Emit:    per event, ``haze_count`` jittered background copies, then
                one crisp foreground wedge with its label and handle.
    4. Reconcile: flag a selected id that no longer survives the filter.

The pipeline never mutates the ViewState.  Reconciliation is reported on
the plan; the InteractionController is the one that clears the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from clockface.core.geometry import rotate_point, scale_point
from clockface.core.projector import EventProjector
from clockface.domain.enums import TimeRange
from clockface.domain.event import ChartEvent
from clockface.domain.render import HazeWedge, RayGeometry, RayHandle, RayWedge, RenderPlan
from clockface.domain.view_state import ViewState
from clockface.foundation.formatting import format_time
from clockface.foundation.randomness import RandomSource, make_random_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HazeConfig:
    """Bounds for the cosmetic haze perturbation."""

    jitter_deg: float = 0.9
    scale_min: float = 0.9
    scale_max: float = 1.22

    def __post_init__(self) -> None:
        if self.jitter_deg < 0:
            raise ValueError("jitter_deg must be non-negative")
        if not 0 < self.scale_min <= self.scale_max:
            raise ValueError("scale bounds must satisfy 0 < scale_min <= scale_max")


# ── Stage functions ──────────────────────────────────────────────────────────


def filter_events(events: Iterable[ChartEvent], time_range: TimeRange) -> list[ChartEvent]:
    """Events whose age is within *time_range*; input order is preserved."""
    limit = time_range.hours
    return [e for e in events if e.age_hours <= limit]


def order_by_severity(events: Iterable[ChartEvent]) -> list[ChartEvent]:
    """Stable ascending sort by severity."""
    return sorted(events, key=lambda e: e.severity)


def ray_label(event: ChartEvent) -> str:
    """Accessible label: ``"{name} at {HH:MM} in {location}"``."""
    return f"{event.name} at {format_time(event.local_time)} in {event.location}"


# ── Pipeline ─────────────────────────────────────────────────────────────────


class RenderPipeline:
    """Builds layered render plans.

    Args:
        projector: Severity/time → geometry mapper.
        haze: Jitter bounds for background copies.
        rng: Random source for the haze layer.  Inject a seeded or fixed
             source for reproducible output.
    """

    def __init__(
        self,
        projector: EventProjector | None = None,
        haze: HazeConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self._projector = projector or EventProjector()
        self._haze = haze or HazeConfig()
        self._rng = rng or make_random_source()

    @property
    def projector(self) -> EventProjector:
        return self._projector

    def render(self, events: Sequence[ChartEvent], view: ViewState) -> RenderPlan:
        """Produce the render plan for *events* under *view*."""
        visible = filter_events(events, view.active_range)

        background: list[HazeWedge] = []
        foreground: list[RayWedge] = []
        handles: list[RayHandle] = []

        for event in order_by_severity(visible):
            geometry = self._projector.project(event, view)
            background.extend(self._haze_copies(geometry))
            label = ray_label(event)
            foreground.append(
                RayWedge(
                    event_id=event.id,
                    points=geometry.points,
                    label=label,
                    selected=geometry.is_selected,
                )
            )
            handles.append(RayHandle(event_id=event.id, label=label))

        visible_ids = [e.id for e in visible]
        stale = view.selected_id is not None and view.selected_id not in visible_ids

        logger.debug(
            "Rendered %d/%d event(s) for range %s (haze=%d, stale_selection=%s)",
            len(visible),
            len(events),
            view.active_range.value,
            len(background),
            stale,
        )
        return RenderPlan(
            background=background,
            foreground=foreground,
            handles=handles,
            visible_ids=visible_ids,
            selection_stale=stale,
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _haze_copies(self, geometry: RayGeometry) -> list[HazeWedge]:
        center = self._projector.config.center
        copies: list[HazeWedge] = []
        for _ in range(geometry.haze_count):
            jitter = (self._rng.random() - 0.5) * 2.0 * self._haze.jitter_deg
            factor = self._haze.scale_min + self._rng.random() * (
                self._haze.scale_max - self._haze.scale_min
            )
            points = tuple(
                scale_point(rotate_point(p, jitter, center), factor, center)
                for p in geometry.points
            )
            copies.append(
                HazeWedge(
                    event_id=geometry.event_id,
                    points=points,
                    rotation_deg=jitter,
                    scale=factor,
                    selected=geometry.is_selected,
                )
            )
        return copies
