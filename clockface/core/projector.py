"""Event Projector — per-event render attributes from severity and time.

Projection formulas:
    length     = base_length + severity/100 * length_range
    spread_deg = base_spread + severity/100 * spread_range
    haze_count = haze_base   + floor(severity / haze_divisor)

Higher severity means a longer, wider ray and a denser background glow.
The projector is stateless: it reads the ViewState only to mark the
selected ray and never mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass

from clockface.core.geometry import (
    DEFAULT_CENTER,
    DEFAULT_INNER_RADIUS,
    angle_from_minutes,
    make_ray_path,
)
from clockface.domain.event import ChartEvent
from clockface.domain.render import Point, RayGeometry
from clockface.domain.view_state import ViewState


@dataclass(frozen=True)
class ProjectionConfig:
    """Configurable constants for severity → geometry."""

    base_length: float = 28.0
    length_range: float = 220.0
    base_spread: float = 1.2
    spread_range: float = 6.0
    haze_base: int = 2
    haze_divisor: int = 35

    # Chart placement
    inner_radius: float = DEFAULT_INNER_RADIUS
    center: Point = DEFAULT_CENTER

    def __post_init__(self) -> None:
        if self.haze_base < 2:
            raise ValueError("haze_base must be at least 2")
        if self.haze_divisor <= 0:
            raise ValueError("haze_divisor must be positive")
        if self.length_range < 0 or self.spread_range < 0:
            raise ValueError("ranges must be non-negative")


class EventProjector:
    """Stateless mapper from ChartEvent (+ current selection) to RayGeometry."""

    def __init__(self, config: ProjectionConfig | None = None) -> None:
        self._config = config or ProjectionConfig()

    @property
    def config(self) -> ProjectionConfig:
        return self._config

    # ── Scalar projections ───────────────────────────────────────────────

    def length(self, severity: int) -> float:
        return self._config.base_length + (severity / 100.0) * self._config.length_range

    def spread(self, severity: int) -> float:
        return self._config.base_spread + (severity / 100.0) * self._config.spread_range

    def haze_count(self, severity: int) -> int:
        return self._config.haze_base + severity // self._config.haze_divisor

    # ── Public API ───────────────────────────────────────────────────────

    def project(self, event: ChartEvent, view: ViewState | None = None) -> RayGeometry:
        """Compute the ray geometry for *event*."""
        cfg = self._config
        angle = angle_from_minutes(event.minutes_of_day)
        length = self.length(event.severity)
        spread = self.spread(event.severity)
        return RayGeometry(
            event_id=event.id,
            angle_deg=angle,
            length=length,
            spread_deg=spread,
            points=make_ray_path(angle, length, spread, cfg.inner_radius, cfg.center),
            haze_count=self.haze_count(event.severity),
            is_selected=view is not None and view.selected_id == event.id,
        )
