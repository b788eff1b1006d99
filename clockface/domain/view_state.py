"""ViewState — the one mutable object of an interactive chart session.

Only the InteractionController writes to it.  The projector and the
render pipeline read it and nothing else.
"""

from __future__ import annotations

from clockface.domain.enums import PanMode, TimeRange


class ViewState:
    """Mutable per-session view parameters.

    Defaults: 24h range, no selection, unit scale, no pan, idle gesture.
    """

    __slots__ = (
        "active_range",
        "selected_id",
        "scale",
        "pan_x",
        "pan_y",
        "pan_mode",
        "drag_origin_x",
        "drag_origin_y",
    )

    def __init__(self, active_range: TimeRange = TimeRange.DAY) -> None:
        self.active_range: TimeRange = active_range
        self.selected_id: str | None = None
        self.scale: float = 1.0
        self.pan_x: float = 0.0
        self.pan_y: float = 0.0
        self.pan_mode: PanMode = PanMode.IDLE
        self.drag_origin_x: float = 0.0
        self.drag_origin_y: float = 0.0

    @property
    def pan(self) -> tuple[float, float]:
        return (self.pan_x, self.pan_y)

    def to_dict(self) -> dict:
        return {
            "active_range": self.active_range.value,
            "selected_id": self.selected_id,
            "scale": round(self.scale, 6),
            "pan": [self.pan_x, self.pan_y],
            "pan_mode": self.pan_mode.value,
        }
