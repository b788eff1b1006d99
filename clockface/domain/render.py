"""Render primitives — the surface-neutral output of the pipeline.

Everything here is a frozen value object.  A rendering surface (SVG, a
canvas, a test) consumes these without knowing how they were computed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Point(BaseModel):
    x: float
    y: float

    model_config = {"frozen": True}


class RayGeometry(BaseModel):
    """Exact geometry of one event's ray."""

    event_id: str
    angle_deg: float
    length: float = Field(..., ge=0.0)
    spread_deg: float = Field(..., ge=0.0)
    points: tuple[Point, Point, Point]
    haze_count: int = Field(..., ge=2)
    is_selected: bool = False

    model_config = {"frozen": True}


class HazeWedge(BaseModel):
    """Non-interactive, jittered copy of a ray drawn in the background layer."""

    event_id: str
    points: tuple[Point, Point, Point]
    rotation_deg: float = Field(..., description="Jitter applied about the chart center")
    scale: float = Field(..., description="Uniform scale applied about the chart center")
    selected: bool = False

    model_config = {"frozen": True}


class RayWedge(BaseModel):
    """Crisp, selectable foreground ray."""

    event_id: str
    points: tuple[Point, Point, Point]
    label: str
    selected: bool = False
    interactive: bool = True

    model_config = {"frozen": True}


class RayHandle(BaseModel):
    """Hit target a rendering surface binds to click / keyboard activation."""

    event_id: str
    label: str

    model_config = {"frozen": True}


class ChartTransform(BaseModel):
    """Affine pan/zoom applied to the whole chart."""

    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0

    model_config = {"frozen": True}

    def to_svg(self) -> str:
        return f"translate({self.translate_x:g} {self.translate_y:g}) scale({self.scale:g})"


class RenderPlan(BaseModel):
    """Two ordered layers plus handles, ready for a rendering surface.

    ``selection_stale`` is set when the view's selected id is not among
    ``visible_ids``; the controller reacts by clearing the selection.
    """

    background: list[HazeWedge] = Field(default_factory=list)
    foreground: list[RayWedge] = Field(default_factory=list)
    handles: list[RayHandle] = Field(default_factory=list)
    visible_ids: list[str] = Field(default_factory=list)
    selection_stale: bool = False

    model_config = {"frozen": True}
