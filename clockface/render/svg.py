"""SVG rendering surface for a RenderPlan.

Produces a standalone document with the same layering as the interactive
chart: a zoom layer carrying the pan/zoom transform, a back group of
haze copies and a front group of selectable rays.
"""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from clockface.core.geometry import svg_path
from clockface.domain.render import ChartTransform, HazeWedge, RayWedge, RenderPlan


def _haze_element(wedge: HazeWedge) -> str:
    classes = "ray fuzzy selected" if wedge.selected else "ray fuzzy"
    return f'<path class="{classes}" d="{svg_path(wedge.points)}"/>'


def _ray_element(wedge: RayWedge) -> str:
    classes = "ray selected" if wedge.selected else "ray"
    return (
        f'<path class="{classes}" d="{svg_path(wedge.points)}" '
        f'role="button" tabindex="0" aria-label={quoteattr(wedge.label)} '
        f"data-event-id={quoteattr(wedge.event_id)}/>"
    )


def render_svg(
    plan: RenderPlan,
    transform: ChartTransform | None = None,
    size: float = 1200.0,
    title: str | None = None,
) -> str:
    """Serialize *plan* into SVG markup."""
    transform = transform or ChartTransform()
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size:g} {size:g}" '
        f'width="{size:g}" height="{size:g}">',
    ]
    if title:
        lines.append(f"<title>{escape(title)}</title>")
    lines.append(f'<g id="zoomLayer" transform="{transform.to_svg()}">')
    lines.append('<g id="raysBack">')
    lines.extend(_haze_element(w) for w in plan.background)
    lines.append("</g>")
    lines.append('<g id="raysFront">')
    lines.extend(_ray_element(w) for w in plan.foreground)
    lines.append("</g>")
    lines.append("</g>")
    lines.append("</svg>")
    return "\n".join(lines)
