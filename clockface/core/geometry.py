"""Geometry Mapper — pure polar math for the clock face.

Design principles:
    1. Pure functions: no state, no I/O, no randomness.
    2. Angles are in degrees everywhere outside this module's internals.
    3. Minute 0 (midnight) sits at the top of the circle, so a constant
       -90° phase is applied; the dial runs clockwise in screen space.

Wedge layout:

        apex = polar(inner + length, angle)
           /\\
          /  \\
    left ------ right
    polar(inner, angle - spread/2)   polar(inner, angle + spread/2)
"""

from __future__ import annotations

import math

from clockface.domain.render import Point

MINUTES_PER_DAY = 1440
PHASE_DEG = -90.0

DEFAULT_CENTER = Point(x=600.0, y=600.0)
DEFAULT_INNER_RADIUS = 333.0


def angle_from_minutes(minutes: float) -> float:
    """Map minute-of-day linearly onto 360°, midnight at -90°.

    Minutes wrap modulo one day, so the result lies in [-90°, 270°).
    """
    return ((minutes % MINUTES_PER_DAY) / MINUTES_PER_DAY) * 360.0 + PHASE_DEG


def polar_point(radius: float, angle_deg: float, center: Point = DEFAULT_CENTER) -> Point:
    """Convert (radius, degrees) around *center* into Cartesian coordinates."""
    a = math.radians(angle_deg)
    return Point(x=center.x + radius * math.cos(a), y=center.y + radius * math.sin(a))


def make_ray_path(
    angle_deg: float,
    length: float,
    spread_deg: float,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    center: Point = DEFAULT_CENTER,
) -> tuple[Point, Point, Point]:
    """Build the three-point wedge for a ray.

    A zero spread collapses the two base points into one (a needle).
    """
    half = spread_deg / 2.0
    return (
        polar_point(inner_radius, angle_deg - half, center),
        polar_point(inner_radius + length, angle_deg, center),
        polar_point(inner_radius, angle_deg + half, center),
    )


def rotate_point(p: Point, angle_deg: float, center: Point = DEFAULT_CENTER) -> Point:
    """Rotate *p* about *center* by *angle_deg* (clockwise on screen)."""
    a = math.radians(angle_deg)
    dx, dy = p.x - center.x, p.y - center.y
    cos_a, sin_a = math.cos(a), math.sin(a)
    return Point(x=center.x + dx * cos_a - dy * sin_a, y=center.y + dx * sin_a + dy * cos_a)


def scale_point(p: Point, factor: float, center: Point = DEFAULT_CENTER) -> Point:
    """Scale *p* uniformly away from (or towards) *center*."""
    return Point(x=center.x + (p.x - center.x) * factor, y=center.y + (p.y - center.y) * factor)


def svg_path(points: tuple[Point, ...]) -> str:
    """Closed SVG path data: ``M x y L x y ... Z``."""
    if not points:
        return ""
    head, *tail = points
    parts = [f"M {head.x:.3f} {head.y:.3f}"]
    parts.extend(f"L {p.x:.3f} {p.y:.3f}" for p in tail)
    parts.append("Z")
    return " ".join(parts)
