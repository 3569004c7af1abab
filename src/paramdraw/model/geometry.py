"""
Geometry Renderer
=================
Pure functions turning a shape type and its parameter values into vector
geometry, plus the editor-only decorations and hit testing built on top of it.

Nothing here has side effects; the same inputs always produce equal outputs.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import numpy as np

from paramdraw.config import CROSSHAIR_HALF_SIZE, HIT_TOLERANCE
from paramdraw.model.geometry_primitives import (
    Point, LineSegment, ArcSegment, PathGeometry, CircleGeometry, Geometry
)

if TYPE_CHECKING:
    import numpy.typing as npt
    from paramdraw.model.shape_types import ShapeTypeDefinition
    from paramdraw.model.state import CanvasState, ShapeInstance


def render_circle(x: float, y: float, radius: float) -> CircleGeometry:
    """Circle centred at (x, y). A non-positive radius gives a zero-size circle."""
    return CircleGeometry(center=Point(x, y), radius=max(radius, 0.0))


def render_rounded_rect(x: float, y: float, width: float, height: float, fillet_radius: float) -> PathGeometry:
    """
    Rounded rectangle centred at (x, y).

    Traced clockwise on screen: top edge, top-right arc, right edge,
    bottom-right arc, bottom edge, bottom-left arc, left edge, top-left arc.
    A fillet radius larger than half the width or height is not clamped and
    yields a self-intersecting but still closed path.
    """
    r = fillet_radius
    left = x - width / 2
    top = y - height / 2
    right = left + width
    bottom = top + height

    segments = (
        LineSegment(Point(right - r, top)),
        ArcSegment(Point(right, top + r), center=Point(right - r, top + r), radius=r),
        LineSegment(Point(right, bottom - r)),
        ArcSegment(Point(right - r, bottom), center=Point(right - r, bottom - r), radius=r),
        LineSegment(Point(left + r, bottom)),
        ArcSegment(Point(left, bottom - r), center=Point(left + r, bottom - r), radius=r),
        LineSegment(Point(left, top + r)),
        ArcSegment(Point(left + r, top), center=Point(left + r, top + r), radius=r),
    )
    return PathGeometry(start=Point(left + r, top), segments=segments, closed=True)


def render(shape_type: ShapeTypeDefinition, x: float, y: float, *shape_params: float) -> Geometry:
    """Generate the geometry of `shape_type` anchored at (x, y)."""
    return shape_type.geometry_fn(x, y, *shape_params)


def render_instance(shape: ShapeInstance) -> Geometry:
    return render(shape.shape_type, *shape.param_values)


def crosshair(x: float, y: float, half_size: float = CROSSHAIR_HALF_SIZE) -> tuple[PathGeometry, PathGeometry]:
    """The vertical and horizontal tick marking a shape's anchor while editing."""
    vertical = PathGeometry(start=Point(x, y - half_size), segments=(LineSegment(Point(x, y + half_size)),))
    horizontal = PathGeometry(start=Point(x - half_size, y), segments=(LineSegment(Point(x + half_size, y)),))
    return vertical, horizontal


# ------------------------------------------------------------------------------
# Hit testing
# ------------------------------------------------------------------------------

def polyline_distance(polyline: npt.NDArray[np.float64], x: float, y: float) -> float:
    """Shortest distance from (x, y) to an (N, 2) polyline."""
    p = np.array([x, y])
    if len(polyline) == 1:
        return float(np.linalg.norm(polyline[0] - p))

    a = polyline[:-1]
    b = polyline[1:]
    ab = b - a
    ab_len2 = np.einsum("ij,ij->i", ab, ab)
    # Degenerate segments project onto their start point
    safe_len2 = np.where(ab_len2 > 0.0, ab_len2, 1.0)
    t = np.clip(np.einsum("ij,ij->i", p - a, ab) / safe_len2, 0.0, 1.0)
    t = np.where(ab_len2 > 0.0, t, 0.0)
    closest = a + ab * t[:, np.newaxis]
    return float(np.min(np.linalg.norm(closest - p, axis=1)))


def shape_outlines(shape: ShapeInstance) -> list[npt.NDArray[np.float64]]:
    """Polylines that make up the stroked, pickable part of a shape."""
    x, y = shape.param_values[0], shape.param_values[1]
    outlines = [render_instance(shape).discretize()]
    outlines.extend(tick.discretize() for tick in crosshair(x, y))
    return outlines


def hit_test(canvas: CanvasState, x: float, y: float, tolerance: float = HIT_TOLERANCE) -> Optional[int]:
    """
    Index of the topmost shape whose stroke passes within `tolerance` of (x, y).

    Shapes are unfilled, so only outlines and anchor crosshairs are pickable.
    Returns None when the point falls on the canvas background.
    """
    for index in range(len(canvas.shapes) - 1, -1, -1):
        for outline in shape_outlines(canvas.shapes[index]):
            if polyline_distance(outline, x, y) <= tolerance:
                return index
    return None
