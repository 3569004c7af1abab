"""
Geometric Primitives for rendering, hit testing and SVG export.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union, TYPE_CHECKING
import math

import numpy as np

from paramdraw.config import ARC_SEGMENTS, CIRCLE_SEGMENTS
from paramdraw.utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in drawing units (x right, y down)."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class LineSegment:
    """A straight edge from the previous point to `end`."""
    end: Point

    def to_svg(self) -> str:
        return f"L {format_number(self.end.x)} {format_number(self.end.y)}"

    def discretize(self, start: Point) -> npt.NDArray[np.float64]:
        return np.array([start.to_array(), self.end.to_array()])


@dataclass(frozen=True)
class ArcSegment:
    """
    A circular arc from the previous point to `end` around `center`.

    `sweep` follows the SVG convention: True means increasing angle, which is
    clockwise on screen since y points down.
    """
    end: Point
    center: Point
    radius: float
    sweep: bool = True

    def to_svg(self) -> str:
        r = format_number(self.radius)
        flag = 1 if self.sweep else 0
        return f"A {r} {r} 0 0 {flag} {format_number(self.end.x)} {format_number(self.end.y)}"

    def discretize(self, start: Point, n_points: int = ARC_SEGMENTS) -> npt.NDArray[np.float64]:
        """
        Sample the arc from `start` to `end`, turning in the sweep direction.
        Zero-radius arcs collapse onto their endpoints.
        """
        if self.radius <= 0.0:
            return np.array([start.to_array(), self.end.to_array()])

        ang_s = math.atan2(start.y - self.center.y, start.x - self.center.x)
        ang_e = math.atan2(self.end.y - self.center.y, self.end.x - self.center.x)
        diff = ang_e - ang_s
        if self.sweep:
            while diff < 0.0:
                diff += 2 * math.pi
        else:
            while diff > 0.0:
                diff -= 2 * math.pi

        angles = np.linspace(ang_s, ang_s + diff, max(2, n_points))
        x = self.center.x + self.radius * np.cos(angles)
        y = self.center.y + self.radius * np.sin(angles)
        pts = np.c_[x, y]
        # Pin the endpoints so consecutive segments join exactly
        pts[0] = start.to_array()
        pts[-1] = self.end.to_array()
        return pts


PathSegment = Union[LineSegment, ArcSegment]


@dataclass(frozen=True)
class PathGeometry:
    """An open or closed sequence of segments starting at `start`."""
    start: Point
    segments: Tuple[PathSegment, ...] = ()
    closed: bool = False

    def to_svg_path_data(self) -> str:
        parts = [f"M {format_number(self.start.x)} {format_number(self.start.y)}"]
        parts.extend(segment.to_svg() for segment in self.segments)
        if self.closed:
            parts.append("Z")
        return " ".join(parts)

    def discretize(self) -> npt.NDArray[np.float64]:
        """Return an (N, 2) polyline through the whole path."""
        chunks = [self.start.to_array()[np.newaxis, :]]
        current = self.start
        for segment in self.segments:
            chunks.append(segment.discretize(current)[1:])
            current = segment.end
        if self.closed and current.distance_to(self.start) > 1e-12:
            chunks.append(self.start.to_array()[np.newaxis, :])
        return np.vstack(chunks)


@dataclass(frozen=True)
class CircleGeometry:
    """A full circle primitive."""
    center: Point
    radius: float

    def discretize(self, n_segments: int = CIRCLE_SEGMENTS) -> npt.NDArray[np.float64]:
        """Discretize into a closed (N, 2) polyline."""
        theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
        pts = np.c_[self.center.x + self.radius * np.cos(theta), self.center.y + self.radius * np.sin(theta)]
        # close the ring
        return np.vstack((pts, pts[0]))


# Union type for renderer output
Geometry = Union[PathGeometry, CircleGeometry]
