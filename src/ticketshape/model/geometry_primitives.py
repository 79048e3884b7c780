"""
Geometric Primitives for path construction and rendering backends.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union, TYPE_CHECKING
import math

import numpy as np

from ticketshape.config import ARC_RESOLUTION, CURVE_RESOLUTION
from ticketshape.model.geometry_utils import arc_points, arc_sweep, deg2rad, quad_curve_points

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """A 2D vector representing direction and magnitude."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the y-down screen plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle given by its origin and size.

    No validation is performed: zero or negative sizes are kept as they are,
    so `max_x` is always `x + width` even when that is left of `min_x`.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    def is_close(self, other: Rect, tol: float = 1e-9) -> bool:
        """Compare two rectangles field by field with an absolute tolerance."""
        return all(
            math.isclose(a, b, abs_tol=tol)
            for a, b in zip(
                (self.x, self.y, self.width, self.height),
                (other.x, other.y, other.width, other.height),
            )
        )


# ------------------------------------------------------------------------------
# Path elements
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class MoveTo:
    """Starts a new subpath at `to`."""
    to: Point


@dataclass(frozen=True)
class LineTo:
    """A straight segment from the current point to `to`."""
    to: Point


@dataclass(frozen=True)
class QuadCurveTo:
    """A quadratic Bezier segment from the current point to `to`."""
    to: Point
    control: Point


@dataclass(frozen=True)
class ArcTo:
    """
    A circular arc given by centre, radius and start/end angles in degrees.

    Angles are measured in the y-down plane: 0 degrees points to +x and
    90 degrees points to +y. With `clockwise=True` the sweep runs from
    `start_angle` toward decreasing angles, otherwise toward increasing ones.
    If the current point differs from the arc start, renderers connect them
    with a straight line.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool = False

    @property
    def sweep(self) -> float:
        """Signed sweep in degrees, never more than one full turn."""
        return arc_sweep(self.start_angle, self.end_angle, clockwise=self.clockwise)

    @property
    def start_point(self) -> Point:
        return self._point_at(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self._point_at(self.end_angle)

    def _point_at(self, angle_deg: float) -> Point:
        a = deg2rad(angle_deg)
        return Point(
            self.center.x + self.radius * math.cos(a),
            self.center.y + self.radius * math.sin(a),
        )


# Union type for list handling
PathElement = Union[MoveTo, LineTo, QuadCurveTo, ArcTo]


@dataclass
class Path:
    """
    An ordered sequence of path elements.

    Builders append elements through `move_to`, `line_to`, `quad_to` and
    `add_arc`; once handed out, a path is treated as a value.
    """
    elements: List[PathElement] = field(default_factory=list)
    closed: bool = False

    # ---- builder API ----

    def move_to(self, point: Point) -> None:
        self.elements.append(MoveTo(point))

    def line_to(self, point: Point) -> None:
        self.elements.append(LineTo(point))

    def quad_to(self, point: Point, control: Point) -> None:
        self.elements.append(QuadCurveTo(to=point, control=control))

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = False
    ) -> None:
        self.elements.append(ArcTo(
            center=center,
            radius=radius,
            start_angle=start_angle,
            end_angle=end_angle,
            clockwise=clockwise
        ))

    def close_subpath(self) -> None:
        self.closed = True

    # ---- queries ----

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def segment_count(self) -> int:
        """Number of drawing elements, not counting move-to elements."""
        return sum(1 for e in self.elements if not isinstance(e, MoveTo))

    @property
    def start_point(self) -> Optional[Point]:
        if not self.elements:
            return None
        first = self.elements[0]
        return first.start_point if isinstance(first, ArcTo) else first.to

    @property
    def current_point(self) -> Optional[Point]:
        if not self.elements:
            return None
        last = self.elements[-1]
        return last.end_point if isinstance(last, ArcTo) else last.to

    def discretize(
        self,
        arc_resolution: int = ARC_RESOLUTION,
        curve_resolution: int = CURVE_RESOLUTION
    ) -> npt.NDArray[np.float64]:
        """
        Flatten the path into a dense (N, 2) polyline in drawing order.

        Curves are sampled including both end points; the shared point between
        consecutive elements is not repeated.
        """
        chunks: list[npt.NDArray[np.float64]] = []
        current: Optional[Point] = None

        for element in self.elements:
            if isinstance(element, MoveTo):
                chunks.append(np.array([element.to.to_tuple()]))
                current = element.to
            elif isinstance(element, LineTo):
                chunks.append(np.array([element.to.to_tuple()]))
                current = element.to
            elif isinstance(element, QuadCurveTo):
                start = current if current is not None else element.to
                pts = quad_curve_points(
                    start.to_tuple(), element.control.to_tuple(), element.to.to_tuple(),
                    n_points=curve_resolution
                )
                chunks.append(pts[1:])
                current = element.to
            elif isinstance(element, ArcTo):
                pts = arc_points(
                    element.center.to_tuple(),
                    element.radius,
                    element.start_angle,
                    element.end_angle,
                    clockwise=element.clockwise,
                    n_points=arc_resolution
                )
                # The arc start is a real vertex unless it coincides with the current point
                if current is not None and current.distance_to(element.start_point) <= 1e-12:
                    pts = pts[1:]
                chunks.append(pts)
                current = element.end_point
            else:
                raise TypeError(f"Unsupported path element: {type(element).__name__}")

        if not chunks:
            return np.empty((0, 2), dtype=np.float64)
        return np.vstack(chunks).astype(np.float64)

    def bounding_rect(self) -> Rect:
        """Tight bounds of the flattened path, or an empty rect for an empty path."""
        pts = self.discretize()
        if pts.size == 0:
            return Rect()
        x0, y0 = pts.min(axis=0)
        x1, y1 = pts.max(axis=0)
        return Rect.from_bounds(float(x0), float(y0), float(x1), float(y1))
