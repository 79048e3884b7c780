import math

import numpy as np
import pytest

from ticketshape.model.geometry_primitives import ArcTo, LineTo, MoveTo, Path, Point, QuadCurveTo, Rect, Vector
from ticketshape.model.geometry_utils import arc_points, arc_sweep, quad_curve_points


def test_rect_edges_follow_raw_arithmetic():
    r = Rect(10, 20, 200, 300)
    assert (r.min_x, r.min_y, r.max_x, r.max_y) == (10, 20, 210, 320)
    assert (r.mid_x, r.mid_y) == (110, 170)

    # Negative sizes are not normalized
    neg = Rect(0, 0, -50, 40)
    assert neg.max_x == -50
    assert neg.min_x == 0


def test_rect_from_bounds():
    assert Rect.from_bounds(1, 2, 11, 22) == Rect(1, 2, 10, 20)


def test_point_vector_arithmetic():
    p = Point(1.0, 2.0)
    assert p + Vector(2.0, 3.0) == Point(3.0, 5.0)
    assert Point(4.0, 6.0) - p == Vector(3.0, 4.0)
    assert (Point(4.0, 6.0) - p).magnitude == pytest.approx(5.0)
    assert p - Vector(1.0, 1.0) == Point(0.0, 1.0)
    assert Vector(1.0, 2.0) + Vector(2.0, 3.0) == Vector(3.0, 5.0)
    assert Vector(3.0, 5.0) - Vector(2.0, 3.0) == Vector(1.0, 2.0)


def test_point_rejects_unsupported_operands():
    with pytest.raises(TypeError):
        Point(0, 0) + Point(1, 1)
    with pytest.raises(TypeError):
        Point(0, 0) - 3


def test_arc_sweep_directions():
    assert arc_sweep(-90, 90, clockwise=True) == pytest.approx(-180)
    assert arc_sweep(90, -90, clockwise=True) == pytest.approx(-180)
    assert arc_sweep(0, 90, clockwise=False) == pytest.approx(90)
    assert arc_sweep(0, 90, clockwise=True) == pytest.approx(-270)
    assert arc_sweep(45, 45, clockwise=True) == 0


def test_arc_points_clockwise_runs_toward_decreasing_angles():
    pts = arc_points((0.0, 0.0), 1.0, 0.0, -90.0, clockwise=True, n_points=3)
    assert np.allclose(pts[0], [1.0, 0.0])
    assert np.allclose(pts[1], [math.cos(math.radians(-45)), math.sin(math.radians(-45))])
    assert np.allclose(pts[2], [0.0, -1.0])


def test_quad_curve_points_endpoints_and_midpoint():
    pts = quad_curve_points((0, 0), (10, 0), (10, 10), n_points=3)
    assert np.allclose(pts[0], [0, 0])
    assert np.allclose(pts[1], [7.5, 2.5])
    assert np.allclose(pts[2], [10, 10])


def test_path_builder_and_queries():
    path = Path()
    assert path.is_empty
    assert path.current_point is None
    assert path.bounding_rect() == Rect()
    assert path.discretize().shape == (0, 2)

    path.move_to(Point(0, 0))
    path.line_to(Point(10, 0))
    path.quad_to(Point(10, 10), control=Point(10, 0))
    path.add_arc(Point(10, 15), 5, -90, 90, clockwise=True)

    assert not path.is_empty
    assert path.segment_count == 3
    assert path.start_point == Point(0, 0)
    assert isinstance(path.elements[0], MoveTo)
    assert isinstance(path.elements[1], LineTo)
    assert isinstance(path.elements[2], QuadCurveTo)
    assert isinstance(path.elements[3], ArcTo)
    assert path.current_point.x == pytest.approx(10)
    assert path.current_point.y == pytest.approx(20)


def test_arc_element_points():
    arc = ArcTo(center=Point(200, 225), radius=8, start_angle=-90, end_angle=90, clockwise=True)
    assert arc.sweep == pytest.approx(-180)
    assert arc.start_point.x == pytest.approx(200)
    assert arc.start_point.y == pytest.approx(217)
    assert arc.end_point.x == pytest.approx(200)
    assert arc.end_point.y == pytest.approx(233)


def test_discretize_does_not_repeat_arc_start():
    path = Path()
    path.move_to(Point(10, 10))
    path.add_arc(Point(10, 15), 5, -90, 90, clockwise=True)
    pts = path.discretize(arc_resolution=5)
    # move point + 4 new arc samples
    assert pts.shape == (5, 2)
    assert np.allclose(pts[2], [5, 15])


def test_bounding_rect_includes_curve_extremes():
    path = Path()
    path.move_to(Point(0, 0))
    path.add_arc(Point(0, 10), 10, -90, 90, clockwise=False)
    bounds = path.bounding_rect()
    assert bounds.max_x == pytest.approx(10)
    assert bounds.min_y == pytest.approx(0)
    assert bounds.max_y == pytest.approx(20)
