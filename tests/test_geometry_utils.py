import math

import numpy as np
import pytest

from gallifreyan.errors import GeometryPreconditionError
from gallifreyan.model.geometry_primitives import Degree, DrawingKind, Polar
from gallifreyan.model.geometry_utils import ORIGIN, arc, dot, draw_arc, law_of_sines_angle, line


def _distances(points, center=(0.0, 0.0)):
    return np.hypot(points[:, 0] - center[0], points[:, 1] - center[1])


@pytest.mark.parametrize(
    "known, unknown, angle, expected",
    [
        (1.0, 2.0, 90.0, 30.0),
        (2.0, 6.0, 30.0, math.degrees(math.asin(1.0 / 6.0))),
        (2.0, 6.0, 90.0, math.degrees(math.asin(1.0 / 3.0))),
        (1.0, 1.0, 90.0, 90.0),
    ],
)
def test_law_of_sines_angle(known, unknown, angle, expected):
    assert law_of_sines_angle(known, unknown, Degree(angle)).value == pytest.approx(expected)


def test_law_of_sines_rejects_impossible_triangle():
    with pytest.raises(GeometryPreconditionError):
        law_of_sines_angle(3.0, 1.0, Degree(90.0))


def test_law_of_sines_rejects_zero_side():
    with pytest.raises(GeometryPreconditionError):
        law_of_sines_angle(1.0, 0.0, Degree(30.0))


def test_full_turn_arc_is_closed_ring():
    center = Polar(6.0, Degree(0.0))
    points = arc(center, Polar(0.0, Degree(0.0)), 2.0, (Degree(0.0), Degree(360.0))).consume()

    assert len(points) == 361
    assert np.array_equal(points[0], points[-1])
    assert _distances(points, (6.0, 0.0)) == pytest.approx(np.full(361, 2.0))


def test_partial_arc_endpoints():
    points = arc(ORIGIN, ORIGIN, 3.0, (Degree(0.0), Degree(90.0))).consume()

    assert len(points) == 91
    assert points[0] == pytest.approx([3.0, 0.0])
    assert points[-1] == pytest.approx([0.0, 3.0], abs=1e-12)


def test_arc_center_is_offset_by_satellite():
    center = Polar(6.0, Degree(0.0))
    satellite = Polar(1.8, Degree(180.0))
    points = arc(center, satellite, 2.0, (Degree(0.0), Degree(180.0)), step=10.0).consume()

    assert len(points) == 19
    assert _distances(points, (4.2, 0.0)) == pytest.approx(np.full(19, 2.0))


@pytest.mark.parametrize("step", [0.0, -1.0, math.nan, math.inf])
def test_arc_rejects_invalid_step(step):
    with pytest.raises(ValueError):
        arc(ORIGIN, ORIGIN, 1.0, (Degree(0.0), Degree(90.0)), step=step)


def test_draw_arc_unwraps_end_before_start():
    points = draw_arc(6.0, (Degree(350.0), Degree(10.0))).consume()

    assert len(points) == 21
    assert _distances(points) == pytest.approx(np.full(21, 6.0))
    first = Polar.from_cartesian(*points[0])
    last = Polar.from_cartesian(*points[-1])
    assert first.angle.value == pytest.approx(-10.0)
    assert last.angle.value == pytest.approx(10.0)


def test_line_radiates_along_direction():
    drawing = line(Polar(6.0, Degree(0.0)), Polar(1.0, Degree(180.0)), Degree(180.0), length=2.0)
    points = drawing.consume()

    assert drawing.kind is DrawingKind.POLYLINE
    assert points[0] == pytest.approx([5.0, 0.0])
    assert points[1] == pytest.approx([3.0, 0.0])


def test_dot_is_point_cluster_around_mark():
    drawing = dot(Polar(6.0, Degree(90.0)), ORIGIN, Degree(0.0), radius=0.1)
    points = drawing.consume()

    assert drawing.kind is DrawingKind.POINTS
    assert len(points) == 9
    assert points[0] == pytest.approx([0.0, 6.0], abs=1e-12)
    assert _distances(points[1:], (0.0, 6.0)) == pytest.approx(np.full(8, 0.1))
    assert points[1] == pytest.approx([0.1, 6.0], abs=1e-12)
