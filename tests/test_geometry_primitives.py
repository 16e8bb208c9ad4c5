import math

import numpy as np
import pytest

from gallifreyan.model.geometry_primitives import Degree, Drawing, DrawingKind, Polar


def test_degree_arithmetic():
    assert Degree(30.0) + Degree(15.0) == Degree(45.0)
    assert Degree(30.0) - Degree(45.0) == Degree(-15.0)
    assert -Degree(10.0) == Degree(-10.0)
    assert Degree(90.0) * 2 == Degree(180.0)
    assert 3 * Degree(90.0) == Degree(270.0)
    assert Degree(10.0) < Degree(20.0)


def test_degree_radians_and_normalization():
    assert Degree(180.0).radians == pytest.approx(math.pi)
    assert Degree(-90.0).normalized() == Degree(270.0)
    assert Degree(720.0).normalized() == Degree(0.0)


def test_scale_by_one_is_identity():
    p = Polar(6.0, Degree(-90.0))
    assert p.scale(1.0) == p


def test_scale_with_angle_override():
    p = Polar(2.0, Degree(30.0))
    assert p.scale(1.2) == Polar(2.4, Degree(30.0))
    assert p.scale(0.5, Degree(210.0)) == Polar(1.0, Degree(210.0))


def test_divide_shrinks_and_rotates():
    p = Polar(6.0, Degree(30.0))
    assert p.divide(Polar(3.0, Degree(10.0))) == Polar(2.0, Degree(40.0))


def test_divide_by_zero_radius():
    with pytest.raises(ZeroDivisionError):
        Polar(6.0, Degree(0.0)).divide(Polar(0.0, Degree(0.0)))


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        Polar(-1.0, Degree(0.0))


def test_rotate():
    assert Polar(1.0, Degree(10.0)).rotate(Degree(80.0)) == Polar(1.0, Degree(90.0))


def test_cartesian_conversion():
    x, y = Polar(2.0, Degree(90.0)).to_cartesian()
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(2.0)

    back = Polar.from_cartesian(0.0, -3.0)
    assert back.radius == pytest.approx(3.0)
    assert back.angle.value == pytest.approx(-90.0)


def test_polar_addition_is_vector_sum():
    total = Polar(1.0, Degree(0.0)) + Polar(1.0, Degree(90.0))
    assert total.radius == pytest.approx(math.sqrt(2.0))
    assert total.angle.value == pytest.approx(45.0)


def test_polar_addition_rejects_other_types():
    with pytest.raises(TypeError):
        Polar(1.0, Degree(0.0)) + (1.0, 0.0)


def test_drawing_is_single_pass():
    drawing = Drawing([[0.0, 0.0], [1.0, 2.0]])
    assert list(drawing) == [(0.0, 0.0), (1.0, 2.0)]
    assert list(drawing) == []
    assert drawing.exhausted


def test_drawing_consume_returns_remaining_points():
    drawing = Drawing(np.arange(6.0).reshape(3, 2), kind=DrawingKind.POINTS)
    assert next(drawing) == (0.0, 1.0)
    rest = drawing.consume()
    assert rest.shape == (2, 2)
    assert drawing.exhausted
    assert drawing.consume().shape == (0, 2)
    assert drawing.kind is DrawingKind.POINTS


def test_drawing_rejects_bad_shape():
    with pytest.raises(ValueError):
        Drawing([1.0, 2.0, 3.0])


def test_empty_drawing():
    drawing = Drawing([])
    assert list(drawing) == []
