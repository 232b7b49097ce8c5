"""Tests for points, curves and surfaces."""

from math import cos, pi, sin

import pytest

from brepkernel.geometry import (
    Circle, Line, Point, SweptCurve, plane_from_points, x_y_plane
)
from brepkernel.xform import Rotation, Translation


def _swept():
    return SweptCurve(Line((1.0, 0.0, 0.0), (0.0, 2.0, 0.0)), (0.0, 0.0, 2.0))


class TestPoint:
    """Test dual-coordinate points."""

    def test_from_canonical(self):
        p = Point.from_canonical([1, 2, 3])
        assert p.native == (1.0, 2.0, 3.0)
        assert p.canonical == (1.0, 2.0, 3.0)
        assert p.dimension == 3

    def test_translate(self):
        p = Point.from_canonical((1.0, 2.0, 3.0)) + (0.0, 0.0, 1.0)
        assert p == Point.from_canonical((1.0, 2.0, 4.0))

    def test_translate_1d_rejected(self):
        p = Point((0.5,), (1.0, 0.0, 0.0))
        with pytest.raises(ValueError):
            p + (1.0, 0.0, 0.0)

    def test_transform_1d_keeps_native(self):
        p = Point((0.5,), (1.0, 0.0, 0.0))
        q = p.transform(Translation((0.0, 0.0, 1.0)))
        assert q.native == (0.5,)
        assert q.canonical == (1.0, 0.0, 1.0)

    def test_transform_3d(self):
        p = Point.from_canonical((1.0, 0.0, 0.0)).transform(Translation((0.0, 0.0, 1.0)))
        assert p.native == p.canonical == (1.0, 0.0, 1.0)


class TestLine:
    """Test line curves."""

    def test_point_curve_to_model(self):
        line = Line((1.0, 0.0, 0.0), (0.0, 2.0, 0.0))
        assert line.point_curve_to_model(2.0) == (1.0, 4.0, 0.0)
        assert line.vector_curve_to_model(2.0) == (0.0, 4.0, 0.0)

    def test_point_model_to_curve(self):
        line = Line((1.0, 0.0, 0.0), (0.0, 2.0, 0.0))
        p = line.point_model_to_curve((1.0, 4.0, 0.0))
        assert p.t == pytest.approx(2.0)
        assert p.canonical == (1.0, 4.0, 0.0)

    @pytest.mark.parametrize('t', [-1.0, 0.0, 0.25, 1.0, 3.5])
    def test_round_trip(self, t):
        line = Line.from_points((1.0, 2.0, 3.0), (-2.0, 0.5, 7.0))
        p = line.point_curve_to_model(t)
        local = line.point_model_to_curve(p)
        assert local.t == pytest.approx(t)
        assert line.point_curve_to_model(local.t) == pytest.approx(p)

    @pytest.mark.parametrize('t', [-2.0, 0.0, 0.5, 4.0])
    def test_vector_round_trip(self, t):
        line = Line.from_points((1.0, 2.0, 3.0), (-2.0, 0.5, 7.0))
        v = line.vector_curve_to_model(t)
        local = line.vector_model_to_curve(v)
        assert local.t == pytest.approx(t)
        assert local.canonical == v

    def test_from_points(self):
        line = Line.from_points((0, 0, 0), (1, 0, 0))
        assert line.origin == (0.0, 0.0, 0.0)
        assert line.direction == (1.0, 0.0, 0.0)

    def test_transform_is_pure(self):
        line = Line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
        moved = line.transform(Translation((0.0, 0.0, 1.0)))
        assert moved == Line((0.0, 0.0, 1.0), (1.0, 0.0, 0.0))
        assert line == Line((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))


class TestCircle:
    """Test circle curves."""

    def test_from_radius(self):
        c = Circle.from_radius((0, 0, 1), 2.0)
        assert c.radius == 2.0
        assert c.origin == (0.0, 0.0, 1.0)
        assert c.point_curve_to_model(0.0) == (2.0, 0.0, 1.0)
        assert c.point_curve_to_model(pi / 2) == pytest.approx((0.0, 2.0, 1.0))

    def test_bad_radius(self):
        with pytest.raises(ValueError):
            Circle.from_radius((0, 0, 0), 0.0)

    @pytest.mark.parametrize('t', [0.0, 0.5, pi, 4.0, 2 * pi - 0.1])
    def test_round_trip(self, t):
        c = Circle((1.0, 1.0, 0.0), (0.0, 0.0, 3.0), (3.0, 0.0, 0.0))
        p = c.point_curve_to_model(t)
        local = c.point_model_to_curve(p)
        assert local.t == pytest.approx(t)
        assert c.point_curve_to_model(local.t) == pytest.approx(p)

    def test_vector_curve_to_model(self):
        c = Circle.from_radius((5, 5, 5), 2.0)
        assert c.vector_curve_to_model(0.0) == (0.0, 0.0, 0.0)
        assert c.vector_curve_to_model(pi / 2) == pytest.approx((-2.0, 2.0, 0.0))
        assert c.vector_curve_to_model(pi) == pytest.approx((-4.0, 0.0, 0.0))

    @pytest.mark.parametrize('t', [0.0, 0.5, pi, 4.0, 2 * pi - 0.1])
    def test_vector_round_trip(self, t):
        c = Circle((1.0, 1.0, 0.0), (0.0, 0.0, 3.0), (3.0, 0.0, 0.0))
        v = c.vector_curve_to_model(t)
        assert c.vector_model_to_curve(v).t == pytest.approx(t)

    def test_parameter_range(self):
        c = Circle.from_radius((0, 0, 0), 1.0)
        assert c.point_model_to_curve((0.0, -1.0, 0.0)).t == pytest.approx(3 * pi / 2)


class TestSweptCurve:
    """Test swept curve surfaces."""

    def test_point_surface_to_model(self):
        assert _swept().point_surface_to_model((2.0, 4.0)) == (1.0, 4.0, 8.0)

    def test_vector_surface_to_model(self):
        assert _swept().vector_surface_to_model((2.0, 4.0)) == (0.0, 4.0, 8.0)

    def test_vector_surface_to_model_circle(self):
        swept = SweptCurve(Circle.from_radius((0, 0, 0), 1.0), (0.0, 0.0, 1.0))
        assert swept.vector_surface_to_model((0.5, 1.0)) == \
            pytest.approx((cos(0.5) - 1.0, sin(0.5), 1.0))

    @pytest.mark.parametrize('uv', [(-1.0, -1.0), (0.0, 0.0), (1.0, 1.0), (2.0, 3.0)])
    def test_round_trip(self, uv):
        swept = _swept()
        p = swept.point_surface_to_model(uv)
        local = swept.point_model_to_surface(p)
        assert local.native == pytest.approx(uv)
        assert local.canonical == p
        assert swept.point_surface_to_model(local.native) == pytest.approx(p)

    def test_transform_commutes(self):
        swept = plane_from_points([(0, 0, 0), (2, 0, 1), (0, 3, 0)])
        transform = Translation((1.0, -2.0, 0.5)).mul(Rotation((1, 2, 3), 40))
        uv = (0.3, 0.7)

        direct = swept.transform(transform).point_surface_to_model(uv)
        mapped = transform.transform_point(swept.point_surface_to_model(uv))
        assert direct == pytest.approx(mapped)

    def test_x_y_plane(self):
        plane = x_y_plane()
        assert plane.point_surface_to_model((2.0, 3.0)) == (2.0, 3.0, 0.0)
        assert plane.point_model_to_surface((2.0, 3.0, 0.0)).native == (2.0, 3.0)

    def test_plane_from_points(self):
        plane = plane_from_points([(0, 0, 1), (1, 0, 1), (0, 1, 1)])
        assert plane == SweptCurve(Line((0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
                                   (0.0, 1.0, 0.0))
        assert plane.point_surface_to_model((1.0, 1.0)) == (1.0, 1.0, 1.0)

    def test_hashable(self):
        assert hash(_swept()) == hash(_swept())
        assert len({_swept(), _swept()}) == 1
