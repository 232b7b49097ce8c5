"""Geometric primitives for brepkernel.

This module provides the geometry that topology refers to:

- Point: a dual-coordinate point, native (curve/surface/model space) plus
  canonical (3D model space)
- Line: straight curve defined by origin and direction
- Circle: closed curve defined by center and two orthogonal radius vectors
- SweptCurve: surface created by sweeping a curve along a path vector

All geometry values are immutable.  ``transform()`` returns a new value,
it never modifies the receiver.  Every curve maps between its 1D
parameter ``t`` and 3D model coordinates; every surface maps between
its 2D ``(u, v)`` coordinates and 3D model coordinates.  The mappings
are inverses of each other up to floating point rounding.

Copyright (c) 2025 Richard DeVaul
MIT License
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, sin, pi
from typing import Sequence, Tuple, Union

from brepkernel import geom
from brepkernel.geom import Vec3
from brepkernel.xform import Transform


# -----------------------------------------------------------------------------
# Point
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Point:
    """A point with native and canonical coordinates.

    ``native`` has one component per dimension of the space the point was
    expressed in (1 for a curve, 2 for a surface, 3 for model space).
    ``canonical`` is always the 3D model-space location.  Both are fixed at
    construction, so they can never drift apart.
    """

    native: Tuple[float, ...]
    canonical: Vec3

    @classmethod
    def from_canonical(cls, p: Sequence[float]) -> "Point":
        """Build a model-space point, whose native form is its 3D location."""
        c = geom.to_vec3(p)
        return cls(c, c)

    @property
    def dimension(self) -> int:
        return len(self.native)

    @property
    def t(self) -> float:
        return self.native[0]

    @property
    def u(self) -> float:
        return self.native[0]

    @property
    def v(self) -> float:
        return self.native[1]

    def __add__(self, vector):
        """Translate a model-space point by a 3D vector."""
        if self.dimension != 3:
            raise ValueError('only 3D points can be translated in model space')
        return Point.from_canonical(geom.add(self.canonical, geom.to_vec3(vector)))

    def transform(self, transform: Transform) -> "Point":
        """Transform the point.

        For 3D points both forms are transformed.  For lower-dimensional
        points only the canonical form is transformed: the native form is
        relative to a curve or surface, and transforming that curve or
        surface is up to the caller.
        """
        canonical = transform.transform_point(self.canonical)
        if self.dimension == 3:
            return Point(canonical, canonical)
        return Point(self.native, canonical)


# -----------------------------------------------------------------------------
# Curves
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Line:
    """A line, ``origin + t * direction``."""

    origin: Vec3
    direction: Vec3

    @classmethod
    def from_points(cls, a: Sequence[float], b: Sequence[float]) -> "Line":
        """Line through ``a`` (t=0) and ``b`` (t=1)."""
        a = geom.to_vec3(a)
        b = geom.to_vec3(b)
        return cls(a, geom.sub(b, a))

    def transform(self, transform: Transform) -> "Line":
        return Line(transform.transform_point(self.origin),
                    transform.transform_vector(self.direction))

    def point_model_to_curve(self, point: Sequence[float]) -> Point:
        """Project a model-space point onto the line.

        The native form is the line parameter ``t``, the canonical form is
        the point that was passed in.
        """
        p = geom.to_vec3(point)
        length = geom.mag(self.direction)
        t = geom.dot(geom.sub(p, self.origin),
                     geom.normalize(self.direction)) / length
        return Point((t,), p)

    def point_curve_to_model(self, t: float) -> Vec3:
        return geom.add(self.origin, geom.scale(self.direction, t))

    def vector_curve_to_model(self, t: float) -> Vec3:
        return geom.scale(self.direction, t)

    def vector_model_to_curve(self, vector: Sequence[float]) -> Point:
        """Express a model-space vector as a change of the line parameter."""
        d = geom.to_vec3(vector)
        t = geom.dot(d, geom.normalize(self.direction)) / geom.mag(self.direction)
        return Point((t,), d)


@dataclass(frozen=True)
class Circle:
    """A circle, ``center + a * cos(t) + b * sin(t)``.

    ``a`` and ``b`` must be orthogonal and of equal length; that length is
    the radius.  The parameter ``t`` is in radians, the circle is closed
    over ``[0, 2*pi)``.
    """

    center: Vec3
    a: Vec3
    b: Vec3

    @classmethod
    def from_radius(cls, center: Sequence[float], radius: float) -> "Circle":
        """Circle parallel to the x-y plane."""
        if radius <= 0.0:
            raise ValueError('circle radius must be positive, got {}'.format(radius))
        return cls(geom.to_vec3(center), (radius, 0.0, 0.0), (0.0, radius, 0.0))

    @property
    def origin(self) -> Vec3:
        return self.center

    @property
    def radius(self) -> float:
        return geom.mag(self.a)

    def transform(self, transform: Transform) -> "Circle":
        return Circle(transform.transform_point(self.center),
                      transform.transform_vector(self.a),
                      transform.transform_vector(self.b))

    def point_model_to_curve(self, point: Sequence[float]) -> Point:
        p = geom.to_vec3(point)
        d = geom.sub(p, self.center)
        x = geom.dot(d, geom.normalize(self.a))
        y = geom.dot(d, geom.normalize(self.b))
        t = atan2(y, x)
        if t < 0.0:
            t += 2.0 * pi
        return Point((t,), p)

    def point_curve_to_model(self, t: float) -> Vec3:
        return geom.add(self.center,
                        geom.add(geom.scale(self.a, cos(t)),
                                 geom.scale(self.b, sin(t))))

    def vector_curve_to_model(self, t: float) -> Vec3:
        """The chord from the start of the circle (``t=0``) to ``t``.

        This matches ``Line``, where a parameter change ``t`` maps to the
        displacement from the line's origin.
        """
        return geom.sub(self.point_curve_to_model(t),
                        self.point_curve_to_model(0.0))

    def vector_model_to_curve(self, vector: Sequence[float]) -> Point:
        """Inverse of ``vector_curve_to_model``.

        ``vector`` is taken as a chord starting at ``t=0``; its end point
        is projected onto the circle.
        """
        d = geom.to_vec3(vector)
        end = geom.add(self.point_curve_to_model(0.0), d)
        return Point((self.point_model_to_curve(end).t,), d)


Curve = Union[Line, Circle]


# -----------------------------------------------------------------------------
# Surfaces
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SweptCurve:
    """A surface that was swept from a curve along a path.

    ``(u, v)`` maps to ``curve(u) + v * path``.  A zero ``path`` leaves the
    mapping undefined; callers must not build such a surface.
    """

    curve: Curve
    path: Vec3

    def transform(self, transform: Transform) -> "SweptCurve":
        return SweptCurve(self.curve.transform(transform),
                          transform.transform_vector(self.path))

    def point_model_to_surface(self, point: Sequence[float]) -> Point:
        p = geom.to_vec3(point)
        u = self.curve.point_model_to_curve(p).t
        v = geom.dot(geom.sub(p, self.curve.origin),
                     geom.normalize(self.path)) / geom.mag(self.path)
        return Point((u, v), p)

    def point_surface_to_model(self, point: Sequence[float]) -> Vec3:
        u, v = point[0], point[1]
        return geom.add(self.curve.point_curve_to_model(u),
                        geom.scale(self.path, v))

    def vector_surface_to_model(self, vector: Sequence[float]) -> Vec3:
        u, v = vector[0], vector[1]
        return geom.add(self.curve.vector_curve_to_model(u),
                        geom.scale(self.path, v))


Surface = SweptCurve


def x_y_plane() -> SweptCurve:
    """The x-y plane, with u along x and v along y."""
    return SweptCurve(Line(geom.ORIGIN, geom.UNIT_X), geom.UNIT_Y)


def plane_from_points(points: Sequence[Sequence[float]]) -> SweptCurve:
    """Plane through three points ``a``, ``b``, ``c``.

    The base curve runs from ``a`` to ``b`` and the path is ``c - a``.
    """
    a, b, c = (geom.to_vec3(p) for p in points)
    return SweptCurve(Line.from_points(a, b), geom.sub(c, a))


__all__ = [
    'Point',
    'Line',
    'Circle',
    'Curve',
    'SweptCurve',
    'Surface',
    'x_y_plane',
    'plane_from_points',
]
