"""Vector helpers for brepkernel.

Points and vectors are plain ``(x, y, z)`` tuples of floats.  Tuples are
immutable and hashable, which lets geometry values built from them be
compared and used as dictionary keys without copying.

Scalars are ordinary Python ``float`` numbers, so the usual
double-precision limits apply.  Comparisons that need slack use
``brepkernel.config.EPSILON``.
"""

from __future__ import annotations

from math import sqrt
from typing import Sequence, Tuple

from brepkernel.config import EPSILON

Vec3 = Tuple[float, float, float]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)
UNIT_X: Vec3 = (1.0, 0.0, 0.0)
UNIT_Y: Vec3 = (0.0, 1.0, 0.0)
UNIT_Z: Vec3 = (0.0, 0.0, 1.0)


def to_vec3(point_like: Sequence[float]) -> Vec3:
    """Return the XYZ components of a point or vector as a float tuple."""

    if len(point_like) < 3:
        raise ValueError("value must have at least three components")
    return float(point_like[0]), float(point_like[1]), float(point_like[2])


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, c: float) -> Vec3:
    return (a[0] * c, a[1] * c, a[2] * c)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def mag(a: Vec3) -> float:
    return sqrt(dot(a, a))


def dist(a: Vec3, b: Vec3) -> float:
    """Distance between two points."""
    return mag(sub(a, b))


def normalize(a: Vec3) -> Vec3:
    """Return the unit vector pointing along ``a``.

    Raises ``ValueError`` for (near) zero-length vectors, since they have
    no direction.
    """
    m = mag(a)
    if m < EPSILON:
        raise ValueError('cannot normalize zero-length vector: {}'.format(a))
    return scale(a, 1.0 / m)


def close(a: float, b: float, tol: float = EPSILON) -> bool:
    return abs(a - b) < tol


def vclose(a: Vec3, b: Vec3, tol: float = EPSILON) -> bool:
    """Return ``True`` if two points are within ``tol`` of each other."""
    return dist(a, b) < tol


__all__ = [
    'Vec3',
    'ORIGIN',
    'UNIT_X',
    'UNIT_Y',
    'UNIT_Z',
    'to_vec3',
    'add',
    'sub',
    'scale',
    'dot',
    'cross',
    'mag',
    'dist',
    'normalize',
    'close',
    'vclose',
]
