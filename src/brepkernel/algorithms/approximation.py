"""Polyline approximation of curves, edges, cycles and faces.

An approximation is a sequence of 3D points that stays within a given
tolerance of the exact geometry.  Approximations are deterministic: the
same input and tolerance always produce the same points, and a smaller
tolerance never produces fewer points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import acos, ceil, pi
from typing import List, Tuple

from loguru import logger

from brepkernel.geom import Vec3
from brepkernel.geometry import Circle, Line


def circle_vertex_count(radius: float, tolerance: float) -> int:
    """Number of vertices of the regular polygon approximating a circle.

    The polygon is inscribed in the circle.  ``tolerance`` bounds the
    distance between circle and polygon, which is the difference between
    the circle's radius and the polygon's inradius.
    """
    if tolerance <= 0.0:
        raise ValueError('circle approximation needs a positive tolerance, got {}'.format(tolerance))
    if tolerance > radius / 2.0:
        return 3
    return int(ceil(pi / acos(1.0 - tolerance / radius)))


def approximate_curve(curve, tolerance: float, bounds=None) -> List[Vec3]:
    """Points approximating the interior of a curve.

    For a closed curve without ``bounds``, the points go once around the
    curve, starting at ``t=0``, without repeating the first point.  With
    ``bounds = (t0, t1)``, only the points strictly between the two curve
    parameters are returned, and the caller supplies the endpoints.

    Lines are represented exactly by their endpoints, so they contribute
    no points.
    """
    if isinstance(curve, Line):
        return []
    if isinstance(curve, Circle):
        n = circle_vertex_count(curve.radius, tolerance)
        step = 2.0 * pi / n
        params = [step * i for i in range(n)]
        if bounds is not None:
            t0, t1 = bounds
            span = (t1 - t0) % (2.0 * pi)
            params = [t for t in params if 0.0 < (t - t0) % (2.0 * pi) < span]
            params.sort(key=lambda t: (t - t0) % (2.0 * pi))
        return [curve.point_curve_to_model(t) for t in params]
    raise ValueError('unknown curve type: {}'.format(curve))


def approximate_edge(edge, tolerance: float) -> List[Vec3]:
    """Points approximating an edge, from its start to its end.

    The points of a bounded edge start and end with the exact locations of
    its vertices, so approximations of neighboring edges meet in exactly
    the same point.  A continuous edge repeats its first point at the end.
    """
    curve = edge.curve.get()
    if edge.vertices is None:
        points = approximate_curve(curve, tolerance)
        if points:
            points.append(points[0])
        return points

    a, b = (v.get() for v in edge.vertices)
    bounds = None
    if not isinstance(curve, Line):
        bounds = (a.to_1d(curve).t, b.to_1d(curve).t)
    points = approximate_curve(curve, tolerance, bounds)
    return [a.location] + points + [b.location]


def approximate_cycle(cycle, tolerance: float) -> List[Vec3]:
    """Closed polyline approximating a cycle.

    The first point is repeated at the end.  Consecutive duplicates, as
    produced where one edge ends and the next begins, are removed.

    Edges are walked by connectivity: after each edge, the next one is the
    first remaining edge that starts (or, reversed, ends) where the
    previous one ended.  For a cycle whose edges are already listed head
    to tail this is simply the listed order.
    """
    pieces = [approximate_edge(e.get(), tolerance) for e in cycle.edges]
    pieces = [piece for piece in pieces if piece]

    points: List[Vec3] = []
    while pieces:
        index, piece = 0, pieces[0]
        if points:
            for i, candidate in enumerate(pieces):
                if candidate[0] == points[-1]:
                    index, piece = i, candidate
                    break
                if candidate[-1] == points[-1]:
                    index, piece = i, candidate[::-1]
                    break
        pieces.pop(index)
        for p in piece:
            if points and points[-1] == p:
                continue
            points.append(p)

    logger.debug(f"Approximated cycle of {len(cycle.edges)} edge(s) with {len(points)} points")
    return points


@dataclass
class Approximation:
    """Approximation of a face.

    ``loops`` holds one closed polyline per cycle, in the order of the
    face's cycles.  ``points`` are the distinct points of all loops and
    ``segments`` the line segments between consecutive loop points.
    """

    points: List[Vec3] = field(default_factory=list)
    segments: List[Tuple[Vec3, Vec3]] = field(default_factory=list)
    loops: List[List[Vec3]] = field(default_factory=list)


def approximate_face(face, tolerance: float) -> Approximation:
    result = Approximation()
    seen = set()
    for cycle in face.get_cycles():
        loop = approximate_cycle(cycle, tolerance)
        result.loops.append(loop)
        for p in loop:
            if p not in seen:
                seen.add(p)
                result.points.append(p)
        for a, b in zip(loop, loop[1:]):
            result.segments.append((a, b))
    return result


__all__ = [
    'Approximation',
    'circle_vertex_count',
    'approximate_curve',
    'approximate_edge',
    'approximate_cycle',
    'approximate_face',
]
