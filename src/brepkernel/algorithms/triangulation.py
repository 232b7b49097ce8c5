"""Triangulation of shape faces into a renderable mesh.

We delegate to ``mapbox-earcut`` (the fast ear clipping implementation
used by Mapbox GL).  A boundary-rep face is approximated, its cycles are
projected into the face's surface coordinates, ear clipped there (first
cycle as the outer boundary, the rest as holes), and the triangles are
lifted back to the exact model-space points of the approximation.

``Triangles`` faces are already triangulated and are passed through.
Either way every triangle carries the face's color.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate faces"
    ) from exc

from loguru import logger

from brepkernel.config import DEFAULT_TOLERANCE, EPSILON
from brepkernel.algorithms.approximation import approximate_face
from brepkernel.geom import Vec3
from brepkernel.mesh import Mesh
from brepkernel.topology import Face, Triangle, Triangles

Point2D = Tuple[float, float]
LoopEntry = Tuple[Point2D, Vec3]


def triangulate(shape, tolerance: float = DEFAULT_TOLERANCE,
                mesh: Optional[Mesh] = None) -> Mesh:
    """Triangulate all faces of ``shape`` into ``mesh`` (a new one by default)."""

    if mesh is None:
        mesh = Mesh()
    for handle in shape.faces():
        for triangle in triangulate_face(handle.get(), tolerance):
            mesh.triangle(triangle)
    logger.debug(f"Triangulated {len(shape.faces())} face(s) into {len(mesh)} triangles")
    return mesh


def triangulate_face(face, tolerance: float = DEFAULT_TOLERANCE) -> List[Triangle]:
    """Return triangles covering ``face``.

    Triangles are wound counter-clockwise in the face's surface
    coordinates.  Degenerate cycles (fewer than three distinct points) are
    ignored; a face whose outer cycle is degenerate yields no triangles.
    """

    if isinstance(face, Triangles):
        return list(face.triangles)
    if not isinstance(face, Face):
        raise ValueError('not a face: {!r}'.format(face))

    surface = face.get_surface()
    rings: List[List[LoopEntry]] = []
    for i, points in enumerate(approximate_face(face, tolerance).loops):
        loop = _prepare_loop(surface, points, want_ccw=(i == 0))
        if len(loop) < 3:
            if i == 0:
                return []
            continue
        rings.append(loop)
    if not rings:
        return []

    entries = [entry for ring in rings for entry in ring]
    vertices = np.asarray([uv for uv, _ in entries], dtype=np.float64).reshape(-1, 2)
    ring_ends = np.asarray(np.cumsum([len(ring) for ring in rings]), dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, ring_ends)

    triangles: List[Triangle] = []
    for i in range(0, len(indices), 3):
        a, b, c = (entries[int(indices[i + k])] for k in range(3))
        if _signed_area([a[0], b[0], c[0]]) < 0:
            b, c = c, b
        triangles.append(Triangle((a[1], b[1], c[1]), face.color))
    return triangles


def _prepare_loop(surface, points: Sequence[Vec3], *, want_ccw: bool) -> List[LoopEntry]:
    loop: List[LoopEntry] = []
    for p in points:
        uv = surface.point_model_to_surface(p).native
        entry = ((uv[0], uv[1]), p)
        if loop and _near(loop[-1][0], entry[0]):
            continue
        loop.append(entry)
    if loop and _near(loop[0][0], loop[-1][0]):
        loop.pop()
    if len(loop) < 3:
        return loop
    area = _signed_area([uv for uv, _ in loop])
    if want_ccw and area < 0:
        loop.reverse()
    elif not want_ccw and area > 0:
        loop.reverse()
    return loop


def _near(p1: Point2D, p2: Point2D) -> bool:
    return abs(p1[0] - p2[0]) <= EPSILON and abs(p1[1] - p2[1]) <= EPSILON


def _signed_area(loop: Sequence[Point2D]) -> float:
    total = 0.0
    for i, (x0, y0) in enumerate(loop):
        x1, y1 = loop[(i + 1) % len(loop)]
        total += x0 * y1 - x1 * y0
    return total / 2.0


__all__ = ['triangulate', 'triangulate_face']
