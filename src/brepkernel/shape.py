"""Shape store and handles for brepkernel.

A ``Shape`` owns all geometric objects (points, curves, surfaces) and
topological objects (vertices, edges, cycles, faces) that make up one
shape.  Objects are added with the ``add_*`` methods, each of which
returns a ``Handle`` that refers to the stored object.  Nothing is ever
removed or modified; a shape is created, populated, read, and dropped
as a whole.

Every ``add_*`` method validates the object before storing it.  An object
that refers to a handle issued by a different shape, or that is
structurally unsound, is rejected with a ``ValidationError`` and the
shape is left unchanged.

Copyright (c) 2025 Richard DeVaul
MIT License
"""

from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from brepkernel import geom
from brepkernel.config import MIN_VERTEX_DISTANCE
from brepkernel.geometry import Circle, Line, Point, SweptCurve
from brepkernel.topology import Cycle, Edge, Face, Triangle, Triangles, Vertex

POINT = 'point'
CURVE = 'curve'
SURFACE = 'surface'
VERTEX = 'vertex'
EDGE = 'edge'
CYCLE = 'cycle'
FACE = 'face'

KINDS = (POINT, CURVE, SURFACE, VERTEX, EDGE, CYCLE, FACE)


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------

class ValidationError(ValueError):
    """Exception raised when an object can't be added to a shape."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class ForeignHandleError(ValidationError):
    """An object refers to a handle that was issued by another shape."""


class StructuralError(ValidationError):
    """An object is malformed, or refers to the wrong kind of object."""


# -----------------------------------------------------------------------------
# Handle
# -----------------------------------------------------------------------------

class Handle:
    """Reference to an object stored in a ``Shape``.

    Handles are cheap to copy and share.  ``get()`` returns the referenced
    object.

    Handles compare and hash by the value they refer to, not by the slot
    they occupy.  Two handles into different shapes are equal if the
    objects they refer to are structurally equal.  Use ``Shape.owns()`` to
    ask whether a handle belongs to a particular shape, and ``key`` to
    key a mapping by slot.
    """

    __slots__ = ('_store', '_kind', '_index')

    def __init__(self, store, kind, index):
        self._store = store
        self._kind = kind
        self._index = index

    @property
    def store(self):
        return self._store

    @property
    def kind(self):
        return self._kind

    @property
    def key(self):
        """Identity of the slot this handle refers to.

        Unlike the handle itself, the key tells apart two slots holding
        equal objects.
        """
        return (id(self._store), self._kind, self._index)

    def get(self):
        return self._store._objects[self._kind][self._index]

    def __eq__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return self._kind == other._kind and self.get() == other.get()

    def __hash__(self):
        return hash((self._kind, self.get()))

    def __repr__(self):
        return 'Handle({}#{})'.format(self._kind, self._index)


# -----------------------------------------------------------------------------
# Shape
# -----------------------------------------------------------------------------

class Shape:
    """Append-only store of the geometry and topology of one shape."""

    def __init__(self):
        self._objects = {kind: [] for kind in KINDS}

    def __len__(self):
        return sum(len(objs) for objs in self._objects.values())

    def __repr__(self):
        counts = ', '.join('{}={}'.format(k, len(self._objects[k])) for k in KINDS)
        return 'Shape({})'.format(counts)

    def owns(self, handle) -> bool:
        """Return True if ``handle`` was issued by this shape."""
        return isinstance(handle, Handle) and handle.store is self

    def _insert(self, kind, obj):
        objs = self._objects[kind]
        objs.append(obj)
        return Handle(self, kind, len(objs) - 1)

    def _check_handle(self, handle, kind, context):
        if not isinstance(handle, Handle):
            raise StructuralError(
                f"{context}: expected a {kind} handle, got {handle!r}",
                {'expected': kind, 'got': handle})
        if handle.store is not self:
            raise ForeignHandleError(
                f"{context}: {kind} handle belongs to another shape",
                {'handle': handle})
        if handle.kind != kind:
            raise StructuralError(
                f"{context}: expected a {kind} handle, got a {handle.kind} handle",
                {'expected': kind, 'got': handle.kind})

    # -- geometry -------------------------------------------------------------

    def add_point(self, point) -> Handle:
        """Add a point.

        ``point`` is a ``Point`` or anything ``(x, y, z)``-like, which is
        taken as a model-space location.
        """
        if not isinstance(point, Point):
            try:
                point = Point.from_canonical(point)
            except (TypeError, ValueError) as exc:
                raise StructuralError(f"not a point: {point!r}") from exc
        return self._insert(POINT, point)

    def add_curve(self, curve) -> Handle:
        if not isinstance(curve, (Line, Circle)):
            raise StructuralError(f"not a curve: {curve!r}")
        return self._insert(CURVE, curve)

    def add_surface(self, surface) -> Handle:
        if not isinstance(surface, SweptCurve):
            raise StructuralError(f"not a surface: {surface!r}")
        return self._insert(SURFACE, surface)

    # -- topology -------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> Handle:
        """Add a vertex.

        A vertex lying on top of an existing one is accepted but logged,
        since it usually means a point was recomputed instead of an
        existing vertex handle being reused.
        """
        if not isinstance(vertex, Vertex):
            raise StructuralError(f"not a vertex: {vertex!r}")
        self._check_handle(vertex.point, POINT, 'vertex point')

        location = vertex.location
        for existing in self._objects[VERTEX]:
            if geom.dist(existing.location, location) < MIN_VERTEX_DISTANCE:
                logger.warning(f"Vertex at {location} coincides with an existing vertex")
                break

        return self._insert(VERTEX, vertex)

    def add_edge(self, edge: Edge) -> Handle:
        if not isinstance(edge, Edge):
            raise StructuralError(f"not an edge: {edge!r}")
        self._check_handle(edge.curve, CURVE, 'edge curve')
        if edge.vertices is not None:
            if len(edge.vertices) != 2:
                raise StructuralError(
                    f"edge must have exactly two vertices, got {len(edge.vertices)}")
            for v in edge.vertices:
                self._check_handle(v, VERTEX, 'edge vertex')
        return self._insert(EDGE, edge)

    def add_cycle(self, cycle: Cycle) -> Handle:
        """Add a cycle.

        A cycle is either a single continuous edge, or one or more edges
        that all have vertices.
        """
        if not isinstance(cycle, Cycle):
            raise StructuralError(f"not a cycle: {cycle!r}")
        if not cycle.edges:
            raise StructuralError("cycle must have at least one edge")
        for e in cycle.edges:
            self._check_handle(e, EDGE, 'cycle edge')
        if len(cycle.edges) > 1:
            continuous = [i for i, e in enumerate(cycle.edges)
                          if e.get().is_continuous]
            if continuous:
                raise StructuralError(
                    "continuous edges can only form a cycle on their own",
                    {'continuous_edges': continuous})
        return self._insert(CYCLE, cycle)

    def add_face(self, face) -> Handle:
        if isinstance(face, Face):
            self._check_handle(face.surface, SURFACE, 'face surface')
            for c in face.cycles:
                self._check_handle(c, CYCLE, 'face cycle')
        elif isinstance(face, Triangles):
            bad = [t for t in face.triangles if not isinstance(t, Triangle)]
            if bad:
                raise StructuralError(f"not a triangle: {bad[0]!r}")
        else:
            raise StructuralError(f"not a face: {face!r}")
        return self._insert(FACE, face)

    # -- convenience ----------------------------------------------------------

    def add_line_segment(self, vertices: Sequence[Handle]) -> Handle:
        """Add a straight edge between two existing vertices.

        The line curve runs from the first vertex (t=0) to the second (t=1).
        The two vertices must lie apart.
        """
        vertices = tuple(vertices)
        if len(vertices) != 2:
            raise StructuralError(
                f"line segment needs exactly two vertices, got {len(vertices)}")
        a, b = vertices
        self._check_handle(a, VERTEX, 'line segment vertex')
        self._check_handle(b, VERTEX, 'line segment vertex')
        if geom.dist(a.get().location, b.get().location) < geom.EPSILON:
            raise StructuralError(
                "line segment vertices coincide",
                {'vertices': vertices})
        curve = self.add_curve(Line.from_points(a.get().location,
                                                b.get().location))
        return self.add_edge(Edge(curve, (a, b)))

    def add_circle(self, radius: float, center=geom.ORIGIN) -> Handle:
        """Add a continuous circular edge, parallel to the x-y plane."""
        curve = self.add_curve(Circle.from_radius(center, radius))
        return self.add_edge(Edge(curve, None))

    # -- access ---------------------------------------------------------------

    def _handles(self, kind) -> List[Handle]:
        return [Handle(self, kind, i) for i in range(len(self._objects[kind]))]

    def points(self) -> List[Handle]:
        return self._handles(POINT)

    def curves(self) -> List[Handle]:
        return self._handles(CURVE)

    def surfaces(self) -> List[Handle]:
        return self._handles(SURFACE)

    def vertices(self) -> List[Handle]:
        return self._handles(VERTEX)

    def edges(self) -> List[Handle]:
        return self._handles(EDGE)

    def cycles(self) -> List[Handle]:
        return self._handles(CYCLE)

    def faces(self) -> List[Handle]:
        """All faces, in the order they were added."""
        return self._handles(FACE)


__all__ = [
    'ValidationError',
    'ForeignHandleError',
    'StructuralError',
    'Handle',
    'Shape',
]
