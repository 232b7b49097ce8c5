"""Topological entities for brepkernel.

Topology hierarchy:
- Vertex: refers to a point in the shape's geometry
- Edge: refers to a curve, bounded by two vertices or continuous
- Cycle: ordered, closed loop of edges
- Face: surface bounded by cycles (or, as a legacy representation, a
  list of triangles)

Topological entities only refer to other objects through ``Handle``s
issued by a ``brepkernel.shape.Shape``.  They are immutable: a changed
shape is expressed by adding new objects, never by editing old ones.

Equality
--------
Handles compare by the value they refer to, so all entities here compare
structurally, down to the geometry.  ``Face`` ignores its color.  The
``Triangles`` face representation is never compared; doing so raises
``TypeError``.

Vertex uniqueness
-----------------
Never create a new ``Vertex`` for a vertex that already exists.  Copy the
existing handle instead.  A point recomputed from other geometry will
differ by rounding, and two vertices that should be the same would then
compare unequal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from brepkernel import geom
from brepkernel.config import DEFAULT_COLOR
from brepkernel.geom import Vec3

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """A vertex, referring to a ``Point`` in the shape's geometry."""

    point: "Handle"

    @property
    def location(self) -> Vec3:
        """The vertex's 3D model-space location."""
        return self.point.get().canonical

    def to_1d(self, curve):
        """Express the vertex in the coordinates of ``curve``.

        Returns a ``Point`` whose native form is the curve parameter and
        whose canonical form is the vertex location.
        """
        return curve.point_model_to_curve(self.location)


@dataclass(frozen=True)
class Edge:
    """An edge, referring to a curve.

    ``vertices`` is a pair of vertex handles bounding the edge, or ``None``
    for a continuous edge, whose curve closes on itself.
    """

    curve: "Handle"
    vertices: Optional[Tuple["Handle", "Handle"]] = None

    def __post_init__(self):
        if self.vertices is not None:
            object.__setattr__(self, 'vertices', tuple(self.vertices))

    @property
    def is_continuous(self) -> bool:
        return self.vertices is None


@dataclass(frozen=True)
class Cycle:
    """A closed loop of edges, in order."""

    edges: Tuple["Handle", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'edges', tuple(self.edges))

    @property
    def is_continuous(self) -> bool:
        """True if this is a single continuous edge closing on itself."""
        return len(self.edges) == 1 and self.edges[0].get().is_continuous


@dataclass(frozen=True)
class Face:
    """A face, defined by a surface and bounded by cycles in that surface.

    The first cycle is the outer boundary, any further cycles are holes.
    ``color`` is RGBA and does not take part in equality.
    """

    surface: "Handle"
    cycles: Tuple["Handle", ...] = ()
    color: Color = field(default=DEFAULT_COLOR, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'cycles', tuple(self.cycles))
        object.__setattr__(self, 'color', tuple(self.color))

    def get_surface(self):
        """The surface geometry this face lies in."""
        return self.surface.get()

    def get_cycles(self) -> List[Cycle]:
        return [c.get() for c in self.cycles]


@dataclass(frozen=True)
class Triangle:
    """A colored triangle in model space."""

    points: Tuple[Vec3, Vec3, Vec3]
    color: Color = DEFAULT_COLOR

    def __post_init__(self):
        object.__setattr__(self, 'points',
                           tuple(geom.to_vec3(p) for p in self.points))
        object.__setattr__(self, 'color', tuple(self.color))

    def normal(self) -> Optional[Vec3]:
        """Unit normal by the right-hand rule, ``None`` if degenerate."""
        a, b, c = self.points
        n = geom.cross(geom.sub(b, a), geom.sub(c, a))
        if geom.mag(n) <= geom.EPSILON:
            return None
        return geom.normalize(n)


class Triangles:
    """A face represented directly as a list of triangles.

    This is a legacy representation, used only where a boundary
    representation can't be expressed yet (the side wall swept from a
    continuous edge).  It has no surface and no cycles, and it is not
    comparable.
    """

    def __init__(self, triangles: Sequence[Triangle]):
        self.triangles = list(triangles)

    def __repr__(self):
        return 'Triangles({} triangles)'.format(len(self.triangles))

    def __eq__(self, other):
        raise TypeError('triangle faces are not comparable')

    def __hash__(self):
        raise TypeError('triangle faces are not hashable')

    def get_surface(self):
        raise TypeError('triangle faces have no surface')

    def get_cycles(self):
        raise TypeError('triangle faces have no cycles')


__all__ = [
    'Color',
    'Vertex',
    'Edge',
    'Cycle',
    'Face',
    'Triangle',
    'Triangles',
]
