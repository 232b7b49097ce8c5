"""Sweep a shape along a path to create a new shape.

``sweep_shape()`` reads a source shape and builds a completely new target
shape.  Each source vertex, edge and cycle gets a bottom copy (in place)
and a top copy (translated along the path).  Each source face gets a
bottom cap and a top cap, and each source cycle gets side faces that
connect bottom and top.

A cycle consisting of one continuous edge sweeps into a tube that can't be
expressed in boundary representation yet.  That side wall is created as
a ``Triangles`` face instead, from an approximation of the cycle.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from loguru import logger

from brepkernel import geom
from brepkernel.algorithms.approximation import approximate_cycle
from brepkernel.geometry import Line, SweptCurve
from brepkernel.shape import Handle, Shape
from brepkernel.topology import Color, Cycle, Edge, Face, Triangle, Triangles, Vertex
from brepkernel.xform import Translation

HandleKey = Tuple[int, str, int]


class InternalConsistencyError(RuntimeError):
    """A lookup that must succeed by construction has failed.

    This indicates a bug in the sweep bookkeeping.  The sweep is aborted,
    as continuing would produce a corrupt shape.
    """


class Relation:
    """Maps handles of a source shape to handles of a target shape.

    Entries are keyed by ``Handle.key``, so two source objects that happen
    to be equal (two vertices at the same point, say) keep separate
    entries.
    """

    def __init__(self, name):
        self.name = name
        self.vertices: Dict[HandleKey, Handle] = {}
        self.edges: Dict[HandleKey, Handle] = {}
        self.cycles: Dict[HandleKey, Handle] = {}

    def _lookup(self, table, kind, handle):
        try:
            return table[handle.key]
        except KeyError:
            raise InternalConsistencyError(
                f"no {self.name} {kind} for source {kind} {handle!r}") from None

    def vertex(self, handle: Handle) -> Handle:
        return self._lookup(self.vertices, 'vertex', handle)

    def edge(self, handle: Handle) -> Handle:
        return self._lookup(self.edges, 'edge', handle)

    def cycle(self, handle: Handle) -> Handle:
        return self._lookup(self.cycles, 'cycle', handle)

    def vertices_for_edge(self, edge: Handle) -> Optional[Tuple[Handle, Handle]]:
        vertices = edge.get().vertices
        if vertices is None:
            return None
        a, b = vertices
        return (self.vertex(a), self.vertex(b))

    def edges_for_cycle(self, cycle: Handle) -> List[Handle]:
        return [self.edge(e) for e in cycle.get().edges]

    def cycles_for_face(self, face: Face) -> List[Handle]:
        return [self.cycle(c) for c in face.cycles]


def sweep_shape(source: Shape, path, tolerance: float, color: Color) -> Shape:
    """Create a new shape by sweeping ``source`` along ``path``.

    Parameters
    ----------
    source : Shape
        The shape to sweep.  It is only read, never modified.
    path : vector
        The sweep direction and distance.
    tolerance : float
        Approximation tolerance, used only for continuous edges.
    color : tuple
        RGBA color applied to every created face and triangle.

    Returns
    -------
    Shape
        A new shape that shares no handles with ``source``.

    Raises
    ------
    TypeError
        If ``source`` contains a ``Triangles`` face.
    InternalConsistencyError
        If the handle bookkeeping is inconsistent.
    """
    path = geom.to_vec3(path)
    color = tuple(color)
    target = Shape()
    translation = Translation(path)

    source_to_bottom = Relation('bottom')
    source_to_top = Relation('top')

    logger.debug(f"Sweeping {source!r} along {path}")

    # vertices
    for vertex_source in source.vertices():
        point_bottom = target.add_point(vertex_source.get().point.get())
        point_top = target.add_point(point_bottom.get() + path)

        vertex_bottom = target.add_vertex(Vertex(point_bottom))
        vertex_top = target.add_vertex(Vertex(point_top))

        source_to_bottom.vertices[vertex_source.key] = vertex_bottom
        source_to_top.vertices[vertex_source.key] = vertex_top

    # edges
    for edge_source in source.edges():
        curve_bottom = target.add_curve(edge_source.get().curve.get())
        curve_top = target.add_curve(curve_bottom.get().transform(translation))

        edge_bottom = target.add_edge(
            Edge(curve_bottom, source_to_bottom.vertices_for_edge(edge_source)))
        edge_top = target.add_edge(
            Edge(curve_top, source_to_top.vertices_for_edge(edge_source)))

        source_to_bottom.edges[edge_source.key] = edge_bottom
        source_to_top.edges[edge_source.key] = edge_top

    # cycles
    for cycle_source in source.cycles():
        cycle_bottom = target.add_cycle(
            Cycle(source_to_bottom.edges_for_cycle(cycle_source)))
        cycle_top = target.add_cycle(
            Cycle(source_to_top.edges_for_cycle(cycle_source)))

        source_to_bottom.cycles[cycle_source.key] = cycle_bottom
        source_to_top.cycles[cycle_source.key] = cycle_top

    # bottom and top caps
    for face_source in source.faces():
        face = face_source.get()
        if not isinstance(face, Face):
            raise TypeError('only boundary-rep faces can be swept, got {!r}'.format(face))

        surface_bottom = target.add_surface(face.get_surface())
        surface_top = target.add_surface(surface_bottom.get().transform(translation))

        target.add_face(Face(surface_bottom,
                             source_to_bottom.cycles_for_face(face), color))
        target.add_face(Face(surface_top,
                             source_to_top.cycles_for_face(face), color))

    # side walls; side edges are keyed by bottom vertex and shared by all
    # side faces that meet there
    side_edges: Dict[HandleKey, Handle] = {}
    for cycle_source in source.cycles():
        if cycle_source.get().is_continuous:
            _sweep_continuous_cycle(target, cycle_source.get(), path,
                                    tolerance, color)
        else:
            _sweep_cycle(target, cycle_source.get(), path, color,
                         source_to_bottom, source_to_top, side_edges)

    logger.debug(f"Sweep created {target!r}")
    return target


def _sweep_continuous_cycle(target, cycle, path, tolerance, color):
    # TODO: express the tube in boundary representation once continuous
    # faces can be approximated, and drop the triangle fallback.
    approx = approximate_cycle(cycle, tolerance)

    triangles = []
    for v0, v1 in zip(approx, approx[1:]):
        v3 = geom.add(v0, path)
        v2 = geom.add(v1, path)
        triangles.append(Triangle((v0, v1, v2), color))
        triangles.append(Triangle((v0, v2, v3), color))

    target.add_face(Triangles(triangles))


def _sweep_cycle(target, cycle, path, color, source_to_bottom, source_to_top,
                 vertex_bottom_to_edge):
    def side_edge(vertex_source):
        vertex_bottom = source_to_bottom.vertex(vertex_source)
        if vertex_bottom.key not in vertex_bottom_to_edge:
            vertex_top = source_to_top.vertex(vertex_source)
            curve = target.add_curve(Line(vertex_bottom.get().location, path))
            vertex_bottom_to_edge[vertex_bottom.key] = target.add_edge(
                Edge(curve, (vertex_bottom, vertex_top)))
        return vertex_bottom_to_edge[vertex_bottom.key]

    for edge_source in cycle.edges:
        vertices_source = edge_source.get().vertices
        if vertices_source is None:
            raise InternalConsistencyError(
                f"continuous edge {edge_source!r} in a cycle of {len(cycle.edges)} edges")

        side_edge_a, side_edge_b = (side_edge(v) for v in vertices_source)

        bottom_edge = source_to_bottom.edge(edge_source)
        top_edge = source_to_top.edge(edge_source)

        surface = target.add_surface(SweptCurve(bottom_edge.get().curve.get(), path))
        side_cycle = target.add_cycle(
            Cycle([bottom_edge, top_edge, side_edge_a, side_edge_b]))
        target.add_face(Face(surface, [side_cycle], color))


__all__ = [
    'InternalConsistencyError',
    'Relation',
    'sweep_shape',
]
