"""Indexed triangle meshes, the output of face triangulation."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from brepkernel.geom import Vec3
from brepkernel.topology import Color, Triangle

Index = int


class Mesh:
    """A triangle mesh with shared vertices and per-triangle color.

    Vertices are deduplicated by exact coordinates, so triangles that were
    built from the same vertex share an index.
    """

    def __init__(self):
        self._vertices: List[Vec3] = []
        self._indices_by_vertex: Dict[Vec3, Index] = {}
        self._triangles: List[Tuple[Index, Index, Index]] = []
        self._colors: List[Color] = []

    def __len__(self):
        return len(self._triangles)

    def _index_for_vertex(self, vertex: Vec3) -> Index:
        index = self._indices_by_vertex.get(vertex)
        if index is None:
            index = len(self._vertices)
            self._vertices.append(vertex)
            self._indices_by_vertex[vertex] = index
        return index

    def triangle(self, triangle: Triangle) -> None:
        """Add a triangle.

        Raises ``ValueError`` if two of its points are equal.
        """
        v0, v1, v2 = triangle.points
        if v0 == v1 or v1 == v2 or v2 == v0:
            raise ValueError('degenerate triangle: {}'.format(triangle.points))
        self._triangles.append((self._index_for_vertex(v0),
                                self._index_for_vertex(v1),
                                self._index_for_vertex(v2)))
        self._colors.append(triangle.color)

    def vertices(self) -> Iterator[Vec3]:
        return iter(self._vertices)

    def indices(self) -> Iterator[Index]:
        for tri in self._triangles:
            yield from tri

    def triangle_vertices(self) -> Iterator[Tuple[Vec3, Vec3, Vec3]]:
        for a, b, c in self._triangles:
            yield self._vertices[a], self._vertices[b], self._vertices[c]

    def triangle_indices(self) -> Iterator[Tuple[Index, Index, Index]]:
        return iter(self._triangles)

    def triangle_colors(self) -> Iterator[Color]:
        return iter(self._colors)


__all__ = ['Index', 'Mesh']
