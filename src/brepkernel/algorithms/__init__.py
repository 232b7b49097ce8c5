"""Algorithms that operate on shapes.

Algorithmic code is collected here, to keep the geometry and topology
modules focused on representing shapes.
"""

from brepkernel.algorithms.approximation import (
    Approximation,
    approximate_curve,
    approximate_cycle,
    approximate_edge,
    approximate_face,
)
from brepkernel.algorithms.sweep import InternalConsistencyError, sweep_shape
from brepkernel.algorithms.triangulation import triangulate, triangulate_face

__all__ = [
    'Approximation',
    'approximate_curve',
    'approximate_cycle',
    'approximate_edge',
    'approximate_face',
    'InternalConsistencyError',
    'sweep_shape',
    'triangulate',
    'triangulate_face',
]
