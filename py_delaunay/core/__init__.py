"""
Core triangulation functionality.
"""

from .geometry import Point, Edge, Triangle, closest_point_on_edge
from .triangle_soup import TriangleSoup
from .point_set import PointSet, invert_permutation
from .alea_prng import AleaPRNG
from .exceptions import TriangulationError, InvalidInputError, TriangulationCancelled
from .triangulator import (
    DelaunayTriangulator, TriangulatorState, TriangulationOptions,
    TriangulationStats, InsertionRecord, triangulate_points,
)

__all__ = ['Point', 'Edge', 'Triangle', 'closest_point_on_edge', 'TriangleSoup',
           'PointSet', 'invert_permutation', 'AleaPRNG',
           'TriangulationError', 'InvalidInputError', 'TriangulationCancelled',
           'DelaunayTriangulator', 'TriangulatorState', 'TriangulationOptions',
           'TriangulationStats', 'InsertionRecord', 'triangulate_points']
