"""
Incremental 2D Delaunay triangulation.
"""

from .core import (
    Point, Edge, Triangle, TriangleSoup, PointSet, AleaPRNG,
    DelaunayTriangulator, TriangulationOptions, triangulate_points,
    TriangulationError, InvalidInputError, TriangulationCancelled,
)

__version__ = "0.1.0"

__all__ = ['Point', 'Edge', 'Triangle', 'TriangleSoup', 'PointSet', 'AleaPRNG',
           'DelaunayTriangulator', 'TriangulationOptions', 'triangulate_points',
           'TriangulationError', 'InvalidInputError', 'TriangulationCancelled']
