"""
Verification helpers for triangulation output.

These do not participate in triangulation itself; they are used by the
command line --verify flag and by the test suite to check the Delaunay
and coverage properties of a result.
"""

from typing import Iterable, List, Sequence, Set, Tuple, Union

import numpy as np
from scipy.spatial import ConvexHull

from .geometry import Point, Triangle
from .point_set import PointSet


def triangle_area(triangle: Triangle) -> float:
    return abs(triangle.signed_area())


def total_area(triangles: Iterable[Triangle]) -> float:
    return float(sum(triangle_area(t) for t in triangles))


def vertex_triples(triangles: Iterable[Triangle]) -> Set[frozenset]:
    """Triangles as order-insignificant sets of point identities."""
    return {frozenset(t.vertices) for t in triangles}


def triangles_to_indices(triangles: Sequence[Triangle],
                         point_set: Union[PointSet, Sequence[Point]]) -> np.ndarray:
    """
    Convert triangles to rows of vertex indices.

    Args:
        triangles: Triangles whose vertices all belong to point_set
        point_set: Points in the order the indices should refer to

    Returns:
        (m, 3) int array
    """
    index = {point: i for i, point in enumerate(point_set)}
    if not triangles:
        return np.empty((0, 3), dtype=np.int64)
    return np.array([[index[t.a], index[t.b], index[t.c]] for t in triangles], dtype=np.int64)


def find_delaunay_violations(triangles: Sequence[Triangle],
                             points: Union[PointSet, Sequence[Point]],
                             tolerance: float = 1e-9) -> List[Tuple[int, int]]:
    """
    Find points lying strictly inside the circumcircle of a triangle.

    The incircle determinant is evaluated for every point against each
    triangle at once with numpy, normalized by the triangle's orientation.
    A triangle's own vertices are skipped.

    Args:
        triangles: Triangulation to check
        points: All input points
        tolerance: Determinant values at or below this count as on the circle

    Returns:
        List of (triangle_index, point_index) pairs; empty for a Delaunay result
    """
    points = list(points)
    if not points or not triangles:
        return []

    index = {point: i for i, point in enumerate(points)}
    coords = np.array([[p.x, p.y] for p in points], dtype=np.float64)
    violations = []

    for t_idx, triangle in enumerate(triangles):
        (ax, ay), (bx, by), (cx, cy) = [(v.x, v.y) for v in triangle.vertices]

        adx = ax - coords[:, 0]
        ady = ay - coords[:, 1]
        bdx = bx - coords[:, 0]
        bdy = by - coords[:, 1]
        cdx = cx - coords[:, 0]
        cdy = cy - coords[:, 1]

        det = ((adx * adx + ady * ady) * (bdx * cdy - cdx * bdy)
               - (bdx * bdx + bdy * bdy) * (adx * cdy - cdx * ady)
               + (cdx * cdx + cdy * cdy) * (adx * bdy - bdx * ady))

        orientation = np.sign((ax - cx) * (by - cy) - (ay - cy) * (bx - cx))
        inside = orientation * det > tolerance

        own = [index[v] for v in triangle.vertices if v in index]
        inside[own] = False

        violations.extend((t_idx, int(p_idx)) for p_idx in np.nonzero(inside)[0])

    return violations


def convex_hull_area(coordinates: np.ndarray) -> float:
    """
    Area of the convex hull of a set of 2D coordinates.

    Args:
        coordinates: (n, 2) array-like

    Returns:
        Hull area; 0.0 when the points do not span a plane
    """
    pts = np.unique(np.asarray(coordinates, dtype=np.float64).reshape(-1, 2), axis=0)
    if len(pts) < 3 or np.linalg.matrix_rank(pts - pts[0]) < 2:
        return 0.0
    # In 2D the hull "volume" is its area
    return float(ConvexHull(pts).volume)
