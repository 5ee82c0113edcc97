"""Working collection of triangles used during incremental triangulation."""

from collections import defaultdict
from typing import Dict, Iterator, List, Optional

from .geometry import Edge, EdgeLike, Point, Triangle, _endpoints, distance_sq_to_edge


class TriangleSoup:
    """
    Unordered multiset of triangles with neighbor and location queries.

    Triangles are kept in insertion order (a dict used as an ordered set,
    so removal by identity is O(1)). An edge -> triangles index answers
    neighbor queries without scanning; it returns the same triangle a
    scan in iteration order would, because both preserve insertion order.
    Containment, nearest-edge and vertex pruning still scan everything.
    """

    def __init__(self):
        self._triangles: Dict[Triangle, None] = {}
        self._edge_index: Dict[frozenset, List[Triangle]] = defaultdict(list)

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def __contains__(self, triangle: Triangle) -> bool:
        return triangle in self._triangles

    def add(self, triangle: Triangle) -> None:
        self._triangles[triangle] = None
        for edge in triangle.edges():
            self._edge_index[edge.key].append(triangle)

    def remove(self, triangle: Triangle) -> bool:
        """Remove a triangle by identity. Returns False if it was not present."""
        if triangle not in self._triangles:
            return False
        del self._triangles[triangle]

        for edge in triangle.edges():
            key = edge.key
            sharing = self._edge_index[key]
            sharing.remove(triangle)
            if not sharing:
                del self._edge_index[key]
        return True

    def get_triangles(self) -> List[Triangle]:
        return list(self._triangles)

    def find_containing_triangle(self, point: Point) -> Optional[Triangle]:
        """
        Return the first triangle that strictly contains the point.

        None means the point lies outside every triangle or exactly on an
        edge; both cases are handled by edge insertion.
        """
        for triangle in self._triangles:
            if triangle.contains(point):
                return triangle
        return None

    def find_neighbor(self, triangle: Triangle, edge_or_a: EdgeLike,
                      b: Optional[Point] = None) -> Optional[Triangle]:
        """
        Return the other triangle sharing an edge with the given triangle.

        Args:
            triangle: Triangle to exclude from the result
            edge_or_a: Shared Edge, or its first endpoint
            b: Second endpoint when edge_or_a is a Point

        Returns:
            Neighbor triangle, or None if the edge is on the soup boundary
        """
        ea, eb = _endpoints(edge_or_a, b)
        for candidate in self._edge_index.get(frozenset((ea, eb)), ()):
            if candidate is not triangle:
                return candidate
        return None

    def find_one_triangle_sharing(self, edge_or_a: EdgeLike,
                                  b: Optional[Point] = None) -> Optional[Triangle]:
        ea, eb = _endpoints(edge_or_a, b)
        sharing = self._edge_index.get(frozenset((ea, eb)))
        return sharing[0] if sharing else None

    def find_nearest_edge(self, point: Point) -> Optional[Edge]:
        """
        Return the edge of any triangle that is closest to the point.

        Every edge of every triangle is measured by the squared distance from
        the point to its clamped projection on the segment. Ties keep the
        first edge found in iteration order.

        Args:
            point: Query point

        Returns:
            Nearest Edge, or None for an empty soup
        """
        nearest = None
        nearest_distance = float("inf")

        for triangle in self._triangles:
            for edge in triangle.edges():
                distance = distance_sq_to_edge(edge, point)
                if distance < nearest_distance:
                    nearest = edge
                    nearest_distance = distance

        return nearest

    def remove_triangles_using(self, vertex: Point) -> int:
        """Remove every triangle that has the given vertex. Returns the count removed."""
        doomed = [triangle for triangle in self._triangles if triangle.has_vertex(vertex)]
        for triangle in doomed:
            self.remove(triangle)
        return len(doomed)
