"""
Geometric primitives for the incremental Delaunay triangulator.

Points, edges and triangles are compared by identity rather than by value:
two points with the same coordinates are still two distinct vertices.
All three types are immutable; the triangulator creates new triangles
instead of editing existing ones.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, eq=False)
class Point:
    """A 2D coordinate with identity semantics."""
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def length_sq(self) -> float:
        """Squared length when the point is read as a vector from the origin."""
        return self.x * self.x + self.y * self.y

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """Unordered pair of point identities.

    The (a, b) orientation is kept for bookkeeping, but two edges are equal
    whenever they join the same two point objects.
    """
    a: Point
    b: Point

    @property
    def key(self) -> frozenset:
        return frozenset((self.a, self.b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Edge({self.a!r}, {self.b!r})"


EdgeLike = Union[Edge, Point]


def _endpoints(edge_or_a: EdgeLike, b: Optional[Point] = None) -> Tuple[Point, Point]:
    """Accept either an Edge or two points and return the two endpoints."""
    if isinstance(edge_or_a, Edge):
        return edge_or_a.a, edge_or_a.b
    if b is None:
        raise TypeError("Expected an Edge or two Points")
    return edge_or_a, b


def _has_same_strict_sign(p: float, q: float, r: float) -> bool:
    return (p > 0.0 and q > 0.0 and r > 0.0) or (p < 0.0 and q < 0.0 and r < 0.0)


@dataclass(frozen=True, eq=False)
class Triangle:
    """Three point identities plus the predicates the triangulator needs."""
    a: Point
    b: Point
    c: Point

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return self.a, self.b, self.c

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)

    def contains(self, point: Point) -> bool:
        """
        Test whether a point lies strictly inside this triangle.

        Uses three half-plane (cross product) tests, one per edge. A point
        exactly on an edge or a vertex gives a zero cross product and is
        reported as not contained, so the caller routes it to edge insertion.

        Args:
            point: Point to classify

        Returns:
            True iff all three cross products are nonzero and share a sign
        """
        a, b, c = self.a, self.b, self.c

        pab = (point.y - a.y) * (b.x - a.x) - (point.x - a.x) * (b.y - a.y)
        pbc = (point.y - b.y) * (c.x - b.x) - (point.x - b.x) * (c.y - b.y)
        pca = (point.y - c.y) * (a.x - c.x) - (point.x - c.x) * (a.y - c.y)

        return _has_same_strict_sign(pab, pbc, pca)

    def is_oriented_ccw(self) -> bool:
        """Sign of det(a - c, b - c); True means counterclockwise winding."""
        a11 = self.a.x - self.c.x
        a21 = self.b.x - self.c.x
        a12 = self.a.y - self.c.y
        a22 = self.b.y - self.c.y

        return a11 * a22 - a12 * a21 > 0.0

    def is_point_in_circumcircle(self, point: Point) -> bool:
        """
        Test whether a point lies strictly inside the circumcircle.

        Builds the 3x3 incircle determinant from (vertex - point) and its
        squared length for each vertex. For a counterclockwise triangle a
        positive determinant means inside; the sign is reversed for clockwise
        triangles. Cocircular points (determinant 0) are outside.

        Args:
            point: Point to test

        Returns:
            True iff point is inside the circle through a, b and c
        """
        a11 = self.a.x - point.x
        a21 = self.b.x - point.x
        a31 = self.c.x - point.x

        a12 = self.a.y - point.y
        a22 = self.b.y - point.y
        a32 = self.c.y - point.y

        a13 = a11 * a11 + a12 * a12
        a23 = a21 * a21 + a22 * a22
        a33 = a31 * a31 + a32 * a32

        det = (a11 * a22 * a33 + a12 * a23 * a31 + a13 * a21 * a32
               - a13 * a22 * a31 - a12 * a21 * a33 - a11 * a23 * a32)

        if self.is_oriented_ccw():
            return det > 0.0
        return det < 0.0

    def is_neighbor(self, edge_or_a: EdgeLike, b: Optional[Point] = None) -> bool:
        """True iff both endpoints of the edge are vertices of this triangle."""
        ea, eb = _endpoints(edge_or_a, b)
        return self.has_vertex(ea) and self.has_vertex(eb)

    def get_non_edge_vertex(self, edge_or_a: EdgeLike, b: Optional[Point] = None) -> Optional[Point]:
        """Return the vertex opposite the given edge, or None if none qualifies."""
        ea, eb = _endpoints(edge_or_a, b)
        for vertex in self.vertices:
            if vertex is not ea and vertex is not eb:
                return vertex
        return None

    def has_vertex(self, point: Point) -> bool:
        return self.a is point or self.b is point or self.c is point

    def signed_area(self) -> float:
        return 0.5 * ((self.b.x - self.a.x) * (self.c.y - self.a.y)
                      - (self.c.x - self.a.x) * (self.b.y - self.a.y))

    def __repr__(self) -> str:
        return f"Triangle[{self.a!r}, {self.b!r}, {self.c!r}]"


def closest_point_on_edge(edge: Edge, point: Point) -> Point:
    """
    Compute the point on an edge segment closest to the given point.

    The point is projected onto the line through the edge along b - a and
    the projection parameter is clamped to [0, 1]. A zero-length edge
    collapses to its first endpoint. The direction is always b - a, never a
    zero vector built by copying edge.a.x into edge.b.x, and neither
    endpoint is ever written to (see DESIGN.md, nearest edge projection).

    Args:
        edge: Segment to project onto
        point: Query point

    Returns:
        New Point on the segment
    """
    ab = edge.b - edge.a
    denom = ab.length_sq()
    if denom == 0.0:
        return Point(edge.a.x, edge.a.y)

    t = ((point.x - edge.a.x) * ab.x + (point.y - edge.a.y) * ab.y) / denom
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0

    return Point(edge.a.x + ab.x * t, edge.a.y + ab.y * t)


def distance_sq_to_edge(edge: Edge, point: Point) -> float:
    """Squared distance from a point to the nearest point of an edge segment."""
    return (closest_point_on_edge(edge, point) - point).length_sq()
