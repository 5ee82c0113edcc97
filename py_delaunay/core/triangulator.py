"""
Incremental 2D Delaunay triangulation.

Points are inserted one at a time into a triangle soup seeded with an
oversized super-triangle. Each insertion either splits the triangle that
strictly contains the new point into three, or, when the point sits on an
existing edge, splits the two triangles sharing that edge into four. The
edges opposite the new point are then legalized with Lawson flips until
the Delaunay property holds again. Finally every triangle touching a
super-triangle vertex is discarded.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
import structlog

from ..config import settings
from .alea_prng import AleaPRNG
from .exceptions import InvalidInputError, TriangulationCancelled
from .geometry import Point, Triangle
from .point_set import PointSet
from .triangle_soup import TriangleSoup

logger = structlog.get_logger()


class TriangulatorState(Enum):
    INIT = "init"
    SEED_SUPER_TRIANGLE = "seed_super_triangle"
    INSERTING_POINTS = "inserting_points"
    FINALIZE = "finalize"
    DONE = "done"


@dataclass
class TriangulationOptions:
    """Tunables for super-triangle construction."""
    super_triangle_scale: float = 48.0
    super_triangle_mode: str = "max_coordinate"  # or "bounding_box"

    def __post_init__(self):
        if self.super_triangle_scale <= 0:
            raise ValueError("super_triangle_scale must be positive")
        if self.super_triangle_mode not in ("max_coordinate", "bounding_box"):
            raise ValueError(f"Unknown super_triangle_mode: {self.super_triangle_mode!r}")

    @classmethod
    def from_settings(cls) -> "TriangulationOptions":
        return cls(
            super_triangle_scale=settings.super_triangle_scale,
            super_triangle_mode=settings.super_triangle_mode,
        )


@dataclass
class InsertionRecord:
    """How a single point entered the triangulation."""
    index: int             # position in the (possibly shuffled) point set
    kind: str              # "interior" or "boundary"
    triangles_created: int


@dataclass
class TriangulationStats:
    """Counters collected during one triangulate() run."""
    interior_insertions: int = 0
    boundary_insertions: int = 0
    flips: int = 0
    pruned_triangles: int = 0
    insertions: List[InsertionRecord] = field(default_factory=list)


class DelaunayTriangulator:
    """
    Incremental Delaunay triangulator over a caller-owned point set.

    A single instance must not run triangulate() concurrently with itself,
    and the point set must not be changed by anyone else during a run.

    Args:
        point_set: PointSet or sequence of Points to triangulate
        options: Super-triangle options; defaults come from settings
    """

    def __init__(self, point_set: Union[PointSet, Sequence[Point], None] = None,
                 options: Optional[TriangulationOptions] = None):
        if point_set is None:
            point_set = PointSet()
        elif not isinstance(point_set, PointSet):
            point_set = PointSet(point_set)

        self.point_set = point_set
        self.options = options or TriangulationOptions.from_settings()
        self.state = TriangulatorState.INIT
        self.stats = TriangulationStats()
        self.super_triangle: Optional[Triangle] = None
        self._soup = TriangleSoup()

    @property
    def triangles(self) -> List[Triangle]:
        return self._soup.get_triangles()

    def shuffle(self, prng: Optional[AleaPRNG] = None) -> List[int]:
        """Randomly permute the insertion order. Returns the applied permutation."""
        return self.point_set.shuffle(prng)

    def reorder(self, permutation: Sequence[int]) -> None:
        self.point_set.reorder(permutation)

    def triangulate(self, should_cancel: Optional[Callable[[], bool]] = None) -> List[Triangle]:
        """
        Build the Delaunay triangulation of the point set.

        Args:
            should_cancel: Optional callable polled before each insertion;
                returning True aborts the run

        Returns:
            Triangles made only of input points, in no particular order

        Raises:
            InvalidInputError: If fewer than three points are present
            TriangulationCancelled: If should_cancel asked to stop
        """
        self.state = TriangulatorState.INIT
        num_points = len(self.point_set)
        if num_points < 3:
            raise InvalidInputError(num_points)

        self._soup = TriangleSoup()
        self.stats = TriangulationStats()

        self.state = TriangulatorState.SEED_SUPER_TRIANGLE
        self.super_triangle = self._build_super_triangle()
        self._soup.add(self.super_triangle)

        logger.info("Starting triangulation",
                    points=num_points,
                    super_triangle_mode=self.options.super_triangle_mode,
                    super_triangle=repr(self.super_triangle))

        self.state = TriangulatorState.INSERTING_POINTS
        for i, point in enumerate(self.point_set):
            if should_cancel is not None and should_cancel():
                logger.info("Triangulation cancelled", points_inserted=i)
                raise TriangulationCancelled(i)
            self._insert_point(i, point)

        self.state = TriangulatorState.FINALIZE
        for vertex in self.super_triangle.vertices:
            self.stats.pruned_triangles += self._soup.remove_triangles_using(vertex)

        self.state = TriangulatorState.DONE
        triangles = self._soup.get_triangles()

        logger.info("Triangulation complete",
                    triangles=len(triangles),
                    flips=self.stats.flips,
                    interior_insertions=self.stats.interior_insertions,
                    boundary_insertions=self.stats.boundary_insertions,
                    pruned_triangles=self.stats.pruned_triangles)
        return triangles

    def _build_super_triangle(self) -> Triangle:
        scale = self.options.super_triangle_scale

        if self.options.super_triangle_mode == "bounding_box":
            xs = [p.x for p in self.point_set]
            ys = [p.y for p in self.point_set]
            min_x, max_x = min(xs), max(xs)
            min_y, max_y = min(ys), max(ys)
            cx = (min_x + max_x) / 2
            cy = (min_y + max_y) / 2
            d = scale * max(math.hypot(max_x - min_x, max_y - min_y), 1e-12)
            return Triangle(Point(cx - d, cy - d), Point(cx, cy + d), Point(cx + d, cy - d))

        max_coordinate = 0.0
        for p in self.point_set:
            max_coordinate = max(abs(p.x), abs(p.y), max_coordinate)
        if max_coordinate == 0.0:
            max_coordinate = 1.0
        m = max_coordinate * scale

        return Triangle(Point(0.0, m), Point(m, 0.0), Point(-m, -m))

    def _insert_point(self, index: int, point: Point) -> None:
        triangle = self._soup.find_containing_triangle(point)

        if triangle is None:
            created = self._insert_on_edge(point)
            self.stats.boundary_insertions += 1
            self.stats.insertions.append(InsertionRecord(index, "boundary", created))
        else:
            created = self._insert_in_triangle(triangle, point)
            self.stats.interior_insertions += 1
            self.stats.insertions.append(InsertionRecord(index, "interior", created))

    def _insert_in_triangle(self, triangle: Triangle, p: Point) -> int:
        a, b, c = triangle.vertices
        soup = self._soup

        soup.remove(triangle)

        first = Triangle(a, b, p)
        second = Triangle(b, c, p)
        third = Triangle(c, a, p)

        soup.add(first)
        soup.add(second)
        soup.add(third)

        self._legalize(first, a, b, p)
        self._legalize(second, b, c, p)
        self._legalize(third, c, a, p)
        return 3

    def _insert_on_edge(self, p: Point) -> int:
        """
        Insert a point that no triangle strictly contains.

        The point lies on (or, numerically, next to) an existing edge. The
        triangles on both sides of that edge are replaced by four triangles
        fanning around the new point.
        """
        soup = self._soup
        edge = soup.find_nearest_edge(p)
        u, v = edge.a, edge.b

        first = soup.find_one_triangle_sharing(edge)
        second = soup.find_neighbor(first, edge)

        first_apex = first.get_non_edge_vertex(edge)
        soup.remove(first)

        if second is None:
            logger.warning("Point on soup boundary edge, splitting one triangle",
                           x=p.x, y=p.y)
            t1 = Triangle(u, first_apex, p)
            t2 = Triangle(v, first_apex, p)
            soup.add(t1)
            soup.add(t2)
            self._legalize(t1, u, first_apex, p)
            self._legalize(t2, v, first_apex, p)
            return 2

        second_apex = second.get_non_edge_vertex(edge)
        soup.remove(second)

        t1 = Triangle(u, first_apex, p)
        t2 = Triangle(v, first_apex, p)
        t3 = Triangle(u, second_apex, p)
        t4 = Triangle(v, second_apex, p)

        soup.add(t1)
        soup.add(t2)
        soup.add(t3)
        soup.add(t4)

        self._legalize(t1, u, first_apex, p)
        self._legalize(t2, v, first_apex, p)
        self._legalize(t3, u, second_apex, p)
        self._legalize(t4, v, second_apex, p)
        return 4

    def _legalize(self, triangle: Triangle, ea: Point, eb: Point, new_vertex: Point) -> None:
        """
        Restore the Delaunay property across edge (ea, eb) with Lawson flips.

        Pending edges live on an explicit stack. Children are pushed in
        reverse so they are processed depth-first in the same order a
        recursive implementation would visit them.
        """
        soup = self._soup
        pending: List[Tuple[Triangle, Point, Point]] = [(triangle, ea, eb)]

        while pending:
            triangle, ea, eb = pending.pop()

            neighbor = soup.find_neighbor(triangle, ea, eb)
            if neighbor is None:
                continue
            if not neighbor.is_point_in_circumcircle(new_vertex):
                continue

            soup.remove(triangle)
            soup.remove(neighbor)

            apex = neighbor.get_non_edge_vertex(ea, eb)

            first = Triangle(apex, ea, new_vertex)
            second = Triangle(apex, eb, new_vertex)

            soup.add(first)
            soup.add(second)
            self.stats.flips += 1

            pending.append((second, apex, eb))
            pending.append((first, apex, ea))


def triangulate_points(coordinates: Union[np.ndarray, Iterable[Tuple[float, float]]],
                       seed: Optional[str] = None,
                       options: Optional[TriangulationOptions] = None) -> np.ndarray:
    """
    Triangulate raw coordinates and return vertex indices.

    Args:
        coordinates: (n, 2) array-like of [x, y]
        seed: When given, the insertion order is shuffled with AleaPRNG(seed)
        options: Super-triangle options

    Returns:
        (m, 3) int array of row indices into coordinates
    """
    if not isinstance(coordinates, np.ndarray):
        coordinates = list(coordinates)
    point_set = PointSet.from_array(coordinates)
    original_order = list(point_set)

    triangulator = DelaunayTriangulator(point_set, options)
    if seed is not None:
        triangulator.shuffle(AleaPRNG(seed))

    triangles = triangulator.triangulate()

    index = {point: i for i, point in enumerate(original_order)}
    if not triangles:
        return np.empty((0, 3), dtype=np.int64)
    return np.array([[index[t.a], index[t.b], index[t.c]] for t in triangles], dtype=np.int64)
