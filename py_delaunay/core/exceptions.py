"""Exceptions raised by the triangulator."""


class TriangulationError(Exception):
    """Base class for triangulation failures."""


class InvalidInputError(TriangulationError, ValueError):
    """The point set cannot be triangulated (fewer than three points)."""

    def __init__(self, point_count: int):
        self.point_count = point_count
        super().__init__(f"Less than three points in point set (got {point_count})")


class TriangulationCancelled(TriangulationError):
    """A cancellation check asked the run to stop between point insertions."""

    def __init__(self, points_inserted: int):
        self.points_inserted = points_inserted
        super().__init__(f"Triangulation cancelled after {points_inserted} points")
