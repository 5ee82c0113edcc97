"""Ordered, identity-unique point sequence fed to the triangulator."""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .alea_prng import AleaPRNG
from .geometry import Point


def invert_permutation(permutation: Sequence[int]) -> List[int]:
    """Return q such that reordering by p and then by q restores the original order."""
    inverse = [0] * len(permutation)
    for i, p in enumerate(permutation):
        inverse[p] = i
    return inverse


class PointSet:
    """
    Insertion-ordered set of Points keyed by identity.

    Two Point objects with equal coordinates are both kept; adding the
    same object twice is a no-op. Uniqueness of coordinates is the
    caller's responsibility.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self._points: List[Point] = []
        self._index: Dict[Point, int] = {}
        if points is not None:
            for point in points:
                self.add(point)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Tuple[float, float]]) -> "PointSet":
        return cls(Point(float(x), float(y)) for x, y in coordinates)

    @classmethod
    def from_array(cls, coordinates: np.ndarray) -> "PointSet":
        """
        Build a point set from an (n, 2) array of coordinates.

        Args:
            coordinates: Array-like of [x, y] rows

        Returns:
            PointSet with one new Point per row, in row order
        """
        array = np.asarray(coordinates, dtype=np.float64)
        if array.size == 0:
            return cls()
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) coordinate array, got shape {array.shape}")
        return cls(Point(float(x), float(y)) for x, y in array)

    def to_array(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([[p.x, p.y] for p in self._points], dtype=np.float64)

    def add(self, point: Point) -> bool:
        if not isinstance(point, Point):
            raise TypeError(f"PointSet only holds Point instances, got {type(point).__name__}")
        if point in self._index:
            return False
        self._index[point] = len(self._points)
        self._points.append(point)
        return True

    def index_of(self, point: Point) -> int:
        """Position of a point in the current order, or -1 if absent."""
        return self._index.get(point, -1)

    def __contains__(self, point: Point) -> bool:
        return point in self._index

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, i: int) -> Point:
        return self._points[i]

    def reorder(self, permutation: Sequence[int]) -> None:
        """
        Rearrange the points so position i holds the point previously at permutation[i].

        Args:
            permutation: A permutation of range(len(self))

        Raises:
            ValueError: If permutation is not a permutation of range(len(self))
        """
        permutation = [int(i) for i in permutation]
        if sorted(permutation) != list(range(len(self._points))):
            raise ValueError("reorder() needs a permutation of range(len(point_set))")

        self._points = [self._points[i] for i in permutation]
        self._index = {point: i for i, point in enumerate(self._points)}

    def shuffle(self, prng: Optional[AleaPRNG] = None) -> List[int]:
        """
        Randomly permute the point order.

        Args:
            prng: Generator to draw the ordering from; the process-wide
                default generator is used when omitted

        Returns:
            The permutation that was applied, suitable for invert_permutation()
        """
        if prng is None:
            from ..utils.random import get_prng
            prng = get_prng()

        permutation = prng.random_ordering(len(self._points))
        self.reorder(permutation)
        return permutation
