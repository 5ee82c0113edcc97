"""
Seedable Alea PRNG used to produce random insertion orders.

Based on Johannes Baagøe's Alea algorithm. Shuffling the point set before
triangulation only changes how long point location takes, never the
resulting triangulation, so any deterministic generator would do; Alea is
used because it is small, fast and reproducible across platforms.
"""

from typing import Any, List, Sequence


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hash, used only while seeding."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n = n + ord(char)
            h = 0.02519603282416938 * n
            n = _uint32(h)
            h -= n
            h *= n
            n = _uint32(h)
            h -= n
            n += h * 0x100000000  # 2^32
        self.n = n
        return _uint32(n) * 2.3283064365386963e-10  # 2^-32


class AleaPRNG:
    """
    Alea generator with the ordering helpers the triangulator consumes.

    Args:
        seed: String, number, or iterable of those mixed into the state
    """

    def __init__(self, seed="default"):
        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 = self._fold(self.s0 - mash(arg))
            self.s1 = self._fold(self.s1 - mash(arg))
            self.s2 = self._fold(self.s2 - mash(arg))

    @staticmethod
    def _fold(value: float) -> float:
        return value + 1 if value < 0 else value

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def next_int(self, bound: int) -> int:
        """Uniform integer in [0, bound); 0 when bound is not positive."""
        if bound <= 0:
            return 0
        return int(self.random() * bound)

    def random_ordering(self, length: int) -> List[int]:
        """
        Generate a random permutation of range(length).

        Fisher-Yates from the back: position i swaps with a uniformly chosen
        position in [0, i].

        Args:
            length: Size of the permutation

        Returns:
            List containing every int in [0, length) exactly once
        """
        if length <= 0:
            return []

        ordering = list(range(length))
        for i in range(length - 1, 0, -1):
            r = self.next_int(i + 1)
            ordering[r], ordering[i] = ordering[i], ordering[r]
        return ordering

    def shuffle(self, seq: Sequence[Any]) -> List[Any]:
        """Return a shuffled copy of a sequence."""
        return [seq[i] for i in self.random_ordering(len(seq))]

    def choice(self, seq: Sequence[Any]) -> Any:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int(len(seq))]
