"""Tests for the Alea random-ordering generator."""

import pytest
from py_delaunay.core.alea_prng import AleaPRNG


class TestSequence:
    """Deterministic output."""

    def test_same_seed_same_sequence(self):
        a = AleaPRNG("seed")
        b = AleaPRNG("seed")
        assert [a.random() for _ in range(100)] == [b.random() for _ in range(100)]

    def test_different_seeds(self):
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(10)] != [b.random() for _ in range(10)]

    def test_range(self):
        prng = AleaPRNG(12345)
        values = [prng.random() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_iterable_seed(self):
        a = AleaPRNG(["a", 1])
        b = AleaPRNG(["a", 1])
        assert a.random() == b.random()


class TestIntegers:
    """Bounded integers and orderings."""

    def test_next_int_bounds(self):
        prng = AleaPRNG("ints")
        values = [prng.next_int(7) for _ in range(500)]
        assert min(values) >= 0
        assert max(values) <= 6
        assert len(set(values)) == 7

    def test_next_int_non_positive_bound(self):
        prng = AleaPRNG("ints")
        assert prng.next_int(0) == 0
        assert prng.next_int(-3) == 0

    @pytest.mark.parametrize("length", [1, 2, 10, 257])
    def test_random_ordering_is_permutation(self, length):
        ordering = AleaPRNG("ordering").random_ordering(length)
        assert sorted(ordering) == list(range(length))

    def test_random_ordering_empty(self):
        assert AleaPRNG("ordering").random_ordering(0) == []
        assert AleaPRNG("ordering").random_ordering(-1) == []

    def test_random_ordering_reproducible(self):
        assert AleaPRNG("x").random_ordering(30) == AleaPRNG("x").random_ordering(30)


class TestSequences:
    """Shuffle and choice helpers."""

    def test_shuffle_copy(self):
        items = list("abcdefgh")
        shuffled = AleaPRNG("shuffle").shuffle(items)

        assert sorted(shuffled) == items
        assert items == list("abcdefgh")

    def test_choice(self):
        items = [10, 20, 30]
        prng = AleaPRNG("choice")
        assert all(prng.choice(items) in items for _ in range(50))

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            AleaPRNG("choice").choice([])
