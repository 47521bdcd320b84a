"""Seeded random number generator injected into maze algorithms."""

import random
from collections import abc
from typing import Collection, Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """
    Seeded random number generator for reproducible mazes.
    Each instance owns its own random.Random; the module-level state is never used.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def set_seed(self, seed: Optional[int]):
        """Set a new seed and restart the sequence."""
        self._seed = seed
        self._rng.seed(seed)

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Generate a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def pick(self, items: Collection[T]) -> T:
        """
        Choose a random element from any non-empty collection.
        Sets are sorted first so the same seed always picks the same element.
        """
        if isinstance(items, (set, frozenset)):
            items = sorted(items)
        elif not isinstance(items, abc.Sequence):
            items = list(items)
        return self._rng.choice(items)

    def shuffle(self, seq: list) -> None:
        """Shuffle the list in place."""
        self._rng.shuffle(seq)

    def sample(self, population: Sequence[T], k: int) -> list:
        """Choose k unique random elements from the population."""
        return self._rng.sample(population, k)

    def uniform(self, a: float, b: float) -> float:
        """Generate a random float N such that a <= N <= b."""
        return self._rng.uniform(a, b)


def ensure_rng(rng: Optional[SeededRNG]) -> SeededRNG:
    """Return rng, or a fresh unseeded generator when none was injected."""
    return rng if rng is not None else SeededRNG()
