"""Randomness capability injected into every generation stage.

Stages only ever need three operations, so they depend on this small
protocol rather than on the ``random`` module directly. ``SeededRandom`` is
the production implementation; tests substitute scripted sources.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int:
        """Uniform integer in ``[start, stop)``."""

    def chance(self, probability: float) -> bool:
        """True with the given probability."""

    def choice(self, seq: Sequence[T]) -> T:
        """Uniform element of a non-empty sequence."""


class SeededRandom:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        # Private generator; module-level random calls never touch its state
        self._rng = random.Random(seed)

    def randrange(self, start: int, stop: int) -> int:
        return self._rng.randrange(start, stop)

    def chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)


def random_seed() -> int:
    return random.randint(0, 2**31 - 1)


__all__ = ["RandomSource", "SeededRandom", "random_seed"]
