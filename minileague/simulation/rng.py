"""
Seeded RNG for reproducible seasons.
Unseeded (seed=None) draws from OS entropy, which is what production uses.
"""
from __future__ import annotations

import random


class SeededRNG:
    """Wrapper around random.Random so tests can inject a fixed source."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> int | None:
        return self._seed

    def random(self) -> float:
        return self._rng.random()

    def getstate(self):
        return self._rng.getstate()

    def setstate(self, state) -> None:
        self._rng.setstate(state)
