"""
Match outcome simulator: strength-weighted scorelines.

Each side gets a fixed number of independent scoring chances; a chance is
converted with probability (side share of total strength) * CONVERSION_FACTOR.
The home side's strength is boosted by HOME_ADVANTAGE before the shares are
taken. Goals per side are therefore bounded to [0, SCORING_CHANCES].
"""
from __future__ import annotations

from typing import Protocol

from .rng import SeededRNG

HOME_ADVANTAGE = 5
SCORING_CHANCES = 6
CONVERSION_FACTOR = 0.4


class RandomSource(Protocol):
    def random(self) -> float: ...


def scoring_probabilities(home_strength: int, away_strength: int) -> tuple[float, float]:
    """Per-chance conversion probability for (home, away)."""
    adjusted_home = home_strength + HOME_ADVANTAGE
    total = adjusted_home + away_strength
    home_share = adjusted_home / total
    away_share = away_strength / total
    return home_share * CONVERSION_FACTOR, away_share * CONVERSION_FACTOR


def simulate_scoreline(
    home_strength: int,
    away_strength: int,
    rng: RandomSource | None = None,
) -> tuple[int, int]:
    """
    Return (home_goals, away_goals).
    rng=None uses a fresh unseeded source for this call only.
    """
    if rng is None:
        rng = SeededRNG()
    p_home, p_away = scoring_probabilities(home_strength, away_strength)
    home_goals = 0
    away_goals = 0
    # Draw order: home then away, per chance.
    for _ in range(SCORING_CHANCES):
        if rng.random() < p_home:
            home_goals += 1
        if rng.random() < p_away:
            away_goals += 1
    return home_goals, away_goals
