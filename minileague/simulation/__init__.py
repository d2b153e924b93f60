"""
Match simulation: strength-weighted scorelines from an injectable random source.
"""
from .rng import SeededRNG
from .match_simulator import (
    HOME_ADVANTAGE,
    SCORING_CHANCES,
    CONVERSION_FACTOR,
    RandomSource,
    scoring_probabilities,
    simulate_scoreline,
)

__all__ = [
    "SeededRNG",
    "HOME_ADVANTAGE",
    "SCORING_CHANCES",
    "CONVERSION_FACTOR",
    "RandomSource",
    "scoring_probabilities",
    "simulate_scoreline",
]
