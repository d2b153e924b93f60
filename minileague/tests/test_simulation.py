"""
Tests for the random source and the match outcome simulator.
"""
from __future__ import annotations

import pytest

from minileague.simulation.match_simulator import (
    CONVERSION_FACTOR,
    SCORING_CHANCES,
    scoring_probabilities,
    simulate_scoreline,
)
from minileague.simulation.rng import SeededRNG


class FixedRNG:
    """Always returns the same draw."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRNG:
    def __init__(self, values: list[float]) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


# ---- RNG ----
class TestSeededRNG:
    def test_determinism(self):
        rng1 = SeededRNG(12345)
        rng2 = SeededRNG(12345)
        assert [rng1.random() for _ in range(50)] == [rng2.random() for _ in range(50)]

    def test_seed_property(self):
        assert SeededRNG(7).seed == 7
        assert SeededRNG().seed is None

    def test_state_roundtrip(self):
        rng = SeededRNG(3)
        state = rng.getstate()
        first = rng.random()
        rng.setstate(state)
        assert rng.random() == first


# ---- Simulator ----
class TestMatchSimulator:
    def test_probabilities_include_home_advantage(self):
        p_home, p_away = scoring_probabilities(80, 85)
        assert p_home == pytest.approx(0.2)
        assert p_away == pytest.approx(0.2)
        p_home, p_away = scoring_probabilities(85, 85)
        assert p_home > p_away
        assert (p_home + p_away) == pytest.approx(CONVERSION_FACTOR)

    def test_every_chance_converted(self):
        rng = FixedRNG(0.0)
        assert simulate_scoreline(80, 85, rng) == (SCORING_CHANCES, SCORING_CHANCES)
        assert rng.calls == 2 * SCORING_CHANCES

    def test_no_chance_converted(self):
        assert simulate_scoreline(80, 85, FixedRNG(0.99)) == (0, 0)

    def test_draw_order_home_then_away(self):
        # p_home = p_away = 0.2 for (80, 85); home draws convert, away draws miss.
        values = [0.1, 0.5] * SCORING_CHANCES
        assert simulate_scoreline(80, 85, SequenceRNG(values)) == (6, 0)

    def test_seeded_reproducible(self):
        a = [simulate_scoreline(80, 90, SeededRNG(99)) for _ in range(3)]
        rng = SeededRNG(99)
        first = simulate_scoreline(80, 90, rng)
        assert a[0] == a[1] == a[2] == first

    @pytest.mark.parametrize("seed", range(20))
    def test_goals_bounded(self, seed):
        home, away = simulate_scoreline(100, 1, SeededRNG(seed))
        assert 0 <= home <= SCORING_CHANCES
        assert 0 <= away <= SCORING_CHANCES

    def test_unseeded_default(self):
        home, away = simulate_scoreline(80, 80)
        assert 0 <= home <= SCORING_CHANCES
        assert 0 <= away <= SCORING_CHANCES

    def test_stronger_team_scores_more_on_average(self):
        rng = SeededRNG(2024)
        totals = [0, 0]
        for _ in range(2000):
            h, a = simulate_scoreline(90, 40, rng)
            totals[0] += h
            totals[1] += a
        assert totals[0] > totals[1]
