"""
Tests for applying and retracting match results on team records.
"""
from __future__ import annotations

import copy

import pytest

from minileague.models import Match, MatchOutcome, Team
from minileague.services.statistics import (
    apply_match,
    apply_result,
    classify_outcome,
    retract_match,
    retract_result,
)


def _team(name: str = "A", strength: int = 80) -> Team:
    return Team.at_baseline(name, strength)


def test_classify_outcome():
    assert classify_outcome(2, 1) == MatchOutcome.WIN
    assert classify_outcome(0, 3) == MatchOutcome.LOSS
    assert classify_outcome(1, 1) == MatchOutcome.DRAW
    assert classify_outcome(0, 0) == MatchOutcome.DRAW


def test_mirrored_outcome():
    assert MatchOutcome.WIN.mirrored() == MatchOutcome.LOSS
    assert MatchOutcome.LOSS.mirrored() == MatchOutcome.WIN
    assert MatchOutcome.DRAW.mirrored() == MatchOutcome.DRAW


def test_apply_win():
    t = _team()
    apply_result(t, 3, 1, MatchOutcome.WIN)
    s = t.stats
    assert (s.played, s.won, s.drawn, s.lost) == (1, 1, 0, 0)
    assert (s.goals_for, s.goals_against, s.goal_difference) == (3, 1, 2)
    assert s.points == 3


def test_apply_draw_and_loss():
    t = _team()
    apply_result(t, 2, 2, MatchOutcome.DRAW)
    apply_result(t, 0, 1, MatchOutcome.LOSS)
    s = t.stats
    assert (s.played, s.won, s.drawn, s.lost) == (2, 0, 1, 1)
    assert s.goal_difference == -1
    assert s.points == 1


@pytest.mark.parametrize("goals_for,goals_against", [(3, 0), (1, 1), (0, 2)])
def test_apply_then_retract_restores_stats(goals_for, goals_against):
    t = _team()
    apply_result(t, 1, 0, MatchOutcome.WIN)
    before = copy.deepcopy(t.stats)
    apply_result(t, goals_for, goals_against, classify_outcome(goals_for, goals_against))
    retract_result(t, goals_for, goals_against)
    assert t.stats == before


def test_apply_match_mirrors_outcome():
    home, away = _team("H"), _team("A")
    m = Match(round=1, home_team="H", away_team="A")
    m.record_score(2, 1)
    outcome = apply_match(m, home, away)
    assert outcome == MatchOutcome.WIN
    assert home.stats.won == 1 and home.stats.points == 3
    assert away.stats.lost == 1 and away.stats.points == 0
    assert home.stats.goals_for == away.stats.goals_against == 2
    assert away.stats.goals_for == home.stats.goals_against == 1


def test_retract_match_uses_stored_goals():
    home, away = _team("H"), _team("A")
    m = Match(round=1, home_team="H", away_team="A")
    m.record_score(1, 1)
    apply_match(m, home, away)
    retract_match(m, home, away)
    assert home.stats == away.stats
    assert home.stats.played == 0
    assert home.stats.points == 0


def test_record_score_sets_result_summary():
    m = Match(round=3, home_team="Chelsea", away_team="Liverpool")
    m.record_score(0, 2)
    assert m.played is True
    assert m.result == "Chelsea 0-2 Liverpool"
    m.record_score(4, 4)
    assert m.result == "Chelsea 4-4 Liverpool"
