"""
Statistics updater: apply one match's contribution to a team record, or take
it back out. Retracting with the same goals that were applied restores the
exact prior stats.
"""
from __future__ import annotations

from minileague.models import Match, MatchOutcome, Team

WIN_POINTS = 3
DRAW_POINTS = 1


def classify_outcome(goals_for: int, goals_against: int) -> MatchOutcome:
    if goals_for > goals_against:
        return MatchOutcome.WIN
    if goals_for < goals_against:
        return MatchOutcome.LOSS
    return MatchOutcome.DRAW


def apply_result(team: Team, goals_for: int, goals_against: int, outcome: MatchOutcome) -> None:
    stats = team.stats
    stats.played += 1
    stats.goals_for += goals_for
    stats.goals_against += goals_against
    stats.goal_difference = stats.goals_for - stats.goals_against
    if outcome is MatchOutcome.WIN:
        stats.won += 1
        stats.points += WIN_POINTS
    elif outcome is MatchOutcome.DRAW:
        stats.drawn += 1
        stats.points += DRAW_POINTS
    else:
        stats.lost += 1


def retract_result(team: Team, goals_for: int, goals_against: int) -> None:
    """Inverse of apply_result; the outcome is re-derived from the goals."""
    stats = team.stats
    outcome = classify_outcome(goals_for, goals_against)
    stats.played -= 1
    stats.goals_for -= goals_for
    stats.goals_against -= goals_against
    stats.goal_difference = stats.goals_for - stats.goals_against
    if outcome is MatchOutcome.WIN:
        stats.won -= 1
        stats.points -= WIN_POINTS
    elif outcome is MatchOutcome.DRAW:
        stats.drawn -= 1
        stats.points -= DRAW_POINTS
    else:
        stats.lost -= 1


def apply_match(match: Match, home: Team, away: Team) -> MatchOutcome:
    """
    Apply a played match to both teams. The outcome is classified once from
    the home side and mirrored for the away side. Returns the home outcome.
    """
    outcome = classify_outcome(match.home_goals, match.away_goals)
    apply_result(home, match.home_goals, match.away_goals, outcome)
    apply_result(away, match.away_goals, match.home_goals, outcome.mirrored())
    return outcome


def retract_match(match: Match, home: Team, away: Team) -> None:
    """Take a match's currently stored score back out of both teams."""
    retract_result(home, match.home_goals, match.away_goals)
    retract_result(away, match.away_goals, match.home_goals)
