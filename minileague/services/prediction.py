"""
Championship predictor.

Each team gets a raw score from points, goal difference, form, strength,
table position and the points still on offer; scores become percentages of
the total, are clamped to [MIN_PERCENT, MAX_PERCENT] and then renormalized to
sum to 100. The renormalization runs after the clamp, so a final value may end
up slightly outside the clamp range.
"""
from __future__ import annotations

from minileague.models import Team
from minileague.services.standings import team_position

POINTS_WEIGHT = 10.0
GOAL_DIFFERENCE_WEIGHT = 2.0
FORM_WEIGHT = 15.0
STRENGTH_WEIGHT = 1.0
REMAINING_POINTS_WEIGHT = 0.3
POINTS_PER_MATCH = 3

POSITION_BONUS: dict[int, float] = {1: 20.0, 2: 10.0, 3: 0.0, 4: -10.0}

MIN_PERCENT = 1.0
MAX_PERCENT = 95.0


def remaining_points(total_rounds: int, current_round: int, matches_per_round: int) -> int:
    remaining_matches = (total_rounds - current_round) * matches_per_round
    if remaining_matches <= 0:
        return 0
    return remaining_matches * POINTS_PER_MATCH


def raw_score(team: Team, position: int, remaining: int) -> float:
    s = team.stats
    score = s.points * POINTS_WEIGHT
    score += s.goal_difference * GOAL_DIFFERENCE_WEIGHT
    if s.played > 0:
        score += s.points_per_game() * FORM_WEIGHT
    score += team.strength * STRENGTH_WEIGHT
    score += POSITION_BONUS.get(position, 0.0)
    score += remaining * REMAINING_POINTS_WEIGHT
    return score


def predict_championship(
    teams: list[Team],
    current_round: int,
    total_rounds: int,
    matches_per_round: int,
) -> dict[str, float]:
    """Map of team name -> title probability in percent; values sum to 100."""
    if not teams:
        return {}
    equal_share = 100.0 / len(teams)
    if current_round == 0:
        return {t.name: equal_share for t in teams}

    remaining = remaining_points(total_rounds, current_round, matches_per_round)
    scores = {t.name: raw_score(t, team_position(teams, t.name), remaining) for t in teams}
    total_score = sum(scores.values())

    predictions: dict[str, float] = {}
    for name, score in scores.items():
        pct = (score / total_score) * 100.0 if total_score > 0 else equal_share
        predictions[name] = min(MAX_PERCENT, max(MIN_PERCENT, pct))

    total = sum(predictions.values())
    if total > 0:
        predictions = {name: (pct / total) * 100.0 for name, pct in predictions.items()}
    return predictions
