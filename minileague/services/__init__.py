"""
Service layer: fixtures, statistics, standings, strength, predictions and the
season state machine. No I/O; api.py and run_season.py sit on top.
"""
from .league_service import (
    LeagueSeason,
    LeagueError,
    SeasonCompleteError,
    MatchNotFoundError,
    InvalidScoreError,
)
from .scheduling import generate_fixtures, default_teams, fixture_pairings
from .standings import compute_standings, team_position, standings_table
from .statistics import apply_result, retract_result, classify_outcome
from .strength import adjust_strength
from .prediction import predict_championship

__all__ = [
    "LeagueSeason",
    "LeagueError",
    "SeasonCompleteError",
    "MatchNotFoundError",
    "InvalidScoreError",
    "generate_fixtures",
    "default_teams",
    "fixture_pairings",
    "compute_standings",
    "team_position",
    "standings_table",
    "apply_result",
    "retract_result",
    "classify_outcome",
    "adjust_strength",
    "predict_championship",
]
