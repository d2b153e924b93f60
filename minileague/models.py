"""
Data models for the league engine.
Domain objects only; no simulation or API logic.

A season owns a fixed set of teams and a fixed fixture list; matches are
resolved one round at a time (see services.league_service).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------- Match outcome (from one team's point of view) ----------
class MatchOutcome(str, Enum):
    WIN = "W"
    DRAW = "D"
    LOSS = "L"

    def mirrored(self) -> MatchOutcome:
        """Outcome for the opponent of the same match."""
        if self is MatchOutcome.WIN:
            return MatchOutcome.LOSS
        if self is MatchOutcome.LOSS:
            return MatchOutcome.WIN
        return MatchOutcome.DRAW


# ---------- Team statistics ----------
@dataclass
class TeamStats:
    """
    Cumulative record for one team.
    goal_difference and points are kept in step by services.statistics.
    """
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    def points_per_game(self) -> float:
        if self.played == 0:
            return 0.0
        return self.points / self.played

    def to_dict(self) -> dict[str, Any]:
        return {
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }


# ---------- Team ----------
@dataclass
class Team:
    """
    One participant. strength drifts round to round; base_strength is fixed
    at season start and bounds the drift.
    """
    name: str
    strength: int
    base_strength: int
    stats: TeamStats = field(default_factory=TeamStats)

    @classmethod
    def at_baseline(cls, name: str, base_strength: int) -> Team:
        return cls(name=name, strength=base_strength, base_strength=base_strength)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "strength": self.strength,
            "base_strength": self.base_strength,
            "stats": self.stats.to_dict(),
        }


# ---------- Match (fixture) ----------
@dataclass
class Match:
    """
    A scheduled fixture. (round, home_team, away_team) never changes after
    scheduling; goals are meaningful only once played is True.
    """
    round: int  # 1-based
    home_team: str
    away_team: str
    home_goals: int = 0
    away_goals: int = 0
    played: bool = False
    result: str = ""

    def key(self) -> tuple[int, str, str]:
        return (self.round, self.home_team, self.away_team)

    def record_score(self, home_goals: int, away_goals: int) -> None:
        """Store a scoreline, mark played and refresh the result summary."""
        self.home_goals = home_goals
        self.away_goals = away_goals
        self.played = True
        self.result = f"{self.home_team} {home_goals}-{away_goals} {self.away_team}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "round": self.round,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_goals": self.home_goals,
            "away_goals": self.away_goals,
            "played": self.played,
            "result": self.result,
        }
