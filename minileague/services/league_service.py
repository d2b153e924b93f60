"""
Season controller: owns teams, fixtures and the round counter.
Advance one round or to the end, correct a recorded score, reset.

Not thread-safe. Callers sharing one season across threads must hold a single
lock around every call (see api.py).
"""
from __future__ import annotations

import logging
from typing import Any

from minileague.models import Match, Team
from minileague.services.prediction import predict_championship
from minileague.services.scheduling import (
    MATCHES_PER_ROUND,
    TOTAL_ROUNDS,
    default_teams,
    generate_fixtures,
)
from minileague.services.standings import compute_standings, team_position
from minileague.services.statistics import apply_match, retract_match
from minileague.services.strength import adjust_strength
from minileague.simulation.match_simulator import RandomSource, simulate_scoreline

logger = logging.getLogger(__name__)

# ---------- Exceptions ----------


class LeagueError(ValueError):
    """Base for season engine errors."""


class SeasonCompleteError(LeagueError):
    """All rounds have been played; nothing left to advance."""


class MatchNotFoundError(LeagueError, LookupError):
    """No fixture with the given (round, home, away)."""


class InvalidScoreError(LeagueError):
    """Corrected goals must be non-negative integers."""


# ---------- LeagueSeason ----------


class LeagueSeason:
    """
    One season of the four-team league.
    rng: injected random source; None draws fresh entropy for every match.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng
        self.total_rounds = TOTAL_ROUNDS
        self.matches_per_round = MATCHES_PER_ROUND
        self._init_state()

    def _init_state(self) -> None:
        self.teams: list[Team] = default_teams()
        self.matches: list[Match] = generate_fixtures()
        self.current_round = 0

    # ---------- Queries ----------

    @property
    def is_complete(self) -> bool:
        return self.current_round >= self.total_rounds

    def get_team(self, name: str) -> Team | None:
        for team in self.teams:
            if team.name == name:
                return team
        return None

    def _require_team(self, name: str) -> Team:
        team = self.get_team(name)
        if team is None:
            raise LeagueError(f"Team not found: {name}")
        return team

    def find_match(self, round_number: int, home_team: str, away_team: str) -> Match | None:
        for m in self.matches:
            if m.key() == (round_number, home_team, away_team):
                return m
        return None

    def matches_in_round(self, round_number: int) -> list[Match]:
        return [m for m in self.matches if m.round == round_number]

    def standings(self) -> list[Team]:
        return compute_standings(self.teams)

    def predictions(self) -> dict[str, float]:
        return predict_championship(
            self.teams, self.current_round, self.total_rounds, self.matches_per_round
        )

    # ---------- Round progression ----------

    def _play_match(self, match: Match) -> None:
        home = self._require_team(match.home_team)
        away = self._require_team(match.away_team)
        home_goals, away_goals = simulate_scoreline(home.strength, away.strength, self._rng)
        match.record_score(home_goals, away_goals)
        apply_match(match, home, away)
        logger.debug("Round %d: %s", match.round, match.result)

    def advance_round(self) -> int:
        """
        Play every unplayed match of the next round, then adjust strengths.
        Returns the new current round. Raises SeasonCompleteError (state untouched)
        when every round has already been played.
        """
        if self.is_complete:
            raise SeasonCompleteError(
                f"Season is complete: all {self.total_rounds} rounds have been played"
            )
        self.current_round += 1
        for match in self.matches_in_round(self.current_round):
            if match.played:
                continue
            self._play_match(match)
        # Positions are read per team after the whole round is applied.
        for team in self.teams:
            adjust_strength(team, team_position(self.teams, team.name))
        logger.info("Round %d of %d completed", self.current_round, self.total_rounds)
        return self.current_round

    def advance_to_end(self) -> int:
        """Advance until the season is complete. Returns the number of rounds played by this call."""
        played = 0
        while True:
            try:
                self.advance_round()
            except SeasonCompleteError:
                break
            played += 1
        return played

    # ---------- Corrections ----------

    def correct_match(
        self,
        round_number: int,
        home_team: str,
        away_team: str,
        home_goals: int,
        away_goals: int,
    ) -> Match:
        """
        Overwrite a fixture's score. A previously played score is retracted from
        both teams before the new one is applied. Round counter and strengths
        are left as they are.
        """
        for goals in (home_goals, away_goals):
            if isinstance(goals, bool) or not isinstance(goals, int) or goals < 0:
                raise InvalidScoreError(f"Goals must be non-negative integers, got {goals!r}")
        match = self.find_match(round_number, home_team, away_team)
        if match is None:
            raise MatchNotFoundError(
                f"Match not found: round {round_number}, {home_team} vs {away_team}"
            )
        home = self._require_team(match.home_team)
        away = self._require_team(match.away_team)
        previous = match.result if match.played else None
        if match.played:
            retract_match(match, home, away)
        match.record_score(home_goals, away_goals)
        apply_match(match, home, away)
        logger.info("Corrected %s (was %s)", match.result, previous or "unplayed")
        return match

    # ---------- Reset ----------

    def reset(self) -> None:
        """Discard all results and start a fresh season at baseline strengths."""
        self._init_state()
        logger.info("Season reset")

    # ---------- Serialization ----------

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_round": self.current_round,
            "total_rounds": self.total_rounds,
            "matches_per_round": self.matches_per_round,
            "teams": [t.to_dict() for t in self.teams],
            "matches": [m.to_dict() for m in self.matches],
        }
