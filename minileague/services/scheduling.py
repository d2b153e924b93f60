"""
Fixture table for the four-team league.

The schedule is a literal double round robin over six rounds: every team plays
once per round, every ordered (home, away) pairing appears exactly once, and
home/away alternates as laid out below rather than being computed. Team names
are the default roster's; the table is not meant for other league sizes.
"""
from __future__ import annotations

from minileague.models import Match, Team

# (name, base strength), in storage order.
DEFAULT_TEAMS: list[tuple[str, int]] = [
    ("Chelsea", 80),
    ("Arsenal", 85),
    ("Manchester City", 82),
    ("Liverpool", 90),
]

TOTAL_ROUNDS = 6
MATCHES_PER_ROUND = 2

# round -> ((home, away), (home, away))
FIXTURE_TABLE: list[tuple[int, tuple[tuple[str, str], ...]]] = [
    (1, (("Chelsea", "Arsenal"), ("Manchester City", "Liverpool"))),
    (2, (("Arsenal", "Manchester City"), ("Liverpool", "Chelsea"))),
    (3, (("Chelsea", "Liverpool"), ("Manchester City", "Arsenal"))),
    (4, (("Arsenal", "Chelsea"), ("Liverpool", "Manchester City"))),
    (5, (("Manchester City", "Chelsea"), ("Liverpool", "Arsenal"))),
    (6, (("Arsenal", "Liverpool"), ("Chelsea", "Manchester City"))),
]


def default_teams() -> list[Team]:
    """Fresh team records at baseline strength with zeroed stats."""
    return [Team.at_baseline(name, strength) for name, strength in DEFAULT_TEAMS]


def fixture_pairings() -> list[tuple[int, str, str]]:
    """Flat (round, home, away) triples in schedule order."""
    return [
        (round_number, home, away)
        for round_number, pairs in FIXTURE_TABLE
        for home, away in pairs
    ]


def generate_fixtures() -> list[Match]:
    """All season matches, unplayed, ordered by round then table position."""
    return [Match(round=r, home_team=h, away_team=a) for r, h, a in fixture_pairings()]
