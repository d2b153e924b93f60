"""
League table ordering: points, then goal difference, then goals for, all
descending. Python's sort is stable, so teams level on all three keep their
storage order. Head-to-head is not considered.
"""
from __future__ import annotations

import logging

from minileague.models import Team

logger = logging.getLogger(__name__)


def _sort_key(team: Team) -> tuple[int, int, int]:
    s = team.stats
    return (-s.points, -s.goal_difference, -s.goals_for)


def compute_standings(teams: list[Team]) -> list[Team]:
    """New list of the same Team objects in table order. Does not reorder teams."""
    return sorted(teams, key=_sort_key)


def team_position(teams: list[Team], name: str) -> int:
    """1-based table position; a name not in the league counts as bottom of the table."""
    for i, team in enumerate(compute_standings(teams)):
        if team.name == name:
            return i + 1
    logger.warning("Team %r not in standings; using bottom position %d", name, len(teams))
    return len(teams)


def standings_table(teams: list[Team]) -> list[dict]:
    """Table rows with position, ready for the boundary layer."""
    return [
        {"position": i + 1, **team.to_dict()}
        for i, team in enumerate(compute_standings(teams))
    ]
