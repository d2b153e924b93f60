"""
Strength adapter: nudges a team's current strength after each round from its
points per game and table position, bounded around its baseline.
"""
from __future__ import annotations

import logging

from minileague.models import Team

logger = logging.getLogger(__name__)

MAX_DRIFT = 15  # either side of base_strength
MIN_STRENGTH = 1
MAX_STRENGTH = 100


def performance_delta(points_per_game: float) -> int:
    if points_per_game >= 2.5:
        return 2
    if points_per_game >= 2.0:
        return 1
    if points_per_game <= 1.0:
        return -2
    if points_per_game <= 1.5:
        return -1
    return 0


def position_delta(position: int) -> int:
    # Only the top and the bottom of a four-team table move.
    if position == 1:
        return 1
    if position == 4:
        return -1
    return 0


def clamp_strength(value: int, base_strength: int) -> int:
    """Clamp to the baseline band first, then to the absolute range."""
    value = max(base_strength - MAX_DRIFT, min(base_strength + MAX_DRIFT, value))
    return max(MIN_STRENGTH, min(MAX_STRENGTH, value))


def adjust_strength(team: Team, league_position: int) -> int:
    """
    Update team.strength in place and return the new value.
    No-op for a team that has not played.
    """
    if team.stats.played == 0:
        return team.strength
    delta = performance_delta(team.stats.points_per_game()) + position_delta(league_position)
    new_strength = clamp_strength(team.strength + delta, team.base_strength)
    if new_strength != team.strength:
        logger.debug(
            "%s strength %d -> %d (position %d, ppg %.2f)",
            team.name, team.strength, new_strength, league_position, team.stats.points_per_game(),
        )
    team.strength = new_strength
    return new_strength
