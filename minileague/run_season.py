"""
Simulate the league from the terminal: plays rounds one at a time and prints
each round's results, then the table and championship predictions.
"""
from __future__ import annotations

import argparse
import random

from minileague import settings
from minileague.services.league_service import LeagueSeason, SeasonCompleteError
from minileague.services.standings import standings_table
from minileague.simulation.rng import SeededRNG


def _print_round(season: LeagueSeason, round_number: int) -> None:
    print(f"\n  Round {round_number}")
    print("  " + "-" * 40)
    for m in season.matches_in_round(round_number):
        print(f"  {m.result}")


def _print_table(season: LeagueSeason) -> None:
    print()
    print("=" * 60)
    print(f"  TABLE after round {season.current_round} of {season.total_rounds}")
    print("=" * 60)
    print(f"  {'#':>2} {'Team':<18} {'P':>2} {'W':>2} {'D':>2} {'L':>2} {'GF':>3} {'GA':>3} {'GD':>4} {'Pts':>4} {'Str':>4}")
    for row in standings_table(season.teams):
        s = row["stats"]
        print(
            f"  {row['position']:>2} {row['name']:<18} {s['played']:>2} {s['won']:>2} {s['drawn']:>2} "
            f"{s['lost']:>2} {s['goals_for']:>3} {s['goals_against']:>3} {s['goal_difference']:>4} "
            f"{s['points']:>4} {row['strength']:>4}"
        )


def _print_predictions(season: LeagueSeason) -> None:
    print("\n  Championship predictions")
    ranked = sorted(season.predictions().items(), key=lambda kv: kv[1], reverse=True)
    for name, pct in ranked:
        print(f"  {name:<18} {pct:5.1f}%")
    print()


def run(seed: int | None = None, rounds: int | None = None) -> LeagueSeason:
    """Play `rounds` rounds (None = to the end of the season) and print the outcome."""
    if seed is None:
        seed = random.randint(1, 2**31 - 1)
    season = LeagueSeason(rng=SeededRNG(seed))
    print(f"\n  Mini league, {season.total_rounds} rounds  [seed={seed}]")
    target = season.total_rounds if rounds is None else rounds
    for _ in range(target):
        try:
            played = season.advance_round()
        except SeasonCompleteError:
            break
        _print_round(season, played)
    _print_table(season)
    _print_predictions(season)
    return season


def main():
    parser = argparse.ArgumentParser(description="Simulate the mini league round by round.")
    parser.add_argument("--seed", type=int, default=settings.RNG_SEED, help="RNG seed for reproducibility")
    parser.add_argument("--rounds", type=int, default=None, help="Rounds to play (default: whole season)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level name")
    args = parser.parse_args()
    settings.configure_logging(args.log_level.upper())
    run(seed=args.seed, rounds=args.rounds)


if __name__ == "__main__":
    main()
