"""
Environment-driven settings for the runner and the API.
"""
from __future__ import annotations

import logging
import os

_DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _optional_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# Unset: every season draws from fresh entropy. Set: demo mode, reproducible seasons.
RNG_SEED = _optional_int("LEAGUE_RNG_SEED")
LOG_LEVEL = os.environ.get("LEAGUE_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("LEAGUE_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",") if o.strip()
]


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
