"""
REST API for the league engine.
Thin wrappers around LeagueSeason; one shared season behind one lock.
"""
from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncGenerator, Generator

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from minileague import settings
from minileague.services.league_service import (
    InvalidScoreError,
    LeagueSeason,
    MatchNotFoundError,
    SeasonCompleteError,
)
from minileague.services.standings import standings_table
from minileague.simulation.rng import SeededRNG

logger = logging.getLogger(__name__)


def _new_season() -> LeagueSeason:
    # Demo mode: seeded source for the life of the process.
    rng = SeededRNG(settings.RNG_SEED) if settings.RNG_SEED is not None else None
    return LeagueSeason(rng=rng)


_season = _new_season()
_season_lock = threading.Lock()


@contextmanager
def season_ctx() -> Generator[LeagueSeason, None, None]:
    """Yield the shared season with exclusive access."""
    with _season_lock:
        yield _season


# ---------- Lifespan ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings.configure_logging()
    logger.info("League API ready (seed=%s)", settings.RNG_SEED)
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="Mini League API",
    description="Four-team league simulation: table, fixtures, predictions",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request/Response models ----------


class EditMatchRequest(BaseModel):
    home_team: str = Field(..., min_length=1)
    away_team: str = Field(..., min_length=1)
    home_goals: int = Field(..., ge=0, le=99)
    away_goals: int = Field(..., ge=0, le=99)


def _table_payload(season: LeagueSeason) -> dict[str, Any]:
    return {
        "current_round": season.current_round,
        "table": standings_table(season.teams),
        "championship_predictions": season.predictions(),
    }


# ---------- Endpoints ----------


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/table")
def get_table() -> dict[str, Any]:
    with season_ctx() as season:
        return _table_payload(season)


@app.get("/api/matches")
def get_matches() -> dict[str, Any]:
    with season_ctx() as season:
        return {
            "matches": [m.to_dict() for m in season.matches],
            "current_round": season.current_round,
        }


@app.get("/api/predictions")
def get_predictions() -> dict[str, Any]:
    with season_ctx() as season:
        return {
            "current_round": season.current_round,
            "predictions": season.predictions(),
        }


@app.post("/api/play-next-round")
def play_next_round() -> dict[str, Any]:
    """Play the next round. 400 once the season is complete."""
    with season_ctx() as season:
        try:
            season.advance_round()
        except SeasonCompleteError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"message": f"Round {season.current_round} completed", **_table_payload(season)}


@app.post("/api/play-all")
def play_all() -> dict[str, Any]:
    with season_ctx() as season:
        season.advance_to_end()
        return {
            "message": "All matches completed",
            "final_table": standings_table(season.teams),
            "all_matches": [m.to_dict() for m in season.matches],
        }


@app.put("/api/edit-match/{round_number}")
def edit_match(round_number: int, req: EditMatchRequest) -> dict[str, Any]:
    """Correct a fixture's score; the old score (if any) is taken out of both teams first."""
    with season_ctx() as season:
        try:
            match = season.correct_match(
                round_number, req.home_team, req.away_team, req.home_goals, req.away_goals
            )
        except MatchNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except InvalidScoreError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {
            "message": "Match result updated",
            "match": match.to_dict(),
            "updated_table": standings_table(season.teams),
        }


@app.post("/api/reset")
def reset_league() -> dict[str, Any]:
    with season_ctx() as season:
        season.reset()
        return {
            "message": "League reset successfully",
            "teams": [t.to_dict() for t in season.teams],
        }
