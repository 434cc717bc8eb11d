"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from ...core import isoformat_utc
from ...services import LeaderboardStore, normalize_username, parse_score
from ..dependencies import get_leaderboard_store

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    limit: Optional[str] = None,
    store: LeaderboardStore = Depends(get_leaderboard_store),
) -> Dict[str, Any]:
    """Top entries, best score first and earliest achiever first on ties."""

    return {
        "ok": True,
        "rows": [
            {
                "username": entry.username,
                "best": entry.best,
                "updated_at": isoformat_utc(entry.updated_at),
            }
            for entry in store.top(limit)
        ],
    }


@router.post("/score")
def submit_score(
    body: Dict[str, Any] = Body(...),
    store: LeaderboardStore = Depends(get_leaderboard_store),
) -> Dict[str, Any]:
    """Submit a score; the stored best only ever goes up."""

    username = normalize_username(body.get("username"))
    score = parse_score(body.get("score"))

    entry = store.submit(username, score)
    return {"ok": True, "username": entry.username, "best": entry.best}


@router.get("/rank")
def get_rank(
    username: Optional[str] = None,
    store: LeaderboardStore = Depends(get_leaderboard_store),
) -> Dict[str, Any]:
    """Rank of one user; ``rank`` and ``best`` are null for unknown users."""

    key = normalize_username(username)
    result = store.rank(key)
    return {
        "ok": True,
        "username": key,
        "rank": result.rank,
        "total": result.total,
        "best": result.best,
    }


__all__ = ["router"]
