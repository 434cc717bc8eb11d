"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Depends
from sqlmodel import Session

from ..core import UPLOAD_DIR, get_session
from ..services import AssetStore, LeaderboardStore

FACES_URL_PREFIX = "/uploads/faces"
AVATARS_URL_PREFIX = "/uploads/avatars"


def get_leaderboard_store(session: Session = Depends(get_session)) -> LeaderboardStore:
    return LeaderboardStore(session)


def get_face_store() -> AssetStore:
    """Character faces keep the uploaded file's extension."""

    return AssetStore(UPLOAD_DIR / "faces", FACES_URL_PREFIX)


def get_avatar_store() -> AssetStore:
    """Username avatars are always stored as ``<username>.png``."""

    return AssetStore(UPLOAD_DIR / "avatars", AVATARS_URL_PREFIX, fixed_suffix=".png")


__all__ = [
    "AVATARS_URL_PREFIX",
    "FACES_URL_PREFIX",
    "get_avatar_store",
    "get_face_store",
    "get_leaderboard_store",
]
