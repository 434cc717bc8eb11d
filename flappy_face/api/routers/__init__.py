"""Aggregate API routers."""

from fastapi import APIRouter

from .avatars import router as avatars_router
from .characters import router as characters_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    characters_router,
    avatars_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
