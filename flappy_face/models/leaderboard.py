"""Database model for leaderboard results."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class LeaderboardEntry(SQLModel, table=True):
    """Best score per normalized username."""

    __tablename__ = "leaderboard"
    __table_args__ = (Index("ix_leaderboard_best_updated_at", "best", "updated_at"),)

    username: str = ORMField(primary_key=True, max_length=40)
    best: int = ORMField(ge=0)
    updated_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["LeaderboardEntry"]
