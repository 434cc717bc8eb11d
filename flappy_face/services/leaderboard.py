"""Leaderboard storage: upsert-max submissions, rank queries and listings.

Ordering is ``best`` descending, then ``updated_at`` ascending, so whoever
reached a score first ranks ahead of later players with the same score.
``updated_at`` only moves when ``best`` goes up; resubmitting an equal or lower
score leaves the row untouched and keeps that ordering stable.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, select

from ..core.time import as_naive_utc, utcnow
from ..models import LeaderboardEntry
from .errors import InvalidRequest

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MAX_LIMIT = 50
MAX_SCORE = 2**63 - 1

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


@dataclass(frozen=True)
class RankResult:
    rank: Optional[int]
    total: int
    best: Optional[int]


def parse_score(raw: Any) -> int:
    """Validate a submitted score and floor it to an integer."""

    if raw is None:
        raise InvalidRequest("score required")
    if isinstance(raw, bool):
        raise InvalidRequest("invalid score")

    if isinstance(raw, str):
        try:
            value: float | int = float(raw.strip())
        except ValueError:
            raise InvalidRequest("invalid score") from None
    elif isinstance(raw, (int, float)):
        value = raw
    else:
        raise InvalidRequest("invalid score")

    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidRequest("invalid score")
    if value < 0:
        raise InvalidRequest("score must be non-negative")

    score = math.floor(value)
    if score > MAX_SCORE:
        raise InvalidRequest("score too large")
    return score


def clamp_limit(raw: Any) -> int:
    """Parse a listing limit, falling back to the default when unusable."""

    if raw is None or isinstance(raw, bool):
        return DEFAULT_LIMIT
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return max(1, min(MAX_LIMIT, limit))


class LeaderboardStore:
    """Leaderboard operations over a single database session."""

    def __init__(self, session: Session):
        self.session = session

    def submit(self, username: str, score: int) -> LeaderboardEntry:
        """Record ``score`` for ``username``, keeping the maximum.

        A single ``INSERT ... ON CONFLICT DO UPDATE ... WHERE`` statement, so
        concurrent submissions for one user cannot lose an update.
        """

        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Unsupported database dialect for upsert: {dialect}")

        table = LeaderboardEntry.__table__
        now = utcnow()
        stmt = insert(table).values(username=username, best=score, updated_at=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.username],
            set_={"best": stmt.excluded.best, "updated_at": stmt.excluded.updated_at},
            where=stmt.excluded.best > table.c.best,
        )
        self.session.exec(stmt)
        self.session.commit()

        entry = self.session.get(LeaderboardEntry, username)
        if entry is None:  # pragma: no cover - row was just written
            raise RuntimeError(f"Leaderboard row for {username!r} vanished after upsert")

        if as_naive_utc(entry.updated_at) == as_naive_utc(now):
            logger.info("New best for %s: %d", username, entry.best)
        else:
            logger.debug("Score %d for %s did not beat best %d", score, username, entry.best)
        return entry

    def get(self, username: str) -> Optional[LeaderboardEntry]:
        return self.session.get(LeaderboardEntry, username)

    def total(self) -> int:
        return self.session.exec(select(func.count(LeaderboardEntry.username))).one()

    def rank(self, username: str) -> RankResult:
        """Rank ``username`` against the current table contents."""

        total = self.total()
        entry = self.get(username)
        if entry is None:
            return RankResult(rank=None, total=total, best=None)

        ahead = self.session.exec(
            select(func.count(LeaderboardEntry.username)).where(
                or_(
                    LeaderboardEntry.best > entry.best,
                    and_(
                        LeaderboardEntry.best == entry.best,
                        LeaderboardEntry.updated_at < entry.updated_at,
                    ),
                )
            )
        ).one()
        return RankResult(rank=ahead + 1, total=total, best=entry.best)

    def top(self, limit: Any = None) -> List[LeaderboardEntry]:
        """Return the best entries, at most ``clamp_limit(limit)`` of them."""

        # username only separates rows whose timestamps collide exactly
        return list(
            self.session.exec(
                select(LeaderboardEntry)
                .order_by(
                    LeaderboardEntry.best.desc(),
                    LeaderboardEntry.updated_at.asc(),
                    LeaderboardEntry.username.asc(),
                )
                .limit(clamp_limit(limit))
            ).all()
        )


__all__ = [
    "DEFAULT_LIMIT",
    "LeaderboardStore",
    "MAX_LIMIT",
    "MAX_SCORE",
    "RankResult",
    "clamp_limit",
    "parse_score",
]
