"""Database configuration and session helpers."""

from __future__ import annotations

import logging
from typing import Iterator

from sqlalchemy.engine import make_url
from sqlmodel import Session, SQLModel, create_engine

from .config import DATA_DIR, DATABASE_URL

logger = logging.getLogger(__name__)


def _make_engine(url: str):
    if make_url(url).get_backend_name() == "sqlite":
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = _make_engine(DATABASE_URL)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


def init_db(reset: bool = False, bind=None) -> None:
    """Create all tables, dropping them first when ``reset`` is set."""

    bind = bind if bind is not None else engine
    if reset:
        logger.warning("Dropping all tables on %s", safe_url(bind))
        SQLModel.metadata.drop_all(bind)
    SQLModel.metadata.create_all(bind)


def safe_url(bind) -> str:
    """Render an engine URL with any password masked."""

    return bind.url.render_as_string(hide_password=True)


__all__ = ["engine", "get_session", "init_db", "safe_url"]
