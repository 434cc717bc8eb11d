"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    CHARACTERS,
    DATABASE_URL,
    DATA_DIR,
    DB_RESET,
    LOG_LEVEL,
    MAX_UPLOAD_BYTES,
    PORT,
    PUBLIC_DIR,
    SERVICE_NAME,
    UPLOAD_DIR,
)
from .database import engine, get_session, init_db, safe_url
from .logs import configure_logging
from .time import as_naive_utc, isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "CHARACTERS",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "LOG_LEVEL",
    "MAX_UPLOAD_BYTES",
    "PORT",
    "PUBLIC_DIR",
    "SERVICE_NAME",
    "UPLOAD_DIR",
    "as_naive_utc",
    "configure_logging",
    "engine",
    "get_session",
    "init_db",
    "isoformat_utc",
    "safe_url",
    "utcnow",
]
