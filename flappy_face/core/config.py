"""Application settings and environment helpers."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from dotenv import load_dotenv

load_dotenv(override=False)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    return Path(raw) if raw else default


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def _character_names(raw: str | None) -> Tuple[str, ...]:
    # Same character set as usernames; see services.names.
    names = [re.sub(r"[^a-z0-9_-]", "", name.lower()) for name in _split_csv(raw)]
    names = _unique(name for name in names if name)
    if not names:
        raise RuntimeError("CHARACTERS must name at least one character")
    return tuple(names)


# Service --------------------------------------------------------------------
SERVICE_NAME = os.getenv("SERVICE_NAME", "flappy-face")
PORT = _env_int("PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# Storage --------------------------------------------------------------------
DATA_DIR = _env_path("DATA_DIR", _PROJECT_ROOT / "data")
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)

UPLOAD_DIR = _env_path("UPLOAD_DIR", _PROJECT_ROOT / "uploads")
PUBLIC_DIR = _env_path("PUBLIC_DIR", _PROJECT_ROOT / "public")


# Uploads --------------------------------------------------------------------
CHARACTERS = _character_names(os.getenv("CHARACTERS", "bird,pipe,cloud"))
MAX_UPLOAD_BYTES = _env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)


# CORS -----------------------------------------------------------------------
_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


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
]
