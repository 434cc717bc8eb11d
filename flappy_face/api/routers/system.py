"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import CHARACTERS, MAX_UPLOAD_BYTES, SERVICE_NAME, isoformat_utc, utcnow
from ...services.assets import ALLOWED_IMAGE_TYPES
from ...services.leaderboard import DEFAULT_LIMIT, MAX_LIMIT

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> Dict[str, Any]:
    """Liveness endpoint reporting the service name and server time."""

    return {"ok": True, "service": SERVICE_NAME, "time": isoformat_utc(utcnow())}


@router.get("/api/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "service": SERVICE_NAME,
        "characters": list(CHARACTERS),
        "maxUploadBytes": MAX_UPLOAD_BYTES,
        "allowedTypes": sorted(ALLOWED_IMAGE_TYPES),
        "leaderboard": {"defaultLimit": DEFAULT_LIMIT, "maxLimit": MAX_LIMIT},
    }


__all__ = ["router"]
