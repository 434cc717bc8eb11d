"""Identifier normalization for usernames and character names."""

from __future__ import annotations

import re
from typing import Any, Iterable

from .errors import InvalidRequest

MAX_NAME_LENGTH = 40
FALLBACK_USERNAME = "player"

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9_-]")


def sanitize_name(raw: str) -> str:
    """Lowercase, turn whitespace runs into ``_`` and drop anything else."""

    cleaned = _WHITESPACE.sub("_", raw.strip().lower())
    return _DISALLOWED.sub("", cleaned)[:MAX_NAME_LENGTH]


def normalize_username(raw: Any) -> str:
    """Normalize an inbound username to its storage key.

    Missing or blank input is rejected. Input that has content but nothing
    left after sanitizing maps to ``FALLBACK_USERNAME``.
    """

    if not isinstance(raw, str) or not raw.strip():
        raise InvalidRequest("username required")
    return sanitize_name(raw) or FALLBACK_USERNAME


def normalize_character(raw: Any, allowed: Iterable[str]) -> str:
    """Return the character name if it belongs to the closed set."""

    name = sanitize_name(raw) if isinstance(raw, str) else ""
    if not name or name not in set(allowed):
        raise InvalidRequest("invalid character")
    return name


__all__ = [
    "FALLBACK_USERNAME",
    "MAX_NAME_LENGTH",
    "normalize_character",
    "normalize_username",
    "sanitize_name",
]
