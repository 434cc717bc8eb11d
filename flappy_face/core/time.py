"""Timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_naive_utc(value: datetime) -> datetime:
    """Drop the timezone after converting to UTC; naive values are taken as UTC.

    Depending on the driver and SQLAlchemy release, SQLite hands stored
    timestamps back either naive or tz-aware.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def isoformat_utc(value: datetime) -> str:
    """Render a stored timestamp as ISO-8601 UTC with a ``Z`` suffix."""
    return as_naive_utc(value).isoformat(timespec="milliseconds") + "Z"


__all__ = ["as_naive_utc", "isoformat_utc", "utcnow"]
