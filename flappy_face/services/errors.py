"""Service-layer exceptions."""

from __future__ import annotations


class InvalidRequest(ValueError):
    """Input the caller can fix; rendered as HTTP 400."""

    status_code = 400


__all__ = ["InvalidRequest"]
