"""Reading and validating multipart image uploads."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import UploadFile

from ..core import MAX_UPLOAD_BYTES
from ..services import InvalidRequest, validate_image

logger = logging.getLogger(__name__)


async def read_image(upload: Optional[UploadFile], field: str) -> bytes:
    """Return the upload's bytes once it passes the type and size checks."""

    if upload is None:
        raise InvalidRequest(f"{field} file required")

    # One byte past the limit is enough to know it is too large.
    data = await upload.read(MAX_UPLOAD_BYTES + 1)
    try:
        validate_image(upload.content_type, len(data), MAX_UPLOAD_BYTES)
    except InvalidRequest as exc:
        logger.warning(
            "Rejected %s upload %r (%s): %s", field, upload.filename, upload.content_type, exc
        )
        raise
    return data


__all__ = ["read_image"]
