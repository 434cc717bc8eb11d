"""Image uploads stored on disk, one file per key."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from .errors import InvalidRequest

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES: Dict[str, str] = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/webp": ".webp",
}
ALLOWED_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp")


def validate_image(content_type: Optional[str], size: int, max_bytes: int) -> None:
    """Reject uploads that are not PNG/JPEG/WEBP or fall outside the size bounds."""

    mime = (content_type or "").split(";")[0].strip().lower()
    if mime not in ALLOWED_IMAGE_TYPES:
        raise InvalidRequest("unsupported file type (use PNG, JPEG or WEBP)")
    if size <= 0:
        raise InvalidRequest("file is empty")
    if size > max_bytes:
        raise InvalidRequest(f"file too large (max {max_bytes // (1024 * 1024)} MB)")


class AssetStore:
    """Maps sanitized keys to image files under ``root``.

    With ``fixed_suffix`` every key is stored as ``<key><fixed_suffix>``;
    otherwise the uploaded file's extension is kept and any earlier file for
    the key with a different extension is removed on save.
    """

    def __init__(self, root: Path, url_prefix: str, fixed_suffix: Optional[str] = None):
        self.root = Path(root)
        self.url_prefix = url_prefix.rstrip("/")
        self.fixed_suffix = fixed_suffix

    def suffix_for(self, filename: Optional[str], content_type: Optional[str]) -> str:
        if self.fixed_suffix:
            return self.fixed_suffix
        ext = os.path.splitext(filename or "")[1].lower()
        if ext in ALLOWED_SUFFIXES:
            return ext
        mime = (content_type or "").split(";")[0].strip().lower()
        return ALLOWED_IMAGE_TYPES.get(mime, ".png")

    def find(self, key: str) -> Optional[Path]:
        if not self.root.is_dir():
            return None
        if self.fixed_suffix:
            path = self.root / f"{key}{self.fixed_suffix}"
            return path if path.is_file() else None
        for suffix in ALLOWED_SUFFIXES:
            path = self.root / f"{key}{suffix}"
            if path.is_file():
                return path
        return None

    def url_for(self, key: str) -> Optional[str]:
        path = self.find(key)
        if path is None:
            return None
        return f"{self.url_prefix}/{path.name}"

    def save(self, key: str, data: bytes, suffix: str) -> str:
        """Write ``data`` for ``key`` and return its public URL."""

        self.root.mkdir(parents=True, exist_ok=True)
        destination = self.root / f"{key}{suffix}"

        # Snapshot before the replace: a concurrent save with another extension
        # can leave two files for the key, and `find` returns the first.
        stale = [
            self.root / f"{key}{other}"
            for other in ALLOWED_SUFFIXES
            if other != suffix and (self.root / f"{key}{other}").is_file()
        ]

        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, destination)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        for path in stale:
            path.unlink(missing_ok=True)

        logger.info("Stored %s (%d bytes)", destination, len(data))
        return f"{self.url_prefix}/{destination.name}"


__all__ = ["ALLOWED_IMAGE_TYPES", "ALLOWED_SUFFIXES", "AssetStore", "validate_image"]
