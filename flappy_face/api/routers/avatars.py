"""Per-username avatar endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...services import AssetStore, normalize_username
from ..dependencies import get_avatar_store
from ..uploads import read_image

router = APIRouter(prefix="/api", tags=["avatars"])


@router.get("/avatar")
def get_avatar(
    username: Optional[str] = None,
    avatars: AssetStore = Depends(get_avatar_store),
) -> Dict[str, Any]:
    """Look up a user's avatar; ``avatarUrl`` is null when none was uploaded."""

    key = normalize_username(username)
    return {"ok": True, "username": key, "avatarUrl": avatars.url_for(key)}


@router.post("/upload-avatar")
async def upload_avatar(
    username: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    avatars: AssetStore = Depends(get_avatar_store),
) -> Dict[str, Any]:
    """Store or replace a user's avatar."""

    key = normalize_username(username)
    data = await read_image(avatar, "avatar")
    avatar_url = avatars.save(key, data, avatars.suffix_for(avatar.filename, avatar.content_type))
    return {"ok": True, "username": key, "avatarUrl": avatar_url}


__all__ = ["router"]
