"""Character face endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...core import CHARACTERS
from ...services import AssetStore, normalize_character
from ..dependencies import get_face_store
from ..uploads import read_image

router = APIRouter(prefix="/api", tags=["characters"])


@router.get("/characters")
def list_characters(faces: AssetStore = Depends(get_face_store)) -> Dict[str, Any]:
    """List the playable characters with their current face image."""

    return {
        "ok": True,
        "characters": [
            {"name": name, "faceUrl": faces.url_for(name)} for name in CHARACTERS
        ],
    }


@router.post("/upload-face")
async def upload_face(
    character: Optional[str] = Form(None),
    face: Optional[UploadFile] = File(None),
    faces: AssetStore = Depends(get_face_store),
) -> Dict[str, Any]:
    """Replace the face image of one character."""

    name = normalize_character(character, CHARACTERS)
    data = await read_image(face, "face")
    face_url = faces.save(name, data, faces.suffix_for(face.filename, face.content_type))
    return {"ok": True, "character": name, "faceUrl": face_url}


__all__ = ["router"]
