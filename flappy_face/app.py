"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_exception_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    LOG_LEVEL,
    PORT,
    PUBLIC_DIR,
    SERVICE_NAME,
    UPLOAD_DIR,
    configure_logging,
    engine,
    init_db,
    safe_url,
)

logger = logging.getLogger(__name__)

UPLOAD_DIR.mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(reset=DB_RESET)
    logger.info(
        "%s ready (database %s, uploads in %s)", SERVICE_NAME, safe_url(engine), UPLOAD_DIR
    )
    yield


def create_app() -> FastAPI:
    configure_logging(LOG_LEVEL)

    app = FastAPI(title="Flappy Face API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)

    app.mount("/uploads", StaticFiles(directory=UPLOAD_DIR), name="uploads")
    # Game frontend, when deployed alongside.
    if PUBLIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("flappy_face.app:app", host="127.0.0.1", port=PORT, reload=True)
