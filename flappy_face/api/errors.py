"""Exception handlers producing the ``{"ok": false, "error": ...}`` envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services import InvalidRequest

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "internal server error"


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse({"ok": False, "error": message}, status_code=status_code, headers=headers)


async def _invalid_request(request: Request, exc: InvalidRequest) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return error_response(exc.status_code, str(exc))


async def _http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "invalid request"
    return error_response(400, message)


async def _storage_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Storage failure during %s %s", request.method, request.url.path)
    return error_response(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error envelope to ``app``."""

    app.add_exception_handler(InvalidRequest, _invalid_request)
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(SQLAlchemyError, _storage_error)
    app.add_exception_handler(OSError, _storage_error)


__all__ = ["INTERNAL_ERROR", "error_response", "register_exception_handlers"]
