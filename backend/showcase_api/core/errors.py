# showcase_api/core/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error rendered as {"ok": false, "error", "code"} with status_code."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code.replace("_", " ")
        super().__init__(self.message)


class InvalidArtifact(AppError):
    status_code = 422
    code = "invalid_artifact"


class UnsupportedMedia(AppError):
    status_code = 415
    code = "unsupported_media"


class ArtifactTooLarge(AppError):
    status_code = 413
    code = "artifact_too_large"


class UnknownTask(AppError):
    status_code = 404
    code = "unknown_task"


class ProviderError(AppError):
    """The inference provider failed (model load, runtime, bad output)."""

    status_code = 502
    code = "provider_error"


def _envelope(request: Request, message: str, code: str) -> dict:
    return {
        "ok": False,
        "error": message,
        "code": code,
        "request_id": getattr(request.state, "request_id", None),
    }


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.code, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", exc.code, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_envelope(request, exc.message, exc.code))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content=_envelope(request, "internal server error", "internal_error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
