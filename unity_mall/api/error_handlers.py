# This file defines the API error types and the exception handlers that render them.
# Every error body carries the message under `error` (the shape existing clients read)
# alongside an error code, request id and timestamp.
# Storage failures surface the driver message verbatim with a 500 status.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

LOGGER = logging.getLogger("unity_mall.api")


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Missing or unusable client input, such as an upload with no files."""

    def __init__(self, message: str, *, details: Any | None = None) -> None:
        super().__init__(
            status_code=400,
            error_code="VALIDATION_ERROR",
            message=message,
            details=details,
        )


class NotFoundError(APIError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=404, error_code="NOT_FOUND", message=message)


class FileTooLargeError(APIError):
    def __init__(self, *, filename: str | None, limit_bytes: int) -> None:
        super().__init__(
            status_code=413,
            error_code="FILE_TOO_LARGE",
            message="File too large",
            details={"filename": filename, "limit_bytes": limit_bytes},
        )


def storage_error_message(exc: SQLAlchemyError) -> str:
    """Return the underlying driver message for a SQLAlchemy failure."""

    original = getattr(exc, "orig", None)
    if original is not None:
        return str(original)
    return str(exc)


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error": message,
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
                details=exc.details,
            ),
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        message = storage_error_message(exc)
        LOGGER.error("Storage error on %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                error_code="STORAGE_ERROR",
                message=message,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message="Invalid request parameters.",
                details=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="HTTP_ERROR",
                message=str(exc.detail),
            ),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                error_code="INTERNAL_SERVER_ERROR",
                message="The server encountered an unexpected error.",
            ),
        )
