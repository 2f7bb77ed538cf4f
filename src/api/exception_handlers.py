"""Exception handlers for the FastAPI application.

Every error leaves the API as ``{"msg", "error_code", "details"}``; request
validation failures carry an ``errors`` list instead of ``details``.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()


def error_response(
    status_code: int, msg: str, error_code: str, details: Any | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"msg": msg, "error_code": error_code, "details": details},
    )


def _field_name(loc: tuple[int | str, ...]) -> str:
    # Drop the "body"/"path"/"query" prefix FastAPI puts first
    parts = loc[1:] if len(loc) > 1 else loc
    return ".".join(str(part) for part in parts)


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    """Translate domain errors; server-side details stay out of production responses."""
    server_side = exc.status_code >= 500
    (logger.error if server_side else logger.warning)(
        "app_exception",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
    )
    details = None if server_side and settings.is_production else exc.details
    return error_response(exc.status_code, exc.message, exc.error_code.value, details)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and methods still answer in the standard envelope."""
    return error_response(exc.status_code, str(exc.detail), "HTTP_ERROR")


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("validation_error", errors=exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "msg": "Request validation failed",
            "error_code": ErrorCode.VALIDATION_ERROR.value,
            "errors": [
                {
                    "msg": error["msg"],
                    "field": _field_name(tuple(error["loc"])),
                    "type": error["type"],
                }
                for error in exc.errors()
            ],
        },
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=exc,
    )
    msg = "Server error" if settings.is_production else str(exc)
    return error_response(
        500, msg, ErrorCode.INTERNAL_ERROR.value, {"request_id": request_id}
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(AppException, handle_app_exception)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
