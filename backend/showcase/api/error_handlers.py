"""Error Handlers — turn store and request failures into the showcase error envelope.

Invariants:
    - Every error body has the shape {"error": {code, message, category, severity, ...}}
    - Store rules (DUPLICATE_USERNAME, LAST_ADMINISTRATOR, AUTHOR_NOT_FOUND,
      VIEW_COUNT_DECREASE, INVALID_SCORE, RESOURCE_NOT_FOUND) keep their own status
    - Malformed user/portfolio bodies (unknown keys, blank titles, bad enums) → 400
    - Anything else → 500 without internals; DATABASE_ERROR (503) is logged as error

Design Decisions:
    - Client mistakes log at warning, server faults at error with traceback
    - Registered from main.py so the app module only wires routers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from showcase.core.errors import ErrorCategory, ErrorSeverity, ShowcaseError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShowcaseError, _handle_showcase_error)
    app.add_exception_handler(RequestValidationError, _handle_invalid_body)
    app.add_exception_handler(Exception, _handle_unexpected)


async def _handle_showcase_error(request: Request, exc: ShowcaseError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} rejected: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "user_id": exc.context.user_id,
            "portfolio_id": exc.context.portfolio_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_invalid_body(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"] if loc != "body"),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"{request.method} {request.url.path} invalid fields: "
        f"{[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Request fields are missing or invalid",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details,
        ),
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path} failed: {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "The showcase could not complete the request",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        body["details"] = details
    return {"error": body}
