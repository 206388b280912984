"""API middleware and exception handlers.

# ─── ERROR SURFACES ──────────────────────────────────────────────────
#
#   Raised                       HTML route            JSON route
#   ─────────────────────────────────────────────────────────────────
#   InvalidArgumentError         400.html              400 text/plain
#   NotFoundError                404.html              404 text/plain
#   HTTPException (404/405/...)  <status>.html         <status> text/plain
#   other GroupieTrackerError    500 JSON ErrorResponse (middleware)
#   any other exception          500.html              500 text/plain
#
# JSON routes never render HTML templates.  Middleware is LIFO: the
# logging middleware is added last so it wraps everything and records the
# final status code.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from src.api.pages import render_error_page
from src.api.schemas import ErrorResponse
from src.utils.errors import GroupieTrackerError, InvalidArgumentError, NotFoundError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

_JSON_PATHS = frozenset({"/filter", "/concerts/data"})


def is_json_path(path: str) -> bool:
    """True for routes that answer in JSON and must not render templates."""
    return path in _JSON_PATHS or path.startswith("/api/")


def _error_response(request: Request, status_code: int, detail: str) -> Response:
    if is_json_path(request.url.path):
        return PlainTextResponse(detail, status_code=status_code)
    return render_error_page(request, status_code)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def _handle_invalid_argument(request: Request, exc: InvalidArgumentError) -> Response:
    _logger.info(
        "invalid_argument",
        path=str(request.url.path),
        parameter=exc.resource,
        detail=exc.message,
    )
    return _error_response(request, 400, exc.message)


async def _handle_not_found(request: Request, exc: NotFoundError) -> Response:
    return _error_response(request, 404, exc.message)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    return _error_response(request, exc.status_code, str(exc.detail))


async def _handle_unexpected(request: Request, exc: Exception) -> Response:
    _logger.error(
        "unhandled_exception",
        path=str(request.url.path),
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return _error_response(request, 500, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that map domain errors to HTML or plain text."""
    app.add_exception_handler(InvalidArgumentError, _handle_invalid_argument)
    app.add_exception_handler(NotFoundError, _handle_not_found)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(Exception, _handle_unexpected)


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response else 500
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=status_code,
                duration_ms=duration_ms,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Convert stray ``GroupieTrackerError`` subclasses into JSON 500s.

    Query errors are handled by the exception handlers above; anything that
    reaches this point (an upstream error surfacing mid-request) is logged
    in full server-side and reported to the client as type + message only.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except GroupieTrackerError as exc:
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                resource=exc.resource,
                path=str(request.url.path),
            )
            body = ErrorResponse(error=type(exc).__name__, detail=exc.message)
            return JSONResponse(status_code=500, content=body.model_dump())
