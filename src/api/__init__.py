"""groupieTracker web layer -- HTML pages, JSON routes, schemas and middleware."""

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
)
from src.api.pages import render_error_page
from src.api.pages import router as pages_router
from src.api.routes import router
from src.api.schemas import ErrorResponse, HealthResponse

__all__ = [
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "HealthResponse",
    "RequestLoggingMiddleware",
    "pages_router",
    "register_exception_handlers",
    "render_error_page",
    "router",
]
