"""Pydantic response schemas for the groupieTracker JSON API.

``/filter`` and ``/concerts/data`` serialise the domain models directly
(``Artist`` by alias, ``Concert``); the schemas here cover the system
endpoints and the error body produced by ``ErrorHandlingMiddleware``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Structured error returned for unhandled application errors."""

    error: str = Field(description="Exception class name.")
    detail: str = Field(description="Human-readable error message.")


class HealthResponse(BaseModel):
    """Application health and snapshot statistics."""

    status: str = Field(description="'healthy' once a snapshot is loaded, else 'unavailable'.")
    version: str
    provider: str
    counts: dict[str, int] = Field(default_factory=dict)
    loaded_at: datetime | None = None
