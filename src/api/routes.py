"""JSON endpoints backing the artist cards and the concert modal.

# ─── API ROUTE MAP ────────────────────────────────────────────────────
#
# Endpoint                 Method  Description
# ─────────────────────────────────────────────────────────────────────
# /filter?id=N             GET     [artist] or [] for one identifier
# /filter?year=YYYY        GET     artists formed in YYYY (0/empty = all)
# /concerts/data?id=N      GET     [{date, location}] sorted by date
# /api/v1/health           GET     snapshot status and collection sizes
#
# Error bodies on these routes are plain text (see middleware.py).
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from src.api.dependencies import StoreDep
from src.api.schemas import HealthResponse
from src.models.concert import Concert
from src.models.directory import Artist
from src.services.artist_filter import parse_int
from src.utils.errors import InvalidArgumentError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter()

_ARTISTS_ADAPTER: TypeAdapter[list[Artist]] = TypeAdapter(list[Artist])
_CONCERTS_ADAPTER: TypeAdapter[list[Concert]] = TypeAdapter(list[Concert])


def _json_response(adapter: TypeAdapter[Any], value: Any) -> Response:
    """Serialise *value* up front so an encoding failure becomes a text 500."""
    try:
        body = adapter.dump_json(value, by_alias=True)
    except PydanticSerializationError as exc:
        _logger.error("json_encode_failed", error=str(exc))
        return PlainTextResponse("Failed to encode JSON", status_code=500)
    return Response(content=body, media_type="application/json")


@router.get("/filter", summary="Filter artists by identifier or creation year")
async def filter_artists(
    store: StoreDep,
    artist_id: Annotated[str | None, Query(alias="id")] = None,
    year: Annotated[str | None, Query()] = None,
) -> Response:
    """Return a JSON array of artists; the identifier wins over the year."""
    artists = await store.filter(artist_id=artist_id, year=year)
    return _json_response(_ARTISTS_ADAPTER, artists)


@router.get("/concerts/data", summary="Concert history for one artist")
async def concerts_data(
    store: StoreDep,
    artist_id: Annotated[str | None, Query(alias="id")] = None,
) -> Response:
    """Return a JSON array of ``{date, location}`` pairs sorted by date."""
    try:
        wanted = parse_int(artist_id or "", name="id")
    except InvalidArgumentError as exc:
        raise InvalidArgumentError("Invalid artist ID", resource="id") from exc

    concerts = await store.concerts(wanted)
    return _json_response(_CONCERTS_ADAPTER, concerts)


@router.get(
    "/api/v1/health",
    response_model=HealthResponse,
    summary="Application health check",
)
async def health_check(request: Request, store: StoreDep) -> HealthResponse:
    """Report whether a snapshot is loaded and how large each collection is."""
    snapshot = await store.snapshot()
    return HealthResponse(
        status="unavailable" if snapshot.is_empty else "healthy",
        version=getattr(request.app, "version", ""),
        provider=getattr(request.app.state, "provider_name", "unknown"),
        counts=snapshot.counts(),
        loaded_at=snapshot.loaded_at,
    )
