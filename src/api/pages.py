"""Server-rendered HTML pages.

``/`` lists every artist as a card; ``/artist/{id}`` renders the same
template in single-artist mode with the artist's concert history.  Both
templates and the error pages live in ``settings.templates_dir``.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import TemplateError

from src.api.dependencies import StoreDep, TemplatesDep
from src.services.artist_filter import parse_int
from src.utils.errors import InvalidArgumentError, NotFoundError
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(default_response_class=HTMLResponse)

_ERROR_TEMPLATES = {
    400: "400.html",
    404: "404.html",
    405: "405.html",
    500: "500.html",
}


def render_error_page(request: Request, status_code: int) -> Response:
    """Render the error template for *status_code* (500 page for unknown codes).

    Falls back to a plain-text body if the error template itself fails.
    """
    template_name = _ERROR_TEMPLATES.get(status_code, "500.html")
    templates = request.app.state.templates
    try:
        return templates.TemplateResponse(
            request, template_name, {"status_code": status_code}, status_code=status_code
        )
    except TemplateError as exc:
        _logger.error("template_render_failed", template=template_name, error=str(exc))
        return PlainTextResponse(
            f"Error rendering error page: {exc}", status_code=status_code
        )


def _render(
    request: Request, templates: Any, name: str, context: dict[str, Any]
) -> Response:
    try:
        return templates.TemplateResponse(request, name, context)
    except TemplateError as exc:
        _logger.error("template_render_failed", template=name, error=str(exc))
        return render_error_page(request, 500)


@router.get("/", summary="Home page with every artist")
async def home(request: Request, store: StoreDep, templates: TemplatesDep) -> Response:
    artists = await store.artists()
    return _render(
        request,
        templates,
        "index.html",
        {"artists": artists, "artist": None, "concerts": [], "is_single_artist": False},
    )


@router.get("/artist/{artist_id}", summary="Single artist page")
async def artist_page(
    artist_id: str, request: Request, store: StoreDep, templates: TemplatesDep
) -> Response:
    """Render one artist; a non-positive or non-numeric id is a 404."""
    try:
        wanted = parse_int(artist_id, name="id")
    except InvalidArgumentError as exc:
        raise NotFoundError(f"no artist {artist_id!r}", resource="artists") from exc
    if wanted < 1:
        raise NotFoundError(f"no artist {artist_id!r}", resource="artists")

    artist = await store.get_artist(wanted)
    if artist is None:
        raise NotFoundError(f"no artist with id {wanted}", resource="artists")

    concerts = await store.concerts(wanted)
    return _render(
        request,
        templates,
        "index.html",
        {"artists": [], "artist": artist, "concerts": concerts, "is_single_artist": True},
    )
