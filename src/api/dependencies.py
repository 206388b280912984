"""FastAPI dependencies resolving shared components from ``app.state``.

``app.state.store`` and ``app.state.templates`` are populated by the
lifespan hook in ``src/main.py`` (or directly by tests).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from src.services.artist_store import ArtistStore


def _get_store(request: Request) -> ArtistStore:
    """Return the artist store from application state."""
    return request.app.state.store


def _get_templates(request: Request) -> Jinja2Templates:
    """Return the Jinja2 template environment from application state."""
    return request.app.state.templates


StoreDep = Annotated[ArtistStore, Depends(_get_store)]
TemplatesDep = Annotated[Jinja2Templates, Depends(_get_templates)]
