"""HTTP adapter for the Groupie Trackers artist directory.

The directory exposes four fixed, unauthenticated endpoints under one base
URL.  ``/artists`` returns a bare array; ``/locations``, ``/dates`` and
``/relation`` return index envelopes, which are decoded into their typed
wrapper and unwrapped here so callers only ever see plain record lists.

The ``httpx.AsyncClient`` is injected so the application can share one
client and tests can swap in a mock transport.
"""

from __future__ import annotations

import httpx

from src.interfaces.directory_provider import IDirectoryProvider
from src.models.directory import (
    Artist,
    DateIndex,
    DateRecord,
    LocationIndex,
    LocationRecord,
    RelationIndex,
    RelationRecord,
)
from src.providers.directory.fetch import fetch_json
from src.utils.logging import get_logger

DEFAULT_BASE_URL = "https://groupietrackers.herokuapp.com/api"

# Resource name -> path segment under the base URL.  Note the upstream
# spells the relations endpoint in the singular.
DEFAULT_ENDPOINTS: dict[str, str] = {
    "artists": "artists",
    "locations": "locations",
    "dates": "dates",
    "relations": "relation",
}


class GroupieAPIProvider(IDirectoryProvider):
    """Directory provider backed by the public Groupie Trackers REST API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
        endpoints: dict[str, str] | None = None,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._endpoints = {**DEFAULT_ENDPOINTS, **(endpoints or {})}
        self._logger = get_logger(__name__)

    def url_for(self, resource: str) -> str:
        """Absolute URL of *resource* (``"artists"``, ``"relations"``, ...)."""
        return f"{self._base_url}/{self._endpoints[resource].lstrip('/')}"

    # -- IDirectoryProvider implementation -------------------------------------

    async def fetch_artists(self) -> list[Artist]:
        artists = await fetch_json(
            self._http, self.url_for("artists"), list[Artist], resource="artists"
        )
        self._logger.info("upstream_fetched", resource="artists", count=len(artists))
        return artists

    async def fetch_locations(self) -> list[LocationRecord]:
        envelope = await fetch_json(
            self._http, self.url_for("locations"), LocationIndex, resource="locations"
        )
        self._logger.info("upstream_fetched", resource="locations", count=len(envelope.index))
        return list(envelope.index)

    async def fetch_dates(self) -> list[DateRecord]:
        envelope = await fetch_json(
            self._http, self.url_for("dates"), DateIndex, resource="dates"
        )
        self._logger.info("upstream_fetched", resource="dates", count=len(envelope.index))
        return list(envelope.index)

    async def fetch_relations(self) -> list[RelationRecord]:
        envelope = await fetch_json(
            self._http, self.url_for("relations"), RelationIndex, resource="relations"
        )
        self._logger.info("upstream_fetched", resource="relations", count=len(envelope.index))
        return list(envelope.index)

    def get_provider_name(self) -> str:
        return "groupie_api"
