"""Abstract base class for artist-directory providers.

Defines the contract the :class:`~src.services.artist_store.ArtistStore`
uses to pull the four upstream collections.  The store depends only on this
interface, so tests inject in-memory fakes and the HTTP adapter can be
pointed at a different base URL without touching the store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.directory import Artist, DateRecord, LocationRecord, RelationRecord


class IDirectoryProvider(ABC):
    """Contract for sources of artist, location, date and relation records.

    Every method performs exactly one upstream call and either returns the
    unwrapped collection or raises.
    """

    @abstractmethod
    async def fetch_artists(self) -> list[Artist]:
        """Return every artist in the directory.

        Raises
        ------
        src.utils.errors.FetchError
            If the request fails or the status is not 200.
        src.utils.errors.DecodeError
            If the body is not a JSON array of artists.
        """

    @abstractmethod
    async def fetch_locations(self) -> list[LocationRecord]:
        """Return every location record, unwrapped from its index envelope.

        Raises
        ------
        src.utils.errors.FetchError
        src.utils.errors.DecodeError
        """

    @abstractmethod
    async def fetch_dates(self) -> list[DateRecord]:
        """Return every date record, unwrapped from its index envelope.

        Raises
        ------
        src.utils.errors.FetchError
        src.utils.errors.DecodeError
        """

    @abstractmethod
    async def fetch_relations(self) -> list[RelationRecord]:
        """Return every relation record, unwrapped from its index envelope.

        Raises
        ------
        src.utils.errors.FetchError
        src.utils.errors.DecodeError
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in log events (e.g. ``"groupie_api"``)."""
