"""In-memory snapshot of the artist directory.

# ─── LOAD / READ DISCIPLINE ────────────────────────────────────────────
#
#   load():  provider ──(4 sequential fetches, no lock held)──> candidate
#            candidate ──(write lock, one assignment)──> self._snapshot
#
#   reads:   read lock ──> take self._snapshot ──> query ──> release
#
# Snapshots are frozen, so a reader that has taken the reference can keep
# using it after a newer snapshot is swapped in.  A failed fetch raises
# before the swap, leaving the previous snapshot (possibly the empty one)
# in place: all four collections change together or not at all.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from src.interfaces.directory_provider import IDirectoryProvider
from src.models.concert import Concert
from src.models.directory import Artist, DateRecord, LocationRecord
from src.models.snapshot import Snapshot
from src.services.artist_filter import filter_artists
from src.services.concert_aggregator import aggregate_concerts
from src.utils.concurrency import ReadWriteLock
from src.utils.errors import GroupieTrackerError
from src.utils.logging import get_logger


class ArtistStore:
    """Holds the current :class:`Snapshot` and serialises access to it.

    Parameters
    ----------
    provider:
        Source of the four directory collections.
    """

    def __init__(self, provider: IDirectoryProvider) -> None:
        self._provider = provider
        self._snapshot = Snapshot()
        self._lock = ReadWriteLock()
        self._load_lock = asyncio.Lock()
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> Snapshot:
        """Fetch all four collections and replace the snapshot.

        Raises the first :class:`FetchError` / :class:`DecodeError`
        encountered; in that case nothing is committed.
        """
        async with self._load_lock:
            provider_name = self._provider.get_provider_name()
            self._logger.info("snapshot_load_started", provider=provider_name)
            try:
                artists = await self._provider.fetch_artists()
                locations = await self._provider.fetch_locations()
                dates = await self._provider.fetch_dates()
                relations = await self._provider.fetch_relations()
            except GroupieTrackerError as exc:
                self._logger.error(
                    "snapshot_load_failed",
                    provider=provider_name,
                    resource=exc.resource,
                    error=exc.message,
                )
                raise

            candidate = Snapshot(
                artists=tuple(artists),
                locations=tuple(locations),
                dates=tuple(dates),
                relations=tuple(relations),
                loaded_at=datetime.now(tz=timezone.utc),
            )

            async with self._lock.write():
                self._snapshot = candidate

            self._logger.info("snapshot_loaded", provider=provider_name, **candidate.counts())
            return candidate

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    async def snapshot(self) -> Snapshot:
        """Return the current snapshot (immutable; safe to keep)."""
        async with self._lock.read():
            return self._snapshot

    async def is_loaded(self) -> bool:
        async with self._lock.read():
            return not self._snapshot.is_empty

    async def artists(self) -> list[Artist]:
        """All artists in upstream order."""
        async with self._lock.read():
            return list(self._snapshot.artists)

    async def get_artist(self, artist_id: int) -> Artist | None:
        async with self._lock.read():
            for artist in self._snapshot.artists:
                if artist.id == artist_id:
                    return artist
        return None

    async def location_record(self, artist_id: int) -> LocationRecord | None:
        async with self._lock.read():
            for record in self._snapshot.locations:
                if record.id == artist_id:
                    return record
        return None

    async def date_record(self, artist_id: int) -> DateRecord | None:
        async with self._lock.read():
            for record in self._snapshot.dates:
                if record.id == artist_id:
                    return record
        return None

    async def filter(
        self, artist_id: str | None = None, year: str | None = None
    ) -> list[Artist]:
        """Run :func:`filter_artists` against the current artists.

        Raises
        ------
        InvalidArgumentError
            For a malformed id or a malformed / out-of-range year.
        """
        async with self._lock.read():
            return filter_artists(self._snapshot.artists, artist_id=artist_id, year=year)

    async def concerts(self, artist_id: int) -> list[Concert]:
        """Sorted ``{date, location}`` pairs for *artist_id* (empty if unknown)."""
        async with self._lock.read():
            return aggregate_concerts(self._snapshot.relations, artist_id)
