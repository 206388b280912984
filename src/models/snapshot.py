"""The unit of replacement for the in-memory store.

A :class:`Snapshot` bundles the four upstream collections fetched during one
load.  The store swaps whole snapshots; it never edits one in place, so a
reader holding a reference always sees four collections from the same load.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.directory import Artist, DateRecord, LocationRecord, RelationRecord


class Snapshot(BaseModel):
    """Artists, locations, dates and relations captured at one point in time.

    ``Snapshot()`` is the empty state that exists before the first
    successful load; ``loaded_at`` stays ``None`` until then.
    """

    model_config = ConfigDict(frozen=True)

    artists: tuple[Artist, ...] = ()
    locations: tuple[LocationRecord, ...] = ()
    dates: tuple[DateRecord, ...] = ()
    relations: tuple[RelationRecord, ...] = ()
    loaded_at: datetime | None = Field(
        default=None, description="UTC time the snapshot was committed."
    )

    @property
    def is_empty(self) -> bool:
        return self.loaded_at is None

    def counts(self) -> dict[str, int]:
        """Number of records per collection, keyed by resource name."""
        return {
            "artists": len(self.artists),
            "locations": len(self.locations),
            "dates": len(self.dates),
            "relations": len(self.relations),
        }
