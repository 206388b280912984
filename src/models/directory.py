"""Pydantic v2 models for the upstream artist directory.

All models use frozen config (immutable) and tuple-valued collections so a
loaded snapshot cannot be mutated in place.  Field names follow Python
conventions; the upstream camelCase keys (``creationDate``, ``firstAlbum``,
``datesLocations``) are declared as aliases, accepted on input and used when
serialising back to JSON.

The ``locations``, ``dates`` and ``relation`` endpoints wrap their arrays in
an *index envelope* (``{"index": [...]}``).  Each resource has its own typed
envelope class which the provider unwraps immediately after decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Artist(BaseModel):
    """A band or solo artist as listed by the directory."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Directory identifier; join key for all records.")
    name: str = Field(default="", description="Display name.")
    image: str = Field(default="", description="URL of the artist picture.")
    members: tuple[str, ...] = Field(
        default=(), description="Member names in upstream order."
    )
    creation_date: int = Field(
        default=0, alias="creationDate", description="Year the artist was formed."
    )
    first_album: str = Field(
        default="", alias="firstAlbum", description="First album date label, as supplied."
    )


class LocationRecord(BaseModel):
    """Venues an artist has played, as free text (``"london-uk"``)."""

    model_config = ConfigDict(frozen=True)

    id: int
    locations: tuple[str, ...] = ()


class DateRecord(BaseModel):
    """Performance dates for an artist, as supplied upstream (not re-parsed)."""

    model_config = ConfigDict(frozen=True)

    id: int
    dates: tuple[str, ...] = ()


class RelationRecord(BaseModel):
    """Mapping from venue name to the dates an artist performed there."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    dates_locations: dict[str, tuple[str, ...]] = Field(
        default_factory=dict, alias="datesLocations"
    )


# ---------------------------------------------------------------------------
# Index envelopes
# ---------------------------------------------------------------------------


class LocationIndex(BaseModel):
    """``GET /locations`` response body."""

    model_config = ConfigDict(frozen=True)

    index: tuple[LocationRecord, ...]


class DateIndex(BaseModel):
    """``GET /dates`` response body."""

    model_config = ConfigDict(frozen=True)

    index: tuple[DateRecord, ...]


class RelationIndex(BaseModel):
    """``GET /relation`` response body."""

    model_config = ConfigDict(frozen=True)

    index: tuple[RelationRecord, ...]
