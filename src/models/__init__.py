"""groupieTracker domain models -- re-exports all public model classes.

Submodules by concern:
    - directory.py  -- upstream records (Artist, Location/Date/Relation
      records) and their index envelopes
    - concert.py    -- aggregated ``{date, location}`` pairs
    - snapshot.py   -- the four collections loaded together
"""

from __future__ import annotations

from src.models.concert import Concert
from src.models.directory import (
    Artist,
    DateIndex,
    DateRecord,
    LocationIndex,
    LocationRecord,
    RelationIndex,
    RelationRecord,
)
from src.models.snapshot import Snapshot

__all__ = [
    "Artist",
    "Concert",
    "DateIndex",
    "DateRecord",
    "LocationIndex",
    "LocationRecord",
    "RelationIndex",
    "RelationRecord",
    "Snapshot",
]
