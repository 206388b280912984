"""A single performance: one date at one location."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Concert(BaseModel):
    """One ``{date, location}`` pair produced by the concert aggregator.

    Both values are whitespace-trimmed copies of the upstream strings; the
    date keeps its upstream textual format.
    """

    model_config = ConfigDict(frozen=True)

    date: str
    location: str
