"""Store and query services for the artist directory."""

from src.services.artist_filter import MAX_YEAR, MIN_YEAR, filter_artists, parse_int
from src.services.artist_store import ArtistStore
from src.services.concert_aggregator import aggregate_concerts, find_relation

__all__ = [
    "ArtistStore",
    "MAX_YEAR",
    "MIN_YEAR",
    "aggregate_concerts",
    "filter_artists",
    "find_relation",
    "parse_int",
]
