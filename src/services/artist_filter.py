"""Artist selection for the ``/filter`` endpoint.

Query parameters arrive as raw strings.  An identifier takes precedence over
a year; with neither (or year ``"0"``) the whole collection is returned.
Years are restricted to a fixed window that is independent of the data.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from src.models.directory import Artist
from src.utils.errors import InvalidArgumentError

MIN_YEAR = 1900
MAX_YEAR = 2025

# Optional sign followed by digits, nothing else (no whitespace, no "1_000").
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Identifiers and years must fit a signed 64-bit integer.
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_MAX_DIGITS = len(str(_INT64_MAX))


def parse_int(raw: str, *, name: str) -> int:
    """Parse *raw* as a base-10 integer or raise :class:`InvalidArgumentError`.

    Stricter than ``int()``: surrounding whitespace and digit separators
    are rejected, as are values outside the signed 64-bit range.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}", resource=name)

    # Leading zeros are dropped and the length checked before int() sees it.
    sign = "-" if raw.startswith("-") else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidArgumentError(f"{name} is out of range", resource=name)

    value = int(sign + digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise InvalidArgumentError(f"{name} is out of range", resource=name)
    return value


def filter_artists(
    artists: Sequence[Artist],
    artist_id: str | None = None,
    year: str | None = None,
) -> list[Artist]:
    """Select artists by identifier or by creation year.

    Parameters
    ----------
    artists:
        The store's artist collection, in store order.
    artist_id:
        Raw ``id`` query value.  When non-empty it wins over *year* and the
        result holds at most one artist.
    year:
        Raw ``year`` query value.  Empty, missing or ``"0"`` means no filter.

    Raises
    ------
    InvalidArgumentError
        If *artist_id* or *year* is not an integer, or the year lies outside
        ``[MIN_YEAR, MAX_YEAR]``.
    """
    if artist_id:
        wanted = parse_int(artist_id, name="id")
        for artist in artists:
            if artist.id == wanted:
                return [artist]
        return []

    if not year or year == "0":
        return list(artists)

    wanted_year = parse_int(year, name="year")
    if wanted_year < MIN_YEAR or wanted_year > MAX_YEAR:
        raise InvalidArgumentError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {wanted_year}",
            resource="year",
        )
    return [artist for artist in artists if artist.creation_date == wanted_year]
