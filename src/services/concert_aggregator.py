"""Concert aggregation over relation records.

Turns one artist's ``datesLocations`` mapping into a flat list of
:class:`Concert` pairs sorted by date.

Sorting is plain lexical string comparison.  Dates are never parsed, so the
result is chronological only when the upstream format sorts that way
(``YYYY-MM-DD``).  The directory currently serves ``DD-MM-YYYY``, for which
the order groups by day of month instead.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.models.concert import Concert
from src.models.directory import RelationRecord

# Unicode White_Space characters.  str.strip() with no argument would also
# remove the \x1c-\x1f separators, which are kept here.
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def find_relation(
    relations: Iterable[RelationRecord], artist_id: int
) -> RelationRecord | None:
    """Return the first relation record whose id equals *artist_id*."""
    for record in relations:
        if record.id == artist_id:
            return record
    return None


def aggregate_concerts(
    relations: Iterable[RelationRecord], artist_id: int
) -> list[Concert]:
    """Build the sorted concert list for *artist_id*.

    Only the first matching relation record is used.  Location keys and
    date strings are trimmed of Unicode white space.  Ties on date keep
    the mapping's iteration order because ``list.sort`` is stable.  An
    unknown id yields an empty list.
    """
    record = find_relation(relations, artist_id)
    if record is None:
        return []

    concerts: list[Concert] = []
    for location, dates in record.dates_locations.items():
        clean_location = location.strip(_WHITESPACE)
        for date in dates:
            concerts.append(Concert(date=date.strip(_WHITESPACE), location=clean_location))

    concerts.sort(key=lambda concert: concert.date)
    return concerts
