"""Shared pytest fixtures for the groupieTracker test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.interfaces.directory_provider import IDirectoryProvider
from src.models.directory import Artist, DateRecord, LocationRecord, RelationRecord

# ---------------------------------------------------------------------------
# Sample directory data
# ---------------------------------------------------------------------------


def make_artists(generation: int = 1) -> list[Artist]:
    """Three artists; names carry *generation* so snapshots can be told apart."""
    return [
        Artist(
            id=1,
            name=f"Queen (gen {generation})",
            image="https://groupietrackers.herokuapp.com/api/images/queen.jpeg",
            members=["Freddie Mercury", "Brian May", "John Deacon", "Roger Taylor"],
            creation_date=1970,
            first_album="14-12-1973",
        ),
        Artist(
            id=2,
            name=f"SOJA (gen {generation})",
            image="https://groupietrackers.herokuapp.com/api/images/soja.jpeg",
            members=["Jacob Hemphill", "Bob Jefferson"],
            creation_date=1997,
            first_album="05-06-2002",
        ),
        Artist(
            id=3,
            name=f"Pink Floyd (gen {generation})",
            image="https://groupietrackers.herokuapp.com/api/images/pinkfloyd.jpeg",
            members=["Roger Waters", "David Gilmour"],
            creation_date=1965,
            first_album="05-08-1967",
        ),
    ]


def make_locations(generation: int = 1) -> list[LocationRecord]:
    return [
        LocationRecord(id=1, locations=[f"london-uk-{generation}", "paris-france"]),
        LocationRecord(id=2, locations=["playa_del_carmen-mexico"]),
        LocationRecord(id=3, locations=[]),
    ]


def make_dates(generation: int = 1) -> list[DateRecord]:
    return [
        DateRecord(id=1, dates=["*2019-12-28", "2020-01-05"]),
        DateRecord(id=2, dates=["2019-11-03"]),
        DateRecord(id=3, dates=[]),
    ]


def make_relations(generation: int = 1) -> list[RelationRecord]:
    return [
        RelationRecord(
            id=1,
            dates_locations={
                f" london-uk-{generation} ": [" 2020-01-05", "2019-12-28 "],
                "paris-france": ["2019-12-30"],
            },
        ),
        RelationRecord(id=2, dates_locations={"playa_del_carmen-mexico": ["2019-11-03"]}),
        RelationRecord(id=3, dates_locations={}),
    ]


def make_provider(generation: int = 1, **overrides: Any) -> IDirectoryProvider:
    """Mock IDirectoryProvider returning the sample data for *generation*.

    Pass ``fetch_dates=AsyncMock(side_effect=FetchError(...))`` and similar
    to make individual fetches fail.
    """
    mock = MagicMock(spec=IDirectoryProvider)
    mock.get_provider_name.return_value = "mock-directory"
    mock.fetch_artists = AsyncMock(return_value=make_artists(generation))
    mock.fetch_locations = AsyncMock(return_value=make_locations(generation))
    mock.fetch_dates = AsyncMock(return_value=make_dates(generation))
    mock.fetch_relations = AsyncMock(return_value=make_relations(generation))
    for name, value in overrides.items():
        setattr(mock, name, value)
    return mock


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_artists() -> list[Artist]:
    return make_artists()


@pytest.fixture
def sample_relations() -> list[RelationRecord]:
    return make_relations()


@pytest.fixture
def mock_provider() -> IDirectoryProvider:
    """Mock IDirectoryProvider serving the generation-1 sample directory."""
    return make_provider()


@pytest.fixture
def provider_factory():
    """Return :func:`make_provider` so tests can build failing or newer providers."""
    return make_provider


@pytest.fixture
def upstream_payloads() -> dict[str, Any]:
    """Raw JSON bodies shaped like the four upstream endpoints."""
    return {
        "artists": [
            {
                "id": 1,
                "image": "https://groupietrackers.herokuapp.com/api/images/queen.jpeg",
                "name": "Queen",
                "members": ["Freddie Mercury", "Brian May"],
                "creationDate": 1970,
                "firstAlbum": "14-12-1973",
                "locations": "https://groupietrackers.herokuapp.com/api/locations/1",
                "concertDates": "https://groupietrackers.herokuapp.com/api/dates/1",
                "relations": "https://groupietrackers.herokuapp.com/api/relation/1",
            }
        ],
        "locations": {
            "index": [{"id": 1, "locations": ["north_carolina-usa"], "dates": "ignored"}]
        },
        "dates": {"index": [{"id": 1, "dates": ["*23-08-2019", "22-08-2019"]}]},
        "relation": {
            "index": [
                {"id": 1, "datesLocations": {"north_carolina-usa": ["22-08-2019"]}}
            ]
        },
    }
