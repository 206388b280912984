"""Unit tests for ArtistStore loading, read accessors and lock discipline."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.models.snapshot import Snapshot
from src.services.artist_store import ArtistStore
from src.utils.errors import DecodeError, FetchError, InvalidArgumentError


def _generation(snapshot: Snapshot) -> set[str]:
    """Generation markers found across every collection of *snapshot*."""
    markers = {a.name.rsplit("gen ", 1)[1].rstrip(")") for a in snapshot.artists}
    markers |= {loc.rsplit("-", 1)[1] for loc in snapshot.locations[0].locations[:1]}
    markers |= {
        key.strip().rsplit("-", 1)[1]
        for key in snapshot.relations[0].dates_locations
        if key.strip().startswith("london")
    }
    return markers


# ======================================================================
# Loading
# ======================================================================


class TestLoad:
    @pytest.mark.asyncio
    async def test_starts_empty(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)

        snapshot = await store.snapshot()

        assert snapshot.is_empty
        assert snapshot.counts() == {"artists": 0, "locations": 0, "dates": 0, "relations": 0}
        assert await store.is_loaded() is False
        assert await store.artists() == []

    @pytest.mark.asyncio
    async def test_load_populates_all_collections(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)

        snapshot = await store.load()

        assert snapshot.counts() == {"artists": 3, "locations": 3, "dates": 3, "relations": 3}
        assert snapshot.loaded_at is not None
        assert await store.snapshot() is snapshot
        assert await store.is_loaded() is True

    @pytest.mark.asyncio
    async def test_fetches_resources_in_order(self, mock_provider) -> None:
        calls: list[str] = []
        for name in ("fetch_artists", "fetch_locations", "fetch_dates", "fetch_relations"):
            method = getattr(mock_provider, name)
            original = method.return_value
            method.side_effect = lambda n=name, v=original: calls.append(n) or v

        await ArtistStore(mock_provider).load()

        assert calls == ["fetch_artists", "fetch_locations", "fetch_dates", "fetch_relations"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "failing_method,resource",
        [
            ("fetch_artists", "artists"),
            ("fetch_locations", "locations"),
            ("fetch_dates", "dates"),
            ("fetch_relations", "relations"),
        ],
    )
    async def test_failure_leaves_empty_store_untouched(
        self, provider_factory, failing_method: str, resource: str
    ) -> None:
        provider = provider_factory(
            **{failing_method: AsyncMock(side_effect=FetchError("boom", resource=resource))}
        )
        store = ArtistStore(provider)

        with pytest.raises(FetchError) as exc_info:
            await store.load()

        assert exc_info.value.resource == resource
        assert (await store.snapshot()).is_empty
        assert await store.artists() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "failing_method,resource",
        [
            ("fetch_artists", "artists"),
            ("fetch_locations", "locations"),
            ("fetch_dates", "dates"),
            ("fetch_relations", "relations"),
        ],
    )
    async def test_failed_reload_keeps_previous_snapshot(
        self, provider_factory, failing_method: str, resource: str
    ) -> None:
        provider = provider_factory(generation=1)
        store = ArtistStore(provider)
        first = await store.load()

        # Second load would return generation 2 everywhere but one fetch fails.
        newer = provider_factory(generation=2)
        for name in ("fetch_artists", "fetch_locations", "fetch_dates", "fetch_relations"):
            setattr(provider, name, getattr(newer, name))
        setattr(
            provider,
            failing_method,
            AsyncMock(side_effect=DecodeError("bad body", resource=resource)),
        )

        with pytest.raises(DecodeError) as exc_info:
            await store.load()

        assert exc_info.value.resource == resource
        current = await store.snapshot()
        assert current is first
        assert _generation(current) == {"1"}

    @pytest.mark.asyncio
    async def test_successful_reload_replaces_everything(self, provider_factory) -> None:
        provider = provider_factory(generation=1)
        store = ArtistStore(provider)
        await store.load()

        newer = provider_factory(generation=2)
        for name in ("fetch_artists", "fetch_locations", "fetch_dates", "fetch_relations"):
            setattr(provider, name, getattr(newer, name))
        await store.load()

        assert _generation(await store.snapshot()) == {"2"}


# ======================================================================
# Read accessors
# ======================================================================


class TestReadAccessors:
    @pytest.mark.asyncio
    async def test_get_artist(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)
        await store.load()

        artist = await store.get_artist(2)

        assert artist is not None
        assert artist.name.startswith("SOJA")
        assert await store.get_artist(99) is None

    @pytest.mark.asyncio
    async def test_location_and_date_records(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)
        await store.load()

        locations = await store.location_record(2)
        dates = await store.date_record(1)

        assert locations is not None and locations.locations == ("playa_del_carmen-mexico",)
        assert dates is not None and dates.dates == ("*2019-12-28", "2020-01-05")
        assert await store.location_record(99) is None
        assert await store.date_record(99) is None

    @pytest.mark.asyncio
    async def test_filter_delegates_to_query(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)
        await store.load()

        assert [a.id for a in await store.filter(year="1965")] == [3]
        assert [a.id for a in await store.filter(artist_id="1")] == [1]
        assert len(await store.filter()) == 3
        with pytest.raises(InvalidArgumentError):
            await store.filter(year="1800")

    @pytest.mark.asyncio
    async def test_concerts(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)
        await store.load()

        concerts = await store.concerts(1)

        assert [c.date for c in concerts] == ["2019-12-28", "2019-12-30", "2020-01-05"]
        assert await store.concerts(404) == []

    @pytest.mark.asyncio
    async def test_artists_returns_a_copy(self, mock_provider) -> None:
        store = ArtistStore(mock_provider)
        await store.load()

        artists = await store.artists()
        artists.clear()

        assert len(await store.artists()) == 3


# ======================================================================
# Concurrency
# ======================================================================


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_readers_never_see_a_partial_snapshot(self, provider_factory) -> None:
        provider = provider_factory(generation=1)
        store = ArtistStore(provider)
        await store.load()

        # Generation 2 stalls on its last fetch until released.
        release = asyncio.Event()
        newer = provider_factory(generation=2)
        relations = newer.fetch_relations.return_value

        async def slow_relations():
            await release.wait()
            return relations

        for name in ("fetch_artists", "fetch_locations", "fetch_dates"):
            setattr(provider, name, getattr(newer, name))
        provider.fetch_relations = AsyncMock(side_effect=slow_relations)

        load_task = asyncio.create_task(store.load())
        await asyncio.sleep(0)

        async def read_once(i: int) -> set[str]:
            if i % 3 == 0:
                await store.filter(year="1970")
            elif i % 3 == 1:
                await store.concerts(1)
            return _generation(await store.snapshot())

        # While the upstream call is pending, readers are not blocked and
        # still see generation 1 in every collection.
        during = await asyncio.wait_for(
            asyncio.gather(*(read_once(i) for i in range(60))), timeout=5
        )
        assert all(markers == {"1"} for markers in during)

        release.set()
        mixed = await asyncio.wait_for(
            asyncio.gather(load_task, *(read_once(i) for i in range(60))), timeout=5
        )
        for markers in mixed[1:]:
            assert markers in ({"1"}, {"2"})

        assert _generation(await store.snapshot()) == {"2"}

    @pytest.mark.asyncio
    async def test_concurrent_loads_are_serialised(self, provider_factory) -> None:
        in_flight = 0
        peak = 0
        provider = provider_factory()
        artists = provider.fetch_artists.return_value

        async def tracked_artists():
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return artists

        provider.fetch_artists = AsyncMock(side_effect=tracked_artists)
        store = ArtistStore(provider)

        await asyncio.wait_for(asyncio.gather(*(store.load() for _ in range(5))), timeout=5)

        assert peak == 1
        assert provider.fetch_artists.await_count == 5
