"""Tests for ingestion and snapshot publication."""

import asyncio
import re

import pytest

from media_asset_catalog.catalog.index import EMPTY_INDEX, build_index, source_key
from media_asset_catalog.collection.local import LocalCollection
from media_asset_catalog.core.types import AssetType, Filters
from media_asset_catalog.errors import IngestionError

from .conftest import BASE_URL, MockSource, make_packs


class FailingSource(MockSource):
    """Source whose pack listing is unreachable."""

    async def fetch_packs(self):
        raise ConnectionError("catalog server unreachable")


class BrokenBaseUrlSource(MockSource):
    """Source raising while resolving base urls."""

    async def resolve_base_url(self, source_key):
        raise OSError("no such storage")


class BlockingSource(MockSource):
    """Source pausing ingestion until released."""

    def __init__(self, packs):
        super().__init__(packs)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def resolve_base_url(self, source_key):
        self.started.set()
        await self.release.wait()
        return await super().resolve_base_url(source_key)


class TestBuildIndex:
    """Test building a snapshot from a source."""

    @pytest.mark.asyncio
    async def test_ids_follow_collection_wide_counter(self, source) -> None:
        index = await build_index(source)

        ids = [a.id for a in index.iter_assets()]
        assert ids == [str(i) for i in range(1, 9)]
        assert [p.id for p in index.packs] == ["dungeons", "ambience"]
        assert len(index) == 8

    @pytest.mark.asyncio
    async def test_assets_keep_source_order(self, source) -> None:
        index = await build_index(source)
        assert [a.name for a in index.packs[0].assets] == [
            "Big Cave", "Goblin Archer", "Crypt", "Orc", "Readme",
        ]

    @pytest.mark.asyncio
    async def test_unresolved_base_url_degrades_to_empty_prefix(self, raw_packs) -> None:
        index = await build_index(MockSource(raw_packs, base_urls={}))

        big_cave = index.packs[0].assets[0]
        assert big_cave.preview_url.startswith("_thumbs/")
        assert len(index) == 8

    @pytest.mark.asyncio
    async def test_failing_base_url_does_not_abort(self, raw_packs) -> None:
        index = await build_index(BrokenBaseUrlSource(raw_packs))
        assert len(index.packs) == 2

    @pytest.mark.asyncio
    async def test_unreachable_source_raises(self, raw_packs) -> None:
        with pytest.raises(IngestionError, match="unreachable"):
            await build_index(FailingSource(raw_packs))

    @pytest.mark.asyncio
    async def test_invalid_payload_raises(self) -> None:
        source = MockSource({
            "broken": {"name": "Broken", "assets": [{"width": 10}, {"path": "a.png", "height": -1}]},
        })
        message = "pack 'broken', asset 0: 'path' is a required property (and 1 more)"
        with pytest.raises(IngestionError, match=re.escape(message)):
            await build_index(source)

    def test_source_key(self) -> None:
        assert source_key("1", {"id": "dungeons#data"}) == "data"
        assert source_key("plain", {}) == "plain"


class TestSnapshot:
    """Test that collections publish complete snapshots only."""

    @pytest.mark.asyncio
    async def test_empty_before_initialize(self, source, services) -> None:
        collection = LocalCollection(source, services)

        assert collection.index is EMPTY_INDEX
        assert await collection.get_assets_count(Filters(type=AssetType.IMAGE)) == 0

    @pytest.mark.asyncio
    async def test_in_progress_build_is_not_visible(self, raw_packs, services) -> None:
        source = BlockingSource(raw_packs)
        collection = LocalCollection(source, services)

        task = asyncio.create_task(collection.initialize())
        await source.started.wait()
        assert collection.index is EMPTY_INDEX

        source.release.set()
        await task
        assert len(collection.index) == 8

    @pytest.mark.asyncio
    async def test_failed_reinitialize_keeps_previous_snapshot(self, raw_packs, services) -> None:
        source = MockSource(raw_packs)
        collection = LocalCollection(source, services)
        await collection.initialize()
        previous = collection.index

        source.packs = {"broken": {"name": "Broken"}}
        with pytest.raises(IngestionError):
            await collection.initialize()

        assert collection.index is previous

    @pytest.mark.asyncio
    async def test_reinitialize_replaces_snapshot(self, services) -> None:
        source = MockSource(make_packs())
        collection = LocalCollection(source, services)
        await collection.initialize()
        first = collection.index

        del source.packs["ambience"]
        await collection.initialize()

        assert collection.index is not first
        assert len(first) == 8
        assert len(collection.index) == 5
        assert source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_get_asset_by_id(self, source, services) -> None:
        collection = LocalCollection(source, services)
        await collection.initialize()

        asset = collection.get_asset_by_id("6")
        assert asset is not None
        assert asset.url == f"{BASE_URL}ambience/forest/birds.ogg"
        assert collection.get_asset_by_id("999") is None
