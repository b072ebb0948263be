"""Tests for the caller-side browser."""

import asyncio

import pytest

from media_asset_catalog.browser import AssetBrowser, LoadState
from media_asset_catalog.collection.base import PAGE_SIZE
from media_asset_catalog.collection.local import LocalCollection
from media_asset_catalog.core.types import AssetType, Filters

from .conftest import BASE_URL, MockSource


class SlowCollection(LocalCollection):
    """Collection holding get_assets until released."""

    def __init__(self, source):
        super().__init__(source)
        self.release = asyncio.Event()

    async def get_assets(self, filters, page):
        await self.release.wait()
        return await super().get_assets(filters, page)


def many_maps(count: int) -> MockSource:
    return MockSource({
        "maps": {
            "id": "maps#data",
            "name": "Maps",
            "assets": [
                {"path": f"{BASE_URL}maps/map_{i}.webp", "width": 2000, "height": 2000}
                for i in range(count)
            ],
        },
    })


class TestLoadMore:
    """Test the pagination state machine."""

    @pytest.mark.asyncio
    async def test_loads_pages_until_exhausted(self) -> None:
        collection = LocalCollection(many_maps(PAGE_SIZE + 5))
        await collection.initialize()
        browser = AssetBrowser(collection)

        assert browser.filters.type == AssetType.MAP
        assert len(await browser.load_more()) == PAGE_SIZE
        assert browser.state == LoadState.IDLE
        assert len(await browser.load_more()) == 5
        assert await browser.load_more() == []
        assert browser.state == LoadState.EXHAUSTED
        assert browser.page == 2
        assert len(browser.assets) == PAGE_SIZE + 5

        # exhausted browsers do not query again
        assert await browser.load_more() == []

    @pytest.mark.asyncio
    async def test_concurrent_load_is_rejected(self) -> None:
        collection = SlowCollection(many_maps(3))
        await collection.initialize()
        browser = AssetBrowser(collection)

        first = asyncio.create_task(browser.load_more())
        await asyncio.sleep(0)
        assert browser.state == LoadState.LOADING
        assert await browser.load_more() is None

        collection.release.set()
        assert len(await first) == 3
        assert browser.page == 1

    @pytest.mark.asyncio
    async def test_filter_change_mid_load_drops_stale_page(self, source) -> None:
        collection = SlowCollection(source)
        await collection.initialize()
        browser = AssetBrowser(collection)

        stale = asyncio.create_task(browser.load_more())
        await asyncio.sleep(0)
        browser.select_type(AssetType.AUDIO)
        current = asyncio.create_task(browser.load_more())
        await asyncio.sleep(0)

        # the new session is single-flight too
        assert browser.state == LoadState.LOADING
        assert await browser.load_more() is None

        collection.release.set()
        assert await stale is None
        assert [a.name for a in await current] == ["Birds", "Crowd"]
        assert browser.page == 1
        assert [a.type for a in browser.assets] == [AssetType.AUDIO, AssetType.AUDIO]
        assert browser.state == LoadState.IDLE

    @pytest.mark.asyncio
    async def test_failed_load_returns_to_idle(self) -> None:
        collection = LocalCollection(many_maps(1))

        async def fail(filters, page):
            raise RuntimeError("boom")

        collection.get_assets = fail
        browser = AssetBrowser(collection)

        with pytest.raises(RuntimeError):
            await browser.load_more()
        assert browser.state == LoadState.IDLE


class TestFilterPanel:
    """Test filter selection and the panel data."""

    @pytest.mark.asyncio
    async def test_selecting_filters_restarts_pagination(self, source) -> None:
        collection = LocalCollection(source)
        await collection.initialize()
        browser = AssetBrowser(collection)
        await browser.load_more()
        await browser.load_more()
        assert browser.state == LoadState.EXHAUSTED

        browser.select_type(AssetType.IMAGE)

        assert browser.state == LoadState.IDLE
        assert browser.page == 0
        assert browser.assets == []
        assert [a.name for a in await browser.load_more()] == ["Goblin Archer", "Orc", "Torch"]

    def test_selecting_creator_clears_pack(self, source) -> None:
        browser = AssetBrowser(LocalCollection(source), Filters(type=AssetType.IMAGE, pack="dungeons"))
        browser.select_creator("someone")
        assert browser.filters.pack is None
        assert browser.filters.creator == "someone"

    def test_search_and_folder(self, source) -> None:
        browser = AssetBrowser(LocalCollection(source))
        browser.search("")
        assert browser.filters.search_terms is None
        browser.search("cave")
        browser.select_folder("maps")
        browser.select_pack("dungeons")
        assert browser.filters == Filters(type=AssetType.MAP, pack="dungeons", folder="maps", search_terms="cave")

    @pytest.mark.asyncio
    async def test_get_data(self, source, services) -> None:
        collection = LocalCollection(source, services)
        await collection.initialize()
        browser = AssetBrowser(collection, Filters(type=AssetType.AUDIO, pack="ambience"))

        data = await browser.get_data()

        assert data["collection"] == {"id": "local", "name": "Local Assets"}
        assert data["types"][0] == {"id": AssetType.IMAGE, "assets_count": 3}
        assert data["creators"] == []
        assert data["packs"] is None
        assert data["folders"] == [f"{BASE_URL}ambience/forest", f"{BASE_URL}ambience/tavern"]
