"""Caller-side browsing state.

Filters and pagination belong to the caller, not to the collection.
AssetBrowser keeps them for one browsing session and serializes page
loads: a load requested while another is in flight is rejected.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Any

from .collection.base import Collection
from .core.types import Asset, AssetType, Filters

logger = logging.getLogger(__name__)


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    EXHAUSTED = "exhausted"


class AssetBrowser:
    """Browse a collection page by page.

    Example:
        >>> browser = AssetBrowser(collection)
        >>> while (assets := await browser.load_more()):
        ...     render(assets)
    """

    def __init__(self, collection: Collection, filters: Filters | None = None):
        self.collection = collection
        self.filters = filters or Filters(type=AssetType.MAP)
        self.state = LoadState.IDLE
        self.page = 0
        self.assets: list[Asset] = []
        self._generation = 0

    def reset(self, filters: Filters | None = None) -> None:
        """Start over from the first page, optionally with new filters.

        A load still in flight belongs to the previous session and its
        results are dropped when it completes.
        """
        if filters is not None:
            self.filters = filters
        self._generation += 1
        self.state = LoadState.IDLE
        self.page = 0
        self.assets = []

    async def load_more(self) -> list[Asset] | None:
        """Load the next page.

        Returns:
            The assets of the page ([] once exhausted), or None if the
            request was rejected because a load is already in flight or
            the browser was reset while it loaded
        """
        if self.state == LoadState.LOADING:
            logger.debug("Load rejected, page %d is still loading", self.page)
            return None
        if self.state == LoadState.EXHAUSTED:
            return []

        generation = self._generation
        self.state = LoadState.LOADING
        try:
            assets = await self.collection.get_assets(self.filters, self.page)
        except Exception:
            if generation == self._generation:
                self.state = LoadState.IDLE
            raise

        if generation != self._generation:
            logger.debug("Dropping page loaded for previous filters")
            return None

        if not assets:
            self.state = LoadState.EXHAUSTED
            logger.info("No more content!")
            return []

        self.page += 1
        self.assets.extend(assets)
        self.state = LoadState.IDLE
        return assets

    # Filter panel interactions

    def select_type(self, asset_type: AssetType | None) -> None:
        self.reset(replace(self.filters, type=asset_type))

    def select_creator(self, creator: str | None) -> None:
        """Select a creator; the pack selection no longer applies."""
        self.reset(replace(self.filters, creator=creator, pack=None))

    def select_pack(self, pack: str | None) -> None:
        self.reset(replace(self.filters, pack=pack))

    def select_folder(self, folder: str | None) -> None:
        self.reset(replace(self.filters, folder=folder))

    def search(self, terms: str | None) -> None:
        self.reset(replace(self.filters, search_terms=terms or None))

    async def get_data(self) -> dict[str, Any]:
        """Assemble the filter panel of the current selection."""
        f = self.filters
        creators = await self.collection.get_creators(f.type) if f.type else None
        packs = await self.collection.get_packs(f) if f.type and f.creator else None
        folders = await self.collection.get_folders(f) if f.pack else None
        types = await self.collection.get_types()
        return {
            "collection": {"id": self.collection.get_id(), "name": self.collection.get_name()},
            "types": [{"id": t, "assets_count": count} for t, count in types.items()],
            "creators": creators,
            "packs": packs,
            "folders": folders,
            "filters": f,
        }
