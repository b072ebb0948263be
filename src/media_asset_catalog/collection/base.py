"""Collection contract.

A collection is a queryable catalog implemented once per asset source.
Host applications browse every collection through this interface,
whether its assets are local packs or a remote catalog.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..core.types import Action, ActionHint, Asset, AssetType, Creator, DropTarget, Filters, Pack

# Number of assets per page, shared by collections and browsers
PAGE_SIZE = 100


class Collection(ABC):
    """Abstract base class for all collections.

    Queries read the snapshot published by the last successful
    initialize(); they never observe a partially built one.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Unique id of the collection."""

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the collection."""

    @abstractmethod
    async def initialize(self) -> None:
        """Load (or reload) the collection.

        Raises:
            IngestionError: If the asset source cannot be read
        """

    @abstractmethod
    def get_asset_by_id(self, asset_id: str) -> Asset | None:
        """Retrieve an asset by id, None if absent."""

    @abstractmethod
    async def get_types(self) -> dict[AssetType, int]:
        """Number of assets of each type in the whole collection."""

    @abstractmethod
    async def get_creators(self, asset_type: AssetType) -> list[Creator]:
        """Creators having assets of a type (may be empty)."""

    @abstractmethod
    async def get_packs(self, filters: Filters) -> list[Pack]:
        """Packs with their number of assets of filters.type.

        Collections with creators restrict the list to filters.creator.
        """

    @abstractmethod
    async def get_folders(self, filters: Filters) -> list[str]:
        """Sorted folders of the assets of filters.pack."""

    @abstractmethod
    async def get_assets_count(self, filters: Filters) -> int:
        """Number of assets matching the filters."""

    @abstractmethod
    async def get_assets(self, filters: Filters, page: int) -> list[Asset]:
        """One page of PAGE_SIZE matching assets; empty once exhausted."""

    @abstractmethod
    def get_actions(self, asset: Asset) -> list[Action]:
        """Actions available on an asset, in display order."""

    @abstractmethod
    def get_action_hint(self, asset: Asset, action_id: Any) -> ActionHint | None:
        """Description of an action on an asset, None if none."""

    @abstractmethod
    async def execute_action(self, action_id: Any, asset: Asset) -> None:
        """Run an action. Unknown actions are logged, never raised."""

    @abstractmethod
    async def from_drop_data(self, asset_id: str, drag_payload: dict[str, Any]) -> None:
        """Handle an asset dropped outside of the canvas."""

    @abstractmethod
    async def drop_canvas_target(self, target: DropTarget, payload: dict[str, Any]) -> None:
        """Handle an asset dropped onto the canvas."""

    def is_configurable(self) -> bool:
        return False

    def configure(self, on_complete: Callable[[], None]) -> None:
        """Open the settings of the collection, then call on_complete."""
        on_complete()
