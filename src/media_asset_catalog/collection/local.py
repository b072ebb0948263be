"""Pack-based collection over any asset source.

Local collections have no creators: assets are only grouped in packs
(one per source folder or package).
"""

import logging
from typing import Any, Callable

from ..catalog import query
from ..catalog.actions import LocalAssetAction, build_action_hint, build_actions
from ..catalog.index import EMPTY_INDEX, CatalogIndex, build_index
from ..config import DEFAULT_SETTINGS, IMPORT_FOLDER, PLAYLIST_NAME, CatalogSettings
from ..core.types import Action, ActionHint, Asset, AssetType, Creator, DropTarget, Filters, Pack
from ..errors import ClipboardError
from ..services import Services
from ..sources.base import AssetSource
from .base import PAGE_SIZE, Collection

logger = logging.getLogger(__name__)

NOTES_LAYER = "NotesLayer"


class LocalCollection(Collection):
    """Collection of the packs of one asset source.

    Example:
        >>> collection = LocalCollection(FilesystemSource(Path('/assets')))
        >>> await collection.initialize()
        >>> maps = await collection.get_assets(Filters(type=AssetType.MAP), 0)
    """

    def __init__(
        self,
        source: AssetSource,
        services: Services | None = None,
        settings: CatalogSettings = DEFAULT_SETTINGS,
        collection_id: str = "local",
    ):
        self.source = source
        self.services = services or Services()
        self.settings = settings
        self.collection_id = collection_id
        self._index: CatalogIndex = EMPTY_INDEX
        self._current_preview: str | None = None

    @property
    def index(self) -> CatalogIndex:
        """Currently published snapshot."""
        return self._index

    @property
    def current_preview(self) -> str | None:
        """Locator of the audio being previewed, None when silent."""
        return self._current_preview

    def get_id(self) -> str:
        return self.collection_id

    def get_name(self) -> str:
        return self.services.i18n.localize("collection_type_local")

    async def initialize(self) -> None:
        """Rebuild the index from the source and publish it.

        The previous index stays visible until the new one is complete,
        and is kept if ingestion fails.
        """
        index = await build_index(self.source, self.settings, self.services.i18n)
        self._index = index

    def get_asset_by_id(self, asset_id: str) -> Asset | None:
        return self._index.get_asset(asset_id)

    async def get_types(self) -> dict[AssetType, int]:
        return query.count_types(self._index)

    async def get_creators(self, asset_type: AssetType) -> list[Creator]:
        # Local assets don't have any creator, only packs
        return []

    async def get_packs(self, filters: Filters) -> list[Pack]:
        return query.list_packs(self._index, filters)

    async def get_folders(self, filters: Filters) -> list[str]:
        return query.list_folders(self._index, filters)

    async def get_assets_count(self, filters: Filters) -> int:
        return query.count_assets(self._index, filters)

    async def get_assets(self, filters: Filters, page: int) -> list[Asset]:
        return query.page_assets(self._index, filters, page, PAGE_SIZE)

    def get_actions(self, asset: Asset) -> list[Action]:
        return build_actions(asset, self.services.i18n)

    def get_action_hint(self, asset: Asset, action_id: Any) -> ActionHint | None:
        return build_action_hint(asset, action_id, self.services.i18n)

    async def execute_action(self, action_id: Any, asset: Asset) -> None:
        """Run an action on an asset through the host bridge.

        Unknown actions, and actions that don't apply to the asset type,
        are logged and ignored.
        """
        try:
            action = LocalAssetAction(action_id)
        except (ValueError, TypeError):
            logger.warning("Unknown action %r for asset %s", action_id, asset.id)
            return

        host = self.services.host
        i18n = self.services.i18n
        folder = f"{IMPORT_FOLDER}/{asset.pack}"

        if action == LocalAssetAction.DRAG:
            host.notify_info(i18n.localize("dragdrop_instructions"))
        elif action == LocalAssetAction.CLIPBOARD:
            self._copy_to_clipboard(asset.url)
        elif action == LocalAssetAction.IMPORT and asset.type == AssetType.MAP:
            host.import_scene_from_map(asset.url, folder)
        elif action == LocalAssetAction.IMPORT and asset.type == AssetType.AUDIO:
            host.play_stop_sound(asset.url, PLAYLIST_NAME)
        elif action == LocalAssetAction.CREATE_ARTICLE and asset.type in (AssetType.MAP, AssetType.IMAGE):
            host.create_journal_image_or_video(asset.url, folder)
        elif action == LocalAssetAction.PREVIEW and asset.type == AssetType.AUDIO:
            self._toggle_audio_preview(asset.url)
        elif action == LocalAssetAction.PREVIEW and asset.type in (AssetType.MAP, AssetType.IMAGE):
            host.show_preview(asset.url)
        else:
            logger.warning("Action %s does not apply to %s asset %s", action.name, asset.type.value, asset.id)

    def _copy_to_clipboard(self, data: str) -> None:
        if not data:
            return
        try:
            self.services.host.write_clipboard(data)
        except ClipboardError as e:
            logger.warning("Clipboard write failed: %s", e)
            self.services.host.notify_warning(self.services.i18n.localize("clipboard_copy_failed"))
        else:
            self.services.host.notify_info(self.services.i18n.localize("clipboard_copy_success"))

    def _toggle_audio_preview(self, url: str) -> None:
        """Play an audio preview, or stop it when it is already playing."""
        if self._current_preview == url:
            self.services.host.stop_audio_preview()
            self._current_preview = None
        else:
            self._current_preview = url
            self.services.host.play_audio_preview(url)

    async def from_drop_data(self, asset_id: str, drag_payload: dict[str, Any]) -> None:
        logger.debug("Drop data for asset %s: %s", asset_id, drag_payload)

    async def drop_canvas_target(self, target: DropTarget, payload: dict[str, Any]) -> None:
        """Create a tile, note or ambient sound where an asset was dropped.

        Args:
            target: Canvas and active layer the asset was dropped onto
            payload: Drop data with the asset id and the x/y position
        """
        asset = self.get_asset_by_id(str(payload.get("asset")))
        if not asset:
            return
        position = {"x": payload.get("x", 0), "y": payload.get("y", 0)}
        host = self.services.host
        if asset.type == AssetType.IMAGE:
            if target.active_layer == NOTES_LAYER:
                host.create_note_image(target.canvas, f"{IMPORT_FOLDER}/Dropped", asset.url, position)
            else:
                host.create_tile(target.canvas, asset.url, position)
        elif asset.type == AssetType.AUDIO:
            host.create_ambient_audio(target.canvas, asset.url, position)

    def is_configurable(self) -> bool:
        return True

    def configure(self, on_complete: Callable[[], None]) -> None:
        self.services.host.open_collection_settings(self.get_id(), on_complete)
