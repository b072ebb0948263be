"""Actions available on local assets.

Action ids are scoped to the collection that defines them; this module
defines the local collection's set, the order they are displayed in and
the hint shown for each of them.
"""

from enum import IntEnum

from ..core.types import Action, ActionHint, Asset, AssetType
from ..i18n import Localizer


class LocalAssetAction(IntEnum):
    DRAG = 0            # drag & drop onto the canvas
    CLIPBOARD = 1       # copy path to clipboard
    IMPORT = 2          # import map as scene, play audio in playlist
    CREATE_ARTICLE = 3  # create journal article showing the asset
    PREVIEW = 4         # preview image/map, listen to audio


def type_name(asset_type: AssetType, i18n: Localizer) -> str:
    return i18n.localize(f"type_{asset_type.value}")


def build_actions(asset: Asset, i18n: Localizer) -> list[Action]:
    """List the actions of an asset, in display order.

    Type-specific actions come first, then drag, then clipboard. Drag is
    listed for maps as well, even though maps are not draggable.
    """
    asset_type = type_name(asset.type, i18n)
    actions = []
    if asset.type == AssetType.IMAGE:
        actions.append(Action(LocalAssetAction.CREATE_ARTICLE, i18n.localize("action_create_article"), "fa-solid fa-book-open"))
        actions.append(Action(LocalAssetAction.PREVIEW, i18n.localize("action_preview_asset"), "fa-solid fa-eyes", small=True))
    elif asset.type == AssetType.MAP:
        actions.append(Action(LocalAssetAction.IMPORT, i18n.format("action_import", type=asset_type), "fa-solid fa-file-import"))
        actions.append(Action(LocalAssetAction.CREATE_ARTICLE, i18n.localize("action_create_article"), "fa-solid fa-book-open"))
        actions.append(Action(LocalAssetAction.PREVIEW, i18n.localize("action_preview_asset"), "fa-solid fa-eyes", small=True))
    elif asset.type == AssetType.AUDIO:
        actions.append(Action(LocalAssetAction.IMPORT, i18n.localize("action_audio_play"), "fa-solid fa-play-pause"))
        actions.append(Action(LocalAssetAction.PREVIEW, i18n.localize("action_preview"), "fa-solid fa-headphones"))

    actions.append(Action(LocalAssetAction.DRAG, i18n.format("action_drag", type=asset_type), "fa-solid fa-hand", drag=True))
    actions.append(Action(LocalAssetAction.CLIPBOARD, i18n.localize("action_clipboard"), "fa-solid fa-clipboard", small=True))
    return actions


# (action, asset type) -> hint key; None as type applies to every type
HINTS: dict[tuple[LocalAssetAction, AssetType | None], str] = {
    (LocalAssetAction.DRAG, AssetType.MAP): "action_hint_drag_image",
    (LocalAssetAction.DRAG, AssetType.IMAGE): "action_hint_drag_image",
    (LocalAssetAction.DRAG, AssetType.AUDIO): "action_hint_drag_audio",
    (LocalAssetAction.IMPORT, AssetType.MAP): "action_hint_import_image",
    (LocalAssetAction.IMPORT, AssetType.AUDIO): "action_hint_import_audio",
    (LocalAssetAction.CLIPBOARD, None): "action_hint_clipboard",
    (LocalAssetAction.CREATE_ARTICLE, None): "action_hint_create_article_asset",
    (LocalAssetAction.PREVIEW, AssetType.AUDIO): "action_hint_preview_audio_full",
    (LocalAssetAction.PREVIEW, AssetType.IMAGE): "action_hint_preview_asset",
    (LocalAssetAction.PREVIEW, AssetType.MAP): "action_hint_preview_asset",
}


def build_action_hint(asset: Asset, action_id: object, i18n: Localizer) -> ActionHint | None:
    """Describe an action of an asset.

    Returns:
        The hint, or None if the asset has no such action or the
        combination has no description
    """
    action = next((a for a in build_actions(asset, i18n) if a.id == action_id), None)
    if action is None:
        return None
    key = HINTS.get((action.id, asset.type)) or HINTS.get((action.id, None))
    if key is None:
        return None
    return ActionHint(name=action.name, description=i18n.localize(key))
