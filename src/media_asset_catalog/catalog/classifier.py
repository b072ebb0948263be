"""Asset classification.

Turns a raw asset record and its pack into a display-ready Asset. The
result only depends on the inputs: the same record always yields the same
asset.
"""

from ..config import DEFAULT_SETTINGS, CatalogSettings
from ..core.media import (
    encode_url,
    get_base_path,
    get_extension,
    get_icon,
    is_map,
    pretty_duration,
    pretty_media_name,
)
from ..core.types import Asset, AssetMeta, AssetType, RawAsset, RawPack
from ..i18n import Localizer

META_SIZE_ICON = "fa-regular fa-expand-wide"
META_DURATION_ICON = "fa-regular fa-stopwatch"


def has_thumbs(pack: RawPack) -> bool:
    """Tell whether a pack ships pre-generated thumbnails."""
    return bool(pack.get("options", {}).get("thumbs"))


def classify_type(
    raw: RawAsset,
    settings: CatalogSettings = DEFAULT_SETTINGS,
) -> AssetType:
    """Derive the asset type from the extension and the dimensions."""
    extension = get_extension(raw["path"])
    if extension in settings.image_extensions or extension in settings.video_extensions:
        if is_map(raw.get("width"), raw.get("height"), settings):
            return AssetType.MAP
        return AssetType.IMAGE
    if extension in settings.audio_extensions:
        return AssetType.AUDIO
    return AssetType.UNDEFINED


def thumbnail_path(path: str, base_url: str, settings: CatalogSettings = DEFAULT_SETTINGS) -> str:
    """Locate the generated thumbnail of an asset.

    Example:
        ("https://host/pack/a/b.png", "https://host/") -> "https://host/_thumbs/pack/a/b.webp"
    """
    relative = path[len(base_url):] if path.startswith(base_url) else path
    return f"{base_url}{settings.thumbs_folder}/{get_base_path(relative)}.{settings.thumbs_format}"


def build_meta(raw: RawAsset, i18n: Localizer) -> tuple[AssetMeta, ...]:
    """Collect the displayable facts a source supplied (dimensions, duration)."""
    meta = []
    width, height = raw.get("width"), raw.get("height")
    if width and height:
        meta.append(AssetMeta(
            icon=META_SIZE_ICON,
            text=f"{width}x{height}",
            hint=i18n.localize("meta_media_size"),
        ))
    duration = raw.get("duration")
    if duration:
        meta.append(AssetMeta(
            icon=META_DURATION_ICON,
            text=pretty_duration(duration),
            hint=i18n.localize("meta_audio_duration"),
        ))
    return tuple(meta)


def classify(
    raw: RawAsset,
    pack: RawPack,
    sequence_index: int,
    base_url: str,
    *,
    pack_id: str | None = None,
    settings: CatalogSettings = DEFAULT_SETTINGS,
    i18n: Localizer | None = None,
) -> Asset:
    """Build the catalog entry of a raw asset.

    Args:
        raw: Raw asset record from the source
        pack: Raw pack owning the asset (name and options)
        sequence_index: Collection-wide counter, becomes the asset id
        base_url: Base locator of the pack ('' if unresolved)
        pack_id: Id under which the pack is indexed (defaults to the pack's own id)
        settings: Extension sets, thumbnail location and map heuristic
        i18n: Localizer for meta hints

    Returns:
        The classified asset
    """
    i18n = i18n or Localizer()
    if pack_id is None:
        pack_id = pack.get("id", "")
    path = raw["path"]
    asset_type = classify_type(raw, settings)
    thumbs = has_thumbs(pack)
    animated = get_extension(path) in settings.video_extensions and not thumbs

    return Asset(
        id=str(sequence_index),
        url=encode_url(path),
        preview_url=encode_url(thumbnail_path(path, base_url, settings) if thumbs else path),
        type=asset_type,
        format="large" if asset_type == AssetType.MAP else "small",
        creator=None,
        creator_url=None,
        pack=pack.get("name", pack_id),
        pack_id=pack_id,
        name=pretty_media_name(path),
        meta=build_meta(raw, i18n),
        icon=get_icon(asset_type),
        draggable=asset_type != AssetType.MAP,
        animated=animated,
    )
