"""In-memory catalog snapshot and its ingestion.

A CatalogIndex is built once from an asset source and never mutated.
Collections publish a new index by replacing their reference to it, so
readers always see either the previous snapshot or the complete new one.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from ..config import DEFAULT_SETTINGS, CatalogSettings
from ..core.types import Asset, RawPack
from ..core.validator import pack_index_errors
from ..errors import IngestionError
from ..i18n import Localizer
from ..sources.base import AssetSource
from .classifier import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexedPack:
    """A pack with its classified assets, in ingestion order."""

    id: str
    name: str
    assets: tuple[Asset, ...]


@dataclass(frozen=True)
class CatalogIndex:
    """Immutable snapshot of every pack of a collection."""

    packs: tuple[IndexedPack, ...] = ()

    def iter_assets(self) -> Iterator[Asset]:
        for pack in self.packs:
            yield from pack.assets

    def get_asset(self, asset_id: str) -> Asset | None:
        """Find an asset by id, None if absent."""
        for asset in self.iter_assets():
            if asset.id == asset_id:
                return asset
        return None

    def __len__(self) -> int:
        return sum(len(pack.assets) for pack in self.packs)


EMPTY_INDEX = CatalogIndex()


def source_key(pack_id: str, pack: RawPack) -> str:
    """Return the source segment of a pack id ("12#data" -> "data")."""
    return pack.get("id", pack_id).split("#")[-1]


async def resolve_base_url(source: AssetSource, pack_id: str, pack: RawPack) -> str:
    """Resolve the base locator of a pack, degrading to an empty prefix."""
    key = source_key(pack_id, pack)
    try:
        base_url = await source.resolve_base_url(key)
    except Exception as e:
        logger.warning("Cannot resolve base url of source '%s' (pack %s): %s", key, pack_id, e)
        return ""
    if not base_url:
        logger.warning("No base url for source '%s' (pack %s), using an empty prefix", key, pack_id)
        return ""
    return base_url


async def build_index(
    source: AssetSource,
    settings: CatalogSettings = DEFAULT_SETTINGS,
    i18n: Localizer | None = None,
) -> CatalogIndex:
    """Fetch every pack from a source and classify its assets.

    Asset ids come from a counter shared by all packs, starting at 1.

    Args:
        source: Asset source to read
        settings: Classification settings
        i18n: Localizer for meta hints

    Returns:
        A complete, immutable index

    Raises:
        IngestionError: If the source fails or returns an invalid payload
    """
    try:
        raw_packs = await source.fetch_packs()
    except Exception as e:
        raise IngestionError(f"Failed to fetch packs from {type(source).__name__}: {e}") from e

    errors = pack_index_errors(raw_packs)
    if errors:
        for error in errors:
            logger.error("Invalid pack index from %s: %s", type(source).__name__, error)
        more = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        raise IngestionError(f"Invalid pack index from {type(source).__name__}: {errors[0]}{more}")

    i18n = i18n or Localizer()
    idx = 0
    packs = []
    for pack_id, raw_pack in raw_packs.items():
        base_url = await resolve_base_url(source, pack_id, raw_pack)
        assets = []
        for raw in raw_pack["assets"]:
            idx += 1
            assets.append(classify(raw, raw_pack, idx, base_url, pack_id=pack_id, settings=settings, i18n=i18n))
        packs.append(IndexedPack(id=pack_id, name=raw_pack.get("name", pack_id), assets=tuple(assets)))

    index = CatalogIndex(packs=tuple(packs))
    logger.info("Indexed %d assets in %d packs", len(index), len(index.packs))
    return index
