"""Faceted queries over a catalog index.

Every function is a pure read of one snapshot. No filter combination is
invalid; unsupported combinations yield empty results.
"""

from ..core.media import encode_url, get_clean_uri
from ..core.types import Asset, AssetType, Filters, Pack
from .index import CatalogIndex

# Types reported by count_types, in display order
BROWSABLE_TYPES = (AssetType.IMAGE, AssetType.MAP, AssetType.AUDIO)


def count_types(index: CatalogIndex) -> dict[AssetType, int]:
    """Count the assets of each browsable type across the whole index."""
    counts = dict.fromkeys(BROWSABLE_TYPES, 0)
    for asset in index.iter_assets():
        if asset.type in counts:
            counts[asset.type] += 1
    return counts


def list_packs(index: CatalogIndex, filters: Filters) -> list[Pack]:
    """List every pack with its number of assets of the selected type.

    Only the type filter applies to the counts.
    """
    return [
        Pack(
            id=pack.id,
            name=pack.name,
            assets_count=sum(1 for a in pack.assets if a.type == filters.type),
        )
        for pack in index.packs
    ]


def matches(asset: Asset, filters: Filters, folder_prefix: str | None = None) -> bool:
    """Tell whether an asset satisfies the type, folder and search filters.

    Args:
        asset: Asset to test
        filters: Filter selection
        folder_prefix: Encoded folder, precomputed from filters.folder
    """
    # filter by type
    if asset.type != filters.type:
        return False
    # filter by folder
    if folder_prefix and not asset.url.startswith(folder_prefix):
        return False
    # filter by search (every term must appear in the locator)
    if filters.search_terms:
        url = asset.url.lower()
        for term in filters.search_terms.lower().split():
            if term not in url:
                return False
    return True


def filter_assets(index: CatalogIndex, filters: Filters) -> list[Asset]:
    """Return every matching asset, in ingestion order."""
    folder_prefix = encode_url(filters.folder) if filters.folder else None
    results: list[Asset] = []
    for pack in index.packs:
        if filters.pack and filters.pack != pack.id:
            continue
        results.extend(a for a in pack.assets if matches(a, filters, folder_prefix))
    return results


def list_folders(index: CatalogIndex, filters: Filters) -> list[str]:
    """List the distinct parent folders of the assets of one pack.

    Requires filters.pack; only the type and pack filters apply.

    Returns:
        Decoded folder paths, sorted case-insensitively
    """
    if not filters.pack:
        return []
    folders = set()
    for asset in filter_assets(index, Filters(type=filters.type, pack=filters.pack)):
        folder = asset.url[: asset.url.rfind("/")] if "/" in asset.url else ""
        if folder:
            folders.add(get_clean_uri(folder))
    return sorted(folders, key=lambda f: (f.casefold(), f))


def count_assets(index: CatalogIndex, filters: Filters) -> int:
    return len(filter_assets(index, filters))


def page_assets(index: CatalogIndex, filters: Filters, page: int, page_size: int) -> list[Asset]:
    """Return one page of matching assets.

    An empty page means the results are exhausted.
    """
    results = filter_assets(index, filters)
    start = page * page_size
    if page < 0 or start >= len(results):
        return []
    return results[start:start + page_size]
