"""Index file platform for the catalog.

This platform reads packs from a JSON index file.
"""

from pathlib import Path

from ...collection.local import LocalCollection
from ...collection.registry import CollectionRegistry
from ...config import DEFAULT_SETTINGS, CatalogSettings
from ...services import Services
from .source import IndexFileSource, validate_url


def _create_index_collection(
    path: Path,
    services: Services | None = None,
    settings: CatalogSettings = DEFAULT_SETTINGS,
    **kwargs,
) -> LocalCollection:
    """Factory function for creating index file collections.

    Args:
        path: JSON index file
        services: Host services injected into the collection
        settings: Classification settings
        **kwargs: Additional parameters (unused)

    Returns:
        LocalCollection reading an IndexFileSource
    """
    return LocalCollection(IndexFileSource(Path(path)), services=services, settings=settings)


# Auto-register at module import
CollectionRegistry.register_factory("index", _create_index_collection)

__all__ = [
    "IndexFileSource",
    "validate_url",
]
