"""Filesystem platform for the catalog.

This platform scans local directories, one pack per sub-directory.
"""

from pathlib import Path

from ...collection.local import LocalCollection
from ...collection.registry import CollectionRegistry
from ...config import DEFAULT_SETTINGS, CatalogSettings
from ...services import Services
from .source import SOURCE_KEY, FilesystemSource, validate_path_safety


def _create_filesystem_collection(
    path: Path,
    services: Services | None = None,
    settings: CatalogSettings = DEFAULT_SETTINGS,
    **kwargs,
) -> LocalCollection:
    """Factory function for creating filesystem collections.

    Args:
        path: Root directory to scan
        services: Host services injected into the collection
        settings: Classification settings
        **kwargs: Additional parameters (unused for filesystem)

    Returns:
        LocalCollection reading a FilesystemSource
    """
    return LocalCollection(FilesystemSource(Path(path), settings), services=services, settings=settings)


# Auto-register at module import
CollectionRegistry.register_factory("filesystem", _create_filesystem_collection)

__all__ = [
    "SOURCE_KEY",
    "FilesystemSource",
    "validate_path_safety",
]
