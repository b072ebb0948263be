"""Media Asset Catalog.

This package indexes packs of media assets (images, maps, audio),
classifies each asset and answers faceted, paginated queries through a
collection interface that host applications browse uniformly.
"""

# Core library interface
from .browser import AssetBrowser, LoadState
from .collection import PAGE_SIZE, Collection, CollectionRegistry, LocalCollection
from .sources.base import AssetSource

# Core types and utilities
from .config import CatalogSettings
from .core import (
    Action,
    ActionHint,
    Asset,
    AssetMeta,
    AssetType,
    Creator,
    DropTarget,
    Filters,
    Pack,
    pretty_duration,
    pretty_media_name,
)
from .errors import CatalogError, ClipboardError, CollectionNotFoundError, IngestionError
from .i18n import Localizer
from .services import HostBridge, LoggingHost, Services

__version__ = "0.1.0"

# Auto-discover and register all platforms
CollectionRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "AssetBrowser",
    "AssetSource",
    "Collection",
    "CollectionRegistry",
    "LoadState",
    "LocalCollection",
    "PAGE_SIZE",
    # Types
    "Action",
    "ActionHint",
    "Asset",
    "AssetMeta",
    "AssetType",
    "CatalogSettings",
    "Creator",
    "DropTarget",
    "Filters",
    "Pack",
    # Services
    "HostBridge",
    "Localizer",
    "LoggingHost",
    "Services",
    # Errors
    "CatalogError",
    "ClipboardError",
    "CollectionNotFoundError",
    "IngestionError",
    # Utilities
    "pretty_duration",
    "pretty_media_name",
]
