"""Collection registry for factory-based collection creation.

This module provides a central registry for collection factories,
enabling hosts to create collections by id and automatic platform
discovery.
"""

import importlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from ..errors import CollectionNotFoundError

if TYPE_CHECKING:
    from .base import Collection

logger = logging.getLogger(__name__)


class CollectionRegistry:
    """Central registry for collection factories.

    Platforms register themselves when imported, and the registry can
    automatically discover all available platforms.
    """

    _factories: dict[str, Callable[..., "Collection"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Collection"]) -> None:
        """Register a factory function for creating collections.

        Args:
            name: Name of the platform (e.g., 'filesystem', 'index')
            factory: Callable that creates a Collection instance

        Example:
            >>> def create_fs_collection(path: Path, **kwargs) -> LocalCollection:
            ...     return LocalCollection(FilesystemSource(path), **kwargs)
            >>> CollectionRegistry.register_factory('filesystem', create_fs_collection)
        """
        cls._factories[name] = factory

    @classmethod
    def create_collection(cls, name: str, **kwargs) -> "Collection":
        """Create a collection from a registered platform.

        Args:
            name: Name of the registered platform
            **kwargs: Arguments passed to the factory

        Returns:
            A collection, not yet initialized

        Raises:
            CollectionNotFoundError: If nothing is registered under name

        Example:
            >>> collection = CollectionRegistry.create_collection(
            ...     'filesystem',
            ...     path=Path('/assets'),
            ... )
        """
        if not cls._factories:
            raise CollectionNotFoundError(
                f"Cannot create collection '{name}': no collection is registered"
            )
        if name not in cls._factories:
            available = ", ".join(cls._factories.keys())
            raise CollectionNotFoundError(
                f"Unknown collection: '{name}'. Available collections: {available}"
            )
        return cls._factories[name](**kwargs)

    @classmethod
    def list_collections(cls) -> list[str]:
        """List all registered platform names.

        Example:
            >>> CollectionRegistry.list_collections()
            ['filesystem', 'index']
        """
        return list(cls._factories.keys())

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all platforms.

        Platforms register themselves via their __init__.py files when
        imported. Platforms with missing dependencies are skipped.
        """
        platforms_dir = Path(__file__).parent.parent / "platforms"

        if not platforms_dir.exists():
            return

        for platform_path in sorted(platforms_dir.iterdir()):
            if not (platform_path / "__init__.py").exists():
                continue

            try:
                importlib.import_module(
                    f".platforms.{platform_path.name}",
                    package="media_asset_catalog",
                )
            except ImportError as e:
                logger.debug("Skipping platform %s: %s", platform_path.name, e)
