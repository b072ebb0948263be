"""Base abstractions for asset sources.

This module defines the interface that every asset source implements to
feed packs of raw media records into a collection.
"""

from abc import ABC, abstractmethod

from ..core.types import RawPack


class AssetSource(ABC):
    """Abstract base class for all asset sources.

    Implementations provide platform-specific logic for listing packs and
    resolving where their files are served from, while adhering to this
    common interface.

    Both methods are coroutines: ingestion suspends at each of these I/O
    boundaries.
    """

    @abstractmethod
    async def fetch_packs(self) -> dict[str, RawPack]:
        """Fetch all packs with their raw asset records.

        Returns:
            Raw packs keyed by pack id, in display order

        Raises:
            Exception: If the source cannot be read
        """

    @abstractmethod
    async def resolve_base_url(self, source_key: str) -> str | None:
        """Resolve the base locator of a pack source.

        Args:
            source_key: Last '#'-separated segment of a pack id

        Returns:
            Locator prefix of every asset of the source, or None if unknown
        """
