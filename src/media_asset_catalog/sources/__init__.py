"""Asset source abstractions."""

from .base import AssetSource

__all__ = ["AssetSource"]
