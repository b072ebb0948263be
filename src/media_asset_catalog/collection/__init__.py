"""Collections: the queryable catalogs hosts browse."""

from .base import PAGE_SIZE, Collection
from .local import LocalCollection
from .registry import CollectionRegistry

__all__ = [
    "PAGE_SIZE",
    "Collection",
    "CollectionRegistry",
    "LocalCollection",
]
