"""Catalog engine: classification, index snapshot, faceted queries and actions."""

from .classifier import classify
from .index import CatalogIndex, IndexedPack, build_index

__all__ = [
    "CatalogIndex",
    "IndexedPack",
    "build_index",
    "classify",
]
