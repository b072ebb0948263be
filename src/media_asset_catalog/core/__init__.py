"""Core utilities for the catalog.

This package contains type definitions, media helpers, metadata
extraction and schema validation used across all platforms.
"""

from .media import encode_url, get_clean_uri, is_map, pretty_duration, pretty_filesize, pretty_media_name
from .metadata import extract_metadata
from .types import (
    Action,
    ActionHint,
    Asset,
    AssetMeta,
    AssetType,
    Creator,
    DropTarget,
    Filters,
    Pack,
    RawAsset,
    RawPack,
)
from .validator import pack_index_errors, validate_pack_index

__all__ = [
    "Action",
    "ActionHint",
    "Asset",
    "AssetMeta",
    "AssetType",
    "Creator",
    "DropTarget",
    "Filters",
    "Pack",
    "RawAsset",
    "RawPack",
    "encode_url",
    "extract_metadata",
    "get_clean_uri",
    "is_map",
    "pack_index_errors",
    "pretty_duration",
    "pretty_filesize",
    "pretty_media_name",
    "validate_pack_index",
]
