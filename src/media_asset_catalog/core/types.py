"""Type definitions for the media asset catalog.

Raw records returned by asset sources are TypedDicts mirroring the JSON
schema in schemas/pack_index.schema.json. Catalog entities built from them
are immutable dataclasses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypedDict


class RawAsset(TypedDict, total=False):
    """Individual media file as reported by an asset source."""

    path: str  # Full locator (base url + relative path), required
    width: Optional[int]  # Pixel width (images, videos)
    height: Optional[int]  # Pixel height (images, videos)
    duration: Optional[float]  # Seconds (audio, videos)
    size: Optional[int]  # File size in bytes


class PackOptions(TypedDict, total=False):
    """Options declared by a pack."""

    thumbs: bool  # Pack ships pre-generated thumbnails


class RawPack(TypedDict, total=False):
    """Group of raw assets from one source folder or package."""

    id: str  # "<anything>#<source key>", the source key resolves the base url
    name: str
    options: PackOptions
    assets: list[RawAsset]


class AssetType(Enum):
    """Derived type of an asset."""

    MAP = "Map"
    IMAGE = "Image"
    AUDIO = "Audio"
    UNDEFINED = "Undefined"


@dataclass(frozen=True)
class AssetMeta:
    """One displayable fact about an asset (dimensions, duration)."""

    icon: str
    text: str
    hint: str


@dataclass(frozen=True)
class Asset:
    """Classified, display-ready media entry.

    All fields are derived once at ingestion time.
    """

    id: str
    url: str
    preview_url: str
    type: AssetType
    format: str
    creator: Optional[str]
    creator_url: Optional[str]
    pack: str
    pack_id: str
    name: str
    meta: tuple[AssetMeta, ...] = ()
    icon: Optional[str] = None
    draggable: bool = True
    animated: bool = False


@dataclass(frozen=True)
class Pack:
    """Pack facet entry, with the number of assets matching the active type."""

    id: str
    name: str
    assets_count: int


@dataclass(frozen=True)
class Creator:
    """Creator facet entry."""

    name: str
    url: Optional[str] = None
    assets_count: int = 0


@dataclass
class Filters:
    """Caller-owned filter selection.

    Every meaningful query selects exactly one asset type; a filter without
    a type matches nothing.
    """

    type: Optional[AssetType] = None
    creator: Optional[str] = None
    pack: Optional[str] = None
    folder: Optional[str] = None
    search_terms: Optional[str] = None


@dataclass(frozen=True)
class Action:
    """User-invocable operation on an asset. The id is scoped to one collection."""

    id: Any
    name: str
    icon: str
    drag: bool = False
    small: bool = False


@dataclass(frozen=True)
class ActionHint:
    """Descriptive text for an action on a specific asset type."""

    name: str
    description: str


@dataclass(frozen=True)
class DropTarget:
    """Where an asset was dropped on the host canvas."""

    canvas: Any
    active_layer: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)
