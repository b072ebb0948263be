"""Media helpers shared by the classifier and the query engine.

Name prettifying, duration/size formatting, locator encoding and the
map-shape heuristic.
"""

import re
from typing import Optional
from urllib.parse import quote, unquote

from ..config import DEFAULT_SETTINGS, CatalogSettings
from .types import AssetType

# Characters left untouched when encoding a locator (same set as a browser's encodeURI)
URL_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"

EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")

ASSET_ICONS = {
    AssetType.MAP: "fa-solid fa-map",
    AssetType.IMAGE: "fa-solid fa-image",
    AssetType.AUDIO: "fa-solid fa-music",
}


def get_extension(filepath: str) -> str:
    """Return the lowercase extension of a path ('' if none).

    Example:
        "Maps/Cave.Night.WEBP" -> "webp"
    """
    filename = filepath.rsplit("/", 1)[-1]
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def get_base_path(filepath: str) -> str:
    """Return the path without its extension."""
    return EXTENSION_PATTERN.sub("", filepath)


def encode_url(url: str) -> str:
    """Percent-encode a locator, keeping its reserved URI characters."""
    return quote(url, safe=URL_SAFE_CHARS)


def get_clean_uri(uri: str) -> str:
    """Decode a percent-encoded locator back to a readable path."""
    return unquote(uri)


def pretty_media_name(filepath: str) -> str:
    """Generate a human-readable name from a file path.

    Example:
        "/a/b/My_Cool-Map.webp" -> "My Cool Map"
    """
    decoded = unquote(filepath)
    name = get_base_path(decoded).split("/")[-1]
    name = re.sub(r"[-_]", " ", name)
    name = " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))
    return name if name else decoded


def pretty_duration(seconds: float) -> str:
    """Format a duration as M:SS, or H:MM:SS when at least one hour long.

    Examples:
        65 -> "1:05"
        3665 -> "1:01:05"
    """
    total = int(seconds + 0.5)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours == 0:
        return f"{minutes}:{secs:02d}"
    return f"{hours}:{minutes:02d}:{secs:02d}"


def pretty_filesize(filesize: int, decimals: int = 1) -> str:
    """Format a file size in B, KB or MB."""
    if filesize < 1024:
        return f"{filesize:,} B"
    if filesize < 1024 * 1024:
        size, unit = filesize / 1024, "KB"
    else:
        size, unit = filesize / (1024 * 1024), "MB"
    if decimals == 0:
        return f"{round(size):,} {unit}"
    return f"{size:,.{decimals}f} {unit}"


def is_map(
    width: Optional[int],
    height: Optional[int],
    settings: CatalogSettings = DEFAULT_SETTINGS,
) -> bool:
    """Tell whether dimensions look like a battle map.

    Maps are large canvases: the shorter side is at least map_min_size
    pixels and the image is not a long strip.
    """
    if not width or not height:
        return False
    short_side, long_side = sorted((width, height))
    return short_side >= settings.map_min_size and long_side <= short_side * settings.map_max_ratio


def get_icon(asset_type: AssetType) -> Optional[str]:
    """Return the icon class representing an asset type."""
    return ASSET_ICONS.get(asset_type)
