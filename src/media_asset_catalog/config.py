"""Catalog configuration.

Module-level defaults for media classification, gathered into an
immutable settings object that collections and the classifier accept.
"""

from dataclasses import dataclass

# Extension sets (lowercase, without the leading dot)
MEDIA_IMAGES = frozenset({"gif", "jpg", "jpeg", "png", "webp", "svg", "avif", "bmp", "tif", "tiff"})
MEDIA_VIDEOS = frozenset({"webm", "mp4", "m4v"})
MEDIA_AUDIO = frozenset({"aac", "flac", "m4a", "mid", "mp3", "ogg", "opus", "wav"})

# Generated thumbnails live under <base url>/<THUMBS_FOLDER>/...
THUMBS_FOLDER = "_thumbs"
THUMBS_FORMAT = "webp"

# Map heuristic: shorter side in pixels, and max long/short side ratio
MAP_MIN_SIZE = 1000
MAP_MAX_RATIO = 3.0

# Host-side names used when importing local assets
PLAYLIST_NAME = "Local Assets"
IMPORT_FOLDER = "Local Assets"


@dataclass(frozen=True)
class CatalogSettings:
    """Settings used to classify assets.

    Attributes:
        image_extensions: Extensions classified as images (or maps)
        video_extensions: Extensions classified as videos (images or maps)
        audio_extensions: Extensions classified as audio
        thumbs_folder: Thumbnail folder, relative to a pack's base url
        thumbs_format: Extension of generated thumbnails
        map_min_size: Minimal length of the shorter side of a map
        map_max_ratio: Maximal ratio between the long and the short side of a map
    """

    image_extensions: frozenset[str] = MEDIA_IMAGES
    video_extensions: frozenset[str] = MEDIA_VIDEOS
    audio_extensions: frozenset[str] = MEDIA_AUDIO
    thumbs_folder: str = THUMBS_FOLDER
    thumbs_format: str = THUMBS_FORMAT
    map_min_size: int = MAP_MIN_SIZE
    map_max_ratio: float = MAP_MAX_RATIO


DEFAULT_SETTINGS = CatalogSettings()
