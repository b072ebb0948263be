"""Metadata extraction for local media files.

This module reads the facts the classifier relies on: pixel dimensions of
images and the duration of audio and video files.
"""

import logging
from pathlib import Path

from mutagen import File as MutagenFile, MutagenError
from PIL import Image, UnidentifiedImageError

from ..config import DEFAULT_SETTINGS, CatalogSettings
from .media import get_extension
from .types import RawAsset

logger = logging.getLogger(__name__)

# Pillow cannot open vector images
NON_RASTER_EXTENSIONS = {"svg"}


def extract_image_size(file_path: Path) -> tuple[int, int] | None:
    """Read the pixel dimensions of an image.

    Args:
        file_path: Path to the image file

    Returns:
        (width, height), or None if Pillow cannot read the file
    """
    try:
        with Image.open(file_path) as img:
            return img.size
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        logger.warning("Pillow failed to open %s: %s", file_path, e)
        return None


def extract_duration(file_path: Path) -> float | None:
    """Read the duration (seconds) of an audio or video file using mutagen.

    mutagen reads MP4 containers but not WebM, whose duration stays unknown.

    Args:
        file_path: Path to the media file

    Returns:
        Duration in seconds, or None if unknown
    """
    try:
        media = MutagenFile(str(file_path))
    except (MutagenError, OSError) as e:
        logger.warning("mutagen failed to read %s: %s", file_path, e)
        return None

    if media is None or not hasattr(media.info, "length"):
        return None
    return float(media.info.length)


def extract_metadata(
    file_path: Path,
    locator: str,
    settings: CatalogSettings = DEFAULT_SETTINGS,
) -> RawAsset:
    """Build the raw asset record of a local file.

    Args:
        file_path: Path to the file on disk
        locator: Locator under which the asset is served
        settings: Extension sets deciding which reader applies

    Returns:
        Raw asset record with dimensions or duration when available
    """
    record = RawAsset(path=locator, size=file_path.stat().st_size)
    file_type = get_extension(file_path.name)

    if file_type in settings.image_extensions and file_type not in NON_RASTER_EXTENSIONS:
        size = extract_image_size(file_path)
        if size:
            record["width"], record["height"] = size
    elif file_type in settings.audio_extensions or file_type in settings.video_extensions:
        duration = extract_duration(file_path)
        if duration:
            record["duration"] = duration

    return record
