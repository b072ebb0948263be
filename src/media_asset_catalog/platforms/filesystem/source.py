"""Filesystem asset source.

Every sub-directory of a root folder is a pack. Files are scanned
recursively and their dimensions/duration read from disk.
"""

import asyncio
import logging
import os
from pathlib import Path

from ...config import DEFAULT_SETTINGS, CatalogSettings
from ...core.metadata import extract_metadata
from ...core.types import RawAsset, RawPack
from ...sources.base import AssetSource

logger = logging.getLogger(__name__)

# Source key of every pack produced by this source
SOURCE_KEY = "fs"


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents path traversal through symlinks.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class FilesystemSource(AssetSource):
    """Asset source scanning a local directory.

    Pre-generated thumbnails are expected under
    <root>/<thumbs folder>/<pack>/...; a pack having such a folder
    declares the thumbs option.

    Example:
        >>> source = FilesystemSource(Path('/path/to/assets'))
        >>> packs = await source.fetch_packs()
    """

    def __init__(self, path: Path, settings: CatalogSettings = DEFAULT_SETTINGS):
        """Initialize filesystem source.

        Args:
            path: Root directory, one pack per sub-directory
            settings: Extension sets and thumbnail folder

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.path = path.resolve()
        self.settings = settings

        if not self.path.exists():
            raise ValueError(f"Path does not exist: {self.path}")

        if not self.path.is_dir():
            raise ValueError(f"Path is not a directory: {self.path}")

    @property
    def base_url(self) -> str:
        return self.path.as_posix().rstrip("/") + "/"

    async def fetch_packs(self) -> dict[str, RawPack]:
        return await asyncio.to_thread(self._scan_packs)

    async def resolve_base_url(self, source_key: str) -> str | None:
        return self.base_url if source_key == SOURCE_KEY else None

    def _scan_packs(self) -> dict[str, RawPack]:
        packs: dict[str, RawPack] = {}
        for pack_dir in sorted(self.path.iterdir()):
            if not pack_dir.is_dir() or pack_dir.name.startswith("."):
                continue
            if pack_dir.name == self.settings.thumbs_folder:
                continue

            thumbs = (self.path / self.settings.thumbs_folder / pack_dir.name).is_dir()
            packs[pack_dir.name] = RawPack(
                id=f"{pack_dir.name}#{SOURCE_KEY}",
                name=pack_dir.name,
                options={"thumbs": thumbs},
                assets=self._scan_directory(pack_dir),
            )
            logger.debug("Scanned pack %s (%d files)", pack_dir.name, len(packs[pack_dir.name]["assets"]))
        return packs

    def _scan_directory(self, pack_dir: Path) -> list[RawAsset]:
        """Recursively collect the raw records of a pack's files.

        Args:
            pack_dir: Absolute path to the pack directory

        Returns:
            Raw asset records, sorted by path
        """
        assets: list[RawAsset] = []

        for dirpath, dirnames, filenames in os.walk(pack_dir):
            # Deterministic order, hidden folders skipped
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue

                file_path = Path(dirpath) / filename

                try:
                    validate_path_safety(file_path, self.path)
                    relative_path = file_path.relative_to(self.path).as_posix()
                    assets.append(extract_metadata(file_path, self.base_url + relative_path, self.settings))
                except (OSError, ValueError) as e:
                    logger.warning("Failed to process %s: %s", file_path, e)
                    continue

        return assets
