"""Index file asset source.

Reads packs from a JSON index file, typically produced by an external
scanner. The file also maps source keys to the base locator their files
are served from:

    {
      "sources": {"data": "https://assets.example.com/"},
      "packs": {
        "1": {
          "id": "dungeons#data",
          "name": "Dungeons",
          "options": {"thumbs": true},
          "assets": [{"path": "https://assets.example.com/dungeons/cave.webp", "width": 4000, "height": 3000}]
        }
      }
    }
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from ...core.types import RawPack
from ...sources.base import AssetSource

logger = logging.getLogger(__name__)


def validate_url(url: str) -> None:
    """Validate URL format and scheme.

    Only allows http:// and https:// schemes, or plain paths.

    Args:
        url: URL to validate

    Raises:
        ValueError: If URL has a dangerous scheme
    """
    if not url:  # Empty string is allowed
        return

    parsed = urlparse(url)

    if parsed.scheme not in ("http", "https", ""):
        raise ValueError(
            f"Invalid URL scheme: {parsed.scheme}. Only http and https are allowed."
        )


class IndexFileSource(AssetSource):
    """Asset source reading a JSON index file.

    The file is read again on every fetch, so re-initializing a collection
    picks up a regenerated index.
    """

    def __init__(self, path: Path):
        self.path = path
        self._sources: dict[str, str] = {}

    def _read(self) -> dict[str, Any]:
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict) or "packs" not in data:
            raise ValueError(f"Index file {self.path} has no 'packs' entry")
        return data

    async def fetch_packs(self) -> dict[str, RawPack]:
        data = await asyncio.to_thread(self._read)
        self._sources = dict(data.get("sources") or {})
        logger.info("Read %d packs from %s", len(data["packs"]), self.path)
        return data["packs"]

    async def resolve_base_url(self, source_key: str) -> str | None:
        base_url = self._sources.get(source_key)
        if base_url:
            validate_url(base_url)
        return base_url
