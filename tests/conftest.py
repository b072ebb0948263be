"""Shared fixtures for catalog tests."""

import copy
from unittest.mock import Mock

import pytest

from media_asset_catalog.core.types import RawPack
from media_asset_catalog.i18n import Localizer
from media_asset_catalog.services import Services
from media_asset_catalog.sources.base import AssetSource

BASE_URL = "https://assets.example.com/"


class MockSource(AssetSource):
    """In-memory asset source for testing."""

    def __init__(self, packs: dict[str, RawPack], base_urls: dict[str, str] | None = None):
        self.packs = packs
        self.base_urls = base_urls if base_urls is not None else {"data": BASE_URL}
        self.fetch_count = 0

    async def fetch_packs(self) -> dict[str, RawPack]:
        self.fetch_count += 1
        return copy.deepcopy(self.packs)

    async def resolve_base_url(self, source_key: str) -> str | None:
        return self.base_urls.get(source_key)


def make_packs() -> dict[str, RawPack]:
    """Two packs mixing maps, images, audio, a video and an unknown file."""
    return {
        "dungeons": {
            "id": "dungeons#data",
            "name": "Dungeons",
            "options": {"thumbs": True},
            "assets": [
                {"path": f"{BASE_URL}dungeons/maps/Big_Cave.webp", "width": 4000, "height": 3000},
                {"path": f"{BASE_URL}dungeons/tokens/goblin-archer.png", "width": 256, "height": 256},
                {"path": f"{BASE_URL}dungeons/maps/Crypt.jpg", "width": 2800, "height": 2100},
                {"path": f"{BASE_URL}dungeons/tokens/orc.png", "width": 256, "height": 256},
                {"path": f"{BASE_URL}dungeons/readme.txt"},
            ],
        },
        "ambience": {
            "id": "ambience#data",
            "name": "Ambience",
            "assets": [
                {"path": f"{BASE_URL}ambience/forest/birds.ogg", "duration": 65},
                {"path": f"{BASE_URL}ambience/tavern/crowd.mp3", "duration": 3665},
                {"path": f"{BASE_URL}ambience/forest/torch.webm", "width": 512, "height": 512},
            ],
        },
    }


@pytest.fixture
def raw_packs() -> dict[str, RawPack]:
    return make_packs()


@pytest.fixture
def source(raw_packs):
    return MockSource(raw_packs)


@pytest.fixture
def host():
    """Mock host bridge recording every side effect."""
    return Mock()


@pytest.fixture
def services(host):
    return Services(host=host, i18n=Localizer())
