"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from PIL import Image

from media_asset_catalog.cli import build_parser, main, parse_type
from media_asset_catalog.core.types import AssetType
from media_asset_catalog.i18n import Localizer


@pytest.fixture
def library(tmp_path: Path) -> Path:
    (tmp_path / "pack" / "maps").mkdir(parents=True)
    Image.new("RGB", (1500, 1500)).save(tmp_path / "pack" / "maps" / "river_crossing.png")
    Image.new("RGB", (100, 100)).save(tmp_path / "pack" / "wolf.png")
    return tmp_path


def run(capsys, *argv: str):
    main(list(argv))
    return json.loads(capsys.readouterr().out)


class TestParseType:
    """Test asset type parsing."""

    def test_case_insensitive(self) -> None:
        assert parse_type("map") == AssetType.MAP
        assert parse_type("AUDIO") == AssetType.AUDIO

    def test_unknown_type_is_rejected(self, capsys) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--path", ".", "count", "--type", "video"])


class TestCommands:
    """Test the query commands end to end."""

    def test_types(self, capsys, library: Path) -> None:
        assert run(capsys, "--path", str(library), "types") == {"Image": 1, "Map": 1, "Audio": 0}

    def test_assets(self, capsys, library: Path) -> None:
        assets = run(capsys, "--path", str(library), "assets", "--type", "map", "--search", "river")

        assert len(assets) == 1
        assert assets[0]["name"] == "River Crossing"
        assert assets[0]["type"] == "Map"
        assert assets[0]["meta"][0]["text"] == "1500x1500"

    def test_packs_and_folders(self, capsys, library: Path) -> None:
        packs = run(capsys, "--path", str(library), "packs", "--type", "image")
        assert packs == [{"id": "pack", "name": "pack", "assets_count": 1}]

        folders = run(capsys, "--path", str(library), "folders", "--type", "map", "--pack", "pack")
        assert folders == [library.resolve().as_posix() + "/pack/maps"]

    def test_map_min_size_flag(self, capsys, library: Path) -> None:
        assert run(capsys, "--path", str(library), "--map-min-size", "2000", "count", "--type", "map") == 0

    def test_actions(self, capsys, library: Path) -> None:
        actions = run(capsys, "--path", str(library), "actions", "--id", "2")

        assert [a["action"]["id"] for a in actions] == ["IMPORT", "CREATE_ARTICLE", "PREVIEW", "DRAG", "CLIPBOARD"]
        assert actions[0]["hint"]["description"] == "Create a new scene using this map as background."

    def test_translations_file(self, capsys, tmp_path: Path, library: Path) -> None:
        lang = tmp_path / "fr.json"
        lang.write_text(json.dumps({"action_clipboard": "Copier le chemin"}), encoding="utf-8")

        actions = run(capsys, "--path", str(library), "--lang", str(lang), "actions", "--id", "1")

        assert actions[-1]["action"]["name"] == "Copier le chemin"

    def test_unknown_asset_exits(self, capsys, library: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--path", str(library), "actions", "--id", "99"])
        assert exc.value.code == 1
        assert "No asset with id 99" in capsys.readouterr().err

    def test_missing_directory_exits(self, capsys, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--path", str(tmp_path / "missing"), "types"])
        assert exc.value.code == 1
        assert "does not exist" in capsys.readouterr().err


class TestLocalizer:
    """Test string lookup and formatting."""

    def test_unknown_key_resolves_to_itself(self) -> None:
        assert Localizer().localize("no_such_key") == "no_such_key"

    def test_format_substitutes_placeholders(self) -> None:
        assert Localizer().format("action_drag", type="Audio") == "Drag & drop Audio"

    def test_overrides_layer_on_defaults(self) -> None:
        i18n = Localizer({"action_drag": "Glisser {type}"})
        assert i18n.format("action_drag", type="Carte") == "Glisser Carte"
        assert i18n.localize("action_clipboard") == "Copy path to clipboard"
