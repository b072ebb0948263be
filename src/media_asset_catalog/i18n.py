"""Localization of catalog strings.

The built-in table is English. Hosts can layer their own translations on
top of it, either as a mapping or loaded from a JSON file.
"""

import json
from pathlib import Path
from typing import Mapping

DEFAULT_STRINGS: dict[str, str] = {
    "collection_type_local": "Local Assets",
    "type_Map": "Map",
    "type_Image": "Image",
    "type_Audio": "Audio",
    "type_Undefined": "Other",
    "meta_media_size": "Dimensions",
    "meta_audio_duration": "Duration",
    "action_drag": "Drag & drop {type}",
    "action_import": "Import {type}",
    "action_create_article": "Create article",
    "action_preview_asset": "Preview",
    "action_audio_play": "Play/stop (playlist)",
    "action_preview": "Listen",
    "action_clipboard": "Copy path to clipboard",
    "action_hint_drag_image": "Drag the asset onto the canvas to create a tile, or onto the notes layer to create a note.",
    "action_hint_drag_audio": "Drag the asset onto the canvas to create an ambient sound.",
    "action_hint_import_image": "Create a new scene using this map as background.",
    "action_hint_import_audio": "Add the sound to the playlist and play it, or stop it if already playing.",
    "action_hint_clipboard": "Copy the asset path to the clipboard.",
    "action_hint_create_article_asset": "Create a journal article showing this asset.",
    "action_hint_preview_audio_full": "Listen to the full audio file in the browser.",
    "action_hint_preview_asset": "Open a larger preview of the asset.",
    "dragdrop_instructions": "Drag the asset and drop it onto the canvas.",
    "clipboard_copy_success": "Path copied to clipboard.",
    "clipboard_copy_failed": "Unable to copy the path to the clipboard.",
}


class Localizer:
    """Resolve translation keys to display strings.

    Unknown keys resolve to themselves, so a missing translation is visible
    but never fatal.
    """

    def __init__(self, strings: Mapping[str, str] | None = None):
        self.strings = dict(DEFAULT_STRINGS)
        if strings:
            self.strings.update(strings)

    @classmethod
    def from_file(cls, path: Path) -> "Localizer":
        """Load translations from a flat JSON object of key -> string."""
        with path.open("r", encoding="utf-8") as f:
            return cls(json.load(f))

    def localize(self, key: str) -> str:
        return self.strings.get(key, key)

    def format(self, key: str, **data: object) -> str:
        """Localize a key and substitute its {name} placeholders."""
        text = self.localize(key)
        for name, value in data.items():
            text = text.replace(f"{{{name}}}", str(value))
        return text
