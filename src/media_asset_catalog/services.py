"""Host services injected into collections.

A collection never reaches for global state: notifications, localization
and every side effect on the host (scenes, journals, playlists, canvas)
go through the Services object it was built with.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from .i18n import Localizer

logger = logging.getLogger(__name__)


class HostBridge(Protocol):
    """Side effects a host application provides to collections.

    Implementations raise ClipboardError from write_clipboard when the
    clipboard is unavailable.
    """

    def notify_info(self, message: str) -> None: ...

    def notify_warning(self, message: str) -> None: ...

    def write_clipboard(self, text: str) -> None: ...

    def import_scene_from_map(self, url: str, folder: str) -> None: ...

    def create_journal_image_or_video(self, url: str, folder: str) -> None: ...

    def play_stop_sound(self, url: str, playlist: str) -> None: ...

    def play_audio_preview(self, url: str) -> None: ...

    def stop_audio_preview(self) -> None: ...

    def show_preview(self, url: str) -> None: ...

    def create_tile(self, canvas: Any, url: str, position: dict[str, float]) -> None: ...

    def create_note_image(self, canvas: Any, folder: str, url: str, position: dict[str, float]) -> None: ...

    def create_ambient_audio(self, canvas: Any, url: str, position: dict[str, float]) -> None: ...

    def open_collection_settings(self, collection_id: str, on_close: Callable[[], None]) -> None: ...


class LoggingHost:
    """Host bridge that only logs what it is asked to do.

    Used by the command line, where there is no canvas or playlist.
    """

    def notify_info(self, message: str) -> None:
        logger.info(message)

    def notify_warning(self, message: str) -> None:
        logger.warning(message)

    def write_clipboard(self, text: str) -> None:
        logger.info("Clipboard: %s", text)

    def import_scene_from_map(self, url: str, folder: str) -> None:
        logger.info("Import scene from %s into %s", url, folder)

    def create_journal_image_or_video(self, url: str, folder: str) -> None:
        logger.info("Create article for %s in %s", url, folder)

    def play_stop_sound(self, url: str, playlist: str) -> None:
        logger.info("Play/stop %s in playlist %s", url, playlist)

    def play_audio_preview(self, url: str) -> None:
        logger.info("Preview audio %s", url)

    def stop_audio_preview(self) -> None:
        logger.info("Stop audio preview")

    def show_preview(self, url: str) -> None:
        logger.info("Preview %s", url)

    def create_tile(self, canvas: Any, url: str, position: dict[str, float]) -> None:
        logger.info("Create tile %s at %s", url, position)

    def create_note_image(self, canvas: Any, folder: str, url: str, position: dict[str, float]) -> None:
        logger.info("Create note %s in %s at %s", url, folder, position)

    def create_ambient_audio(self, canvas: Any, url: str, position: dict[str, float]) -> None:
        logger.info("Create ambient sound %s at %s", url, position)

    def open_collection_settings(self, collection_id: str, on_close: Callable[[], None]) -> None:
        logger.info("No settings UI for collection %s", collection_id)
        on_close()


@dataclass
class Services:
    """Collaborators a collection is constructed with."""

    host: HostBridge = field(default_factory=LoggingHost)
    i18n: Localizer = field(default_factory=Localizer)
