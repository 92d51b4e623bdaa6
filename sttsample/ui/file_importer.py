"""Audio file selection for the terminal UI."""

import logging
import mimetypes
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.prompt import Prompt

from ..models.file import SelectedFile

logger = logging.getLogger(__name__)

AUDIO_SUFFIXES = {".wav", ".flac", ".mp3", ".m4a", ".aac", ".aiff", ".aif", ".ogg", ".opus", ".webm", ".caf"}


def is_audio_file(path: Path) -> bool:
    """Whether the path looks like audio content."""
    if path.suffix.lower() in AUDIO_SUFFIXES:
        return True
    mime_type, _ = mimetypes.guess_type(path.name)
    return bool(mime_type) and mime_type.startswith("audio/")


class AudioFileImporter:
    """Asks for an audio file path. Cancellation and failures yield None."""

    def __init__(self, console: Optional[Console] = None, prompt: Callable[..., str] = Prompt.ask):
        self.console = console or Console()
        self.prompt = prompt

    def present(self) -> Optional[SelectedFile]:
        raw = self.prompt("Audio file path (empty to cancel)", console=self.console,
                          default="", show_default=False)
        return self.import_path(raw)

    def import_path(self, raw: Optional[str]) -> Optional[SelectedFile]:
        if not raw or not raw.strip():
            logger.debug("File import cancelled")
            return None

        path = Path(raw.strip()).expanduser()
        if not path.is_file():
            logger.debug(f"Ignoring import of missing file: {path}")
            return None
        if not is_audio_file(path):
            logger.debug(f"Ignoring import of non-audio file: {path}")
            return None

        selected = SelectedFile.from_path(path)
        logger.info(f"Imported audio file: {selected.name}")
        return selected
