"""Terminal user interface for SttSample."""

from .content_screen import ContentScreen
from .file_importer import AudioFileImporter
from .state import ContentState

__all__ = [
    "ContentScreen",
    "AudioFileImporter",
    "ContentState",
]
