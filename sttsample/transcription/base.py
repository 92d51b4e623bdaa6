"""Abstract base classes for recognition backends."""

from abc import ABC, abstractmethod
from pathlib import Path
import logging

from ..models.recognition import RecognitionResult

logger = logging.getLogger(__name__)


class AbstractRecognitionBackend(ABC):
    """Abstract base class for file recognition backends bound to one locale."""

    def __init__(self, locale: str = "en-US"):
        """Initialize backend with the locale to recognize."""
        self.locale = locale

    @abstractmethod
    def initialize(self) -> bool:
        """Initialize backend resources and verify configuration.

        Returns:
            True if initialization successful, False otherwise
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the recognizer can currently serve requests."""
        pass

    @abstractmethod
    def recognize_file(self, file_path: Path) -> RecognitionResult:
        """Transcribe an audio file. Blocks until the terminal result is known.

        Args:
            file_path: Audio file to recognize

        Returns:
            RecognitionResult with best transcript and segments

        Raises:
            RecognitionFailedError: if the service reports an error
        """
        pass

    def cancel(self) -> None:
        """Request cancellation of a running recognition (best effort)."""
        logger.debug(f"{self.__class__.__name__} does not support cancellation")

    @abstractmethod
    def cleanup(self) -> None:
        """Clean up backend resources."""
        pass
