"""Google Speech-to-Text recognition backend."""

import time
import logging
import threading
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Optional

from .base import AbstractRecognitionBackend
from .errors import RecognitionFailedError
from ..models.recognition import RecognitionResult, RecognitionSegment

from google.auth import exceptions as auth_exceptions
from google.cloud import speech
from google.api_core import exceptions as gax_exceptions
from google.oauth2 import service_account

logger = logging.getLogger(__name__)

_ENCODINGS = {
    ".flac": speech.RecognitionConfig.AudioEncoding.FLAC,
    ".wav": speech.RecognitionConfig.AudioEncoding.LINEAR16,
    ".ogg": speech.RecognitionConfig.AudioEncoding.OGG_OPUS,
    ".opus": speech.RecognitionConfig.AudioEncoding.OGG_OPUS,
    ".webm": speech.RecognitionConfig.AudioEncoding.WEBM_OPUS,
}


def has_google_authorization(credentials_path: Optional[str]) -> bool:
    """Check whether the service account credentials can be loaded."""
    if not credentials_path:
        logger.warning("No Google credentials path configured")
        return False
    try:
        service_account.Credentials.from_service_account_file(credentials_path)
    except (OSError, ValueError, auth_exceptions.GoogleAuthError) as e:
        logger.warning(f"Google credentials rejected ({credentials_path}): {e}")
        return False
    return True


class GoogleSpeechBackend(AbstractRecognitionBackend):
    """Google Speech-to-Text API backend for file transcription."""

    def __init__(self,
                 credentials_path: Optional[str] = None,
                 locale: str = "en-US",
                 use_enhanced: bool = True,
                 enable_automatic_punctuation: bool = True,
                 model: Optional[str] = None,
                 timeout: Optional[float] = None):
        """Initialize Google Speech backend.

        Args:
            credentials_path: Path to Google Cloud service account JSON file
            locale: Language code (e.g., 'en-US', 'ko-KR')
            use_enhanced: Whether to use enhanced model (costs more but better quality)
            enable_automatic_punctuation: Enable automatic punctuation
            model: Recognition model name, service default if None
            timeout: Seconds to wait for the operation, forever if None
        """
        super().__init__(locale)
        self.credentials_path = credentials_path
        if not self.credentials_path:
            raise ValueError("Google credentials path is required - cannot initialize without credentials")
        self.use_enhanced = use_enhanced
        self.enable_automatic_punctuation = enable_automatic_punctuation
        self.model = model
        self.timeout = timeout
        self.client = None
        self._operation = None
        self._operation_lock = threading.Lock()

    def initialize(self) -> bool:
        """Initialize Google Speech client from the service account file."""
        logger.info(f"Loading Google credentials from: {self.credentials_path}")
        credentials = service_account.Credentials.from_service_account_file(self.credentials_path)

        self.client = speech.SpeechClient(credentials=credentials)
        logger.info(f"Using Google Cloud project: {credentials.project_id} (locale={self.locale})")
        return True

    def is_available(self) -> bool:
        return self.client is not None

    def build_config(self, file_path: Path) -> speech.RecognitionConfig:
        """Recognition config for a file; WAV and FLAC headers carry the sample rate."""
        encoding = _ENCODINGS.get(
            file_path.suffix.lower(),
            speech.RecognitionConfig.AudioEncoding.ENCODING_UNSPECIFIED,
        )
        config = speech.RecognitionConfig(
            encoding=encoding,
            language_code=self.locale,
            use_enhanced=self.use_enhanced,
            enable_automatic_punctuation=self.enable_automatic_punctuation,
            enable_word_time_offsets=True,
        )
        if self.model:
            config.model = self.model
        return config

    def recognize_file(self, file_path: Path) -> RecognitionResult:
        """Transcribe an audio file with a long running recognize operation."""
        if self.client is None:
            raise RecognitionFailedError("Google Speech client is not initialized")

        file_path = Path(file_path)
        start_time = time.time()
        content = file_path.read_bytes()
        logger.debug(f"File: {file_path.name}; size: {len(content)} bytes; locale: {self.locale}; "
                     f"enhanced: {self.use_enhanced}; punctuation: {self.enable_automatic_punctuation}")

        audio = speech.RecognitionAudio(content=content)
        try:
            operation = self.client.long_running_recognize(config=self.build_config(file_path), audio=audio)
            with self._operation_lock:
                self._operation = operation
            response = operation.result(timeout=self.timeout)
        except gax_exceptions.DeadlineExceeded as e:
            logger.error("Google STT deadline exceeded for %s", file_path.name)
            raise RecognitionFailedError(f"Google Speech timeout ({file_path.name}): {e}") from e
        except gax_exceptions.GoogleAPICallError as e:
            logger.error("Google STT API call error for %s: %s", file_path.name, e)
            raise RecognitionFailedError(f"Google Speech API error ({file_path.name}): {e}") from e
        except FutureTimeoutError as e:
            logger.error("Google STT operation timed out for %s", file_path.name)
            raise RecognitionFailedError(f"Google Speech timeout ({file_path.name}): {e}") from e
        finally:
            with self._operation_lock:
                self._operation = None

        logger.debug(f"Recognition of {file_path.name} took {time.time() - start_time:.3f}s")
        return self._extract_result(response)

    def _extract_result(self, response) -> RecognitionResult:
        texts = []
        segments = []
        for recognition_result in response.results:
            if not recognition_result.alternatives:
                continue
            # Alternatives are ordered by confidence
            alternative = recognition_result.alternatives[0]
            if alternative.transcript.strip():
                texts.append(alternative.transcript.strip())
            for word in alternative.words:
                start = word.start_time.total_seconds()
                end = word.end_time.total_seconds()
                segments.append(RecognitionSegment(text=word.word, timestamp=start, duration=end - start))

        if not texts:
            logger.debug("--- NO SPEECH DETECTED ---")
        return RecognitionResult(best_text=" ".join(texts), segments=tuple(segments))

    def cancel(self) -> None:
        """Cancel the running operation, if any."""
        with self._operation_lock:
            operation = self._operation
        if operation is None:
            return
        try:
            operation.cancel()
            logger.info(f"Cancelled Google recognition operation ({self.locale})")
        except gax_exceptions.GoogleAPICallError as e:
            logger.warning(f"Failed to cancel Google recognition operation: {e}")

    def cleanup(self) -> None:
        """Close the Google Speech client transport."""
        client, self.client = self.client, None
        if client is not None:
            client.transport.close()
