"""Wiring of the speech recognizer to the configured Google backend."""

import logging
from functools import partial

from ..config import SttSampleConfig
from ..transcription import (
    GoogleSpeechBackend,
    ReportPublisher,
    SpeechRecognizer,
    has_google_authorization,
)

logger = logging.getLogger(__name__)


def create_google_speech_backend(config: SttSampleConfig, locale: str) -> GoogleSpeechBackend:
    """Create a Google Speech backend for a locale from configuration.

    The backend is returned uninitialized; the recognizer initializes it
    and checks availability.
    """
    credentials_path = config.get_google_credentials_path()
    use_enhanced = config.get('google_cloud.use_enhanced_model', True)
    enable_punctuation = config.get('google_cloud.enable_automatic_punctuation', True)
    model = config.get('google_cloud.model')
    timeout = config.get('google_cloud.timeout_seconds')

    logger.debug(f"Config: locale={locale}, enhanced={use_enhanced}, punctuation={enable_punctuation}, "
                 f"model={model}, timeout={timeout}")

    return GoogleSpeechBackend(
        credentials_path=credentials_path,
        locale=locale,
        use_enhanced=use_enhanced,
        enable_automatic_punctuation=enable_punctuation,
        model=model,
        timeout=timeout,
    )


def create_speech_recognizer(config: SttSampleConfig, dispatcher, topic: str = "recognizer") -> SpeechRecognizer:
    """Build a SpeechRecognizer backed by Google Speech-to-Text.

    Args:
        config: Application configuration
        dispatcher: UI-refresh context for published state
        topic: Pub/sub topic root for reports and errors

    Returns:
        Configured SpeechRecognizer
    """
    credentials_path = config.get('google_cloud.credentials_path')
    max_workers = config.get('recognizer.max_workers', 2)
    logger.info(f"Creating speech recognizer (credentials={credentials_path}, workers={max_workers})")

    return SpeechRecognizer(
        backend_factory=partial(create_google_speech_backend, config),
        authorizer=partial(has_google_authorization, credentials_path),
        dispatcher=dispatcher,
        publisher=ReportPublisher(topic),
        max_workers=max_workers,
    )
