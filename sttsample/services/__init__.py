"""Services layer for SttSample application wiring."""

from .recognition_service import create_google_speech_backend, create_speech_recognizer

__all__ = [
    "create_google_speech_backend",
    "create_speech_recognizer",
]
