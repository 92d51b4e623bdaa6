"""Transcription module for SttSample."""

from .base import AbstractRecognitionBackend
from .dispatch import EventLoopDispatcher, ImmediateDispatcher, QueueDispatcher
from .errors import (
    NotAuthorizedError,
    RecognitionFailedError,
    RecognizerUnavailableError,
    SpeechRecognizerError,
)
from .google_backend import GoogleSpeechBackend, has_google_authorization
from .publisher import ReportPublisher
from .recognizer import SpeechRecognizer

__all__ = [
    "AbstractRecognitionBackend",
    "EventLoopDispatcher",
    "ImmediateDispatcher",
    "QueueDispatcher",
    "NotAuthorizedError",
    "RecognitionFailedError",
    "RecognizerUnavailableError",
    "SpeechRecognizerError",
    "GoogleSpeechBackend",
    "has_google_authorization",
    "ReportPublisher",
    "SpeechRecognizer",
]
