"""Data models for the SttSample application."""

from .file import SelectedFile
from .language import Language
from .recognition import RecognitionResult, RecognitionSegment
from .report import Sentence, TranscriptionReport
from .ui import RecognizerStatus

__all__ = [
    "SelectedFile",
    "Language",
    "RecognitionResult",
    "RecognitionSegment",
    "Sentence",
    "TranscriptionReport",
    "RecognizerStatus",
]
