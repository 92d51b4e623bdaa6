"""UI-related data models."""

from enum import Enum


class RecognizerStatus(Enum):
    """Status of the transcription orchestrator."""
    IDLE = "idle"
    REQUESTING = "requesting"
    COMPLETED = "completed"
    FAILED = "failed"
