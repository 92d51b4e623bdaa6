"""Results delivered by recognition backends."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RecognitionSegment:
    """A single recognized span as reported by the backend."""
    text: str
    timestamp: float  # Offset from the start of the audio (seconds)
    duration: float


@dataclass(frozen=True)
class RecognitionResult:
    """Terminal result of one recognition run."""
    best_text: str
    segments: Tuple[RecognitionSegment, ...] = ()
