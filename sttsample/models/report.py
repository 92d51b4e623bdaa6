"""Transcription report data models."""

import uuid
from dataclasses import dataclass, field
from typing import Tuple

from .recognition import RecognitionResult


@dataclass(frozen=True)
class Sentence:
    """One recognized span with offsets from the start of the run."""
    text: str
    start_time: float  # Seconds from run start
    end_time: float    # Seconds from run start
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False, repr=False)


@dataclass(frozen=True)
class TranscriptionReport:
    """Outcome of one recognition run. Replaced wholesale, never mutated."""
    response_time: float
    transcript: str
    sentences: Tuple[Sentence, ...] = ()

    @classmethod
    def empty(cls) -> "TranscriptionReport":
        return cls(response_time=0.0, transcript="", sentences=())

    @classmethod
    def from_result(cls, result: RecognitionResult, response_time: float) -> "TranscriptionReport":
        """Build a report from a terminal recognition result.

        Args:
            result: Result delivered by the recognition backend
            response_time: Seconds between request start and callback

        Returns:
            TranscriptionReport with one sentence per recognized segment
        """
        sentences = tuple(
            Sentence(
                text=segment.text,
                start_time=segment.timestamp,
                end_time=segment.timestamp + segment.duration,
            )
            for segment in result.segments
        )
        return cls(
            response_time=response_time,
            transcript=result.best_text,
            sentences=sentences,
        )

    @property
    def is_empty(self) -> bool:
        return not self.transcript and not self.sentences
