"""Pytest configuration and fixtures for SttSample tests."""

import io
import logging
import tempfile
import threading
import time
import wave
from pathlib import Path
from typing import List, Optional

import numpy as np
import pytest
from pubsub import pub
from rich.console import Console

from sttsample.models.recognition import RecognitionResult, RecognitionSegment
from sttsample.transcription.base import AbstractRecognitionBackend
from sttsample.transcription.dispatch import QueueDispatcher
from sttsample.transcription.publisher import ReportPublisher
from sttsample.transcription.recognizer import SpeechRecognizer


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "integration: tests that wire several components together")


HI_THERE = RecognitionResult(
    best_text="hi there",
    segments=(
        RecognitionSegment(text="hi", timestamp=0.0, duration=0.5),
        RecognitionSegment(text="there", timestamp=0.5, duration=0.6),
    ),
)


class FakeRecognitionBackend(AbstractRecognitionBackend):
    """Backend returning a canned result, optionally blocked on a gate."""

    def __init__(self, locale: str, result: Optional[RecognitionResult] = None,
                 gate: Optional[threading.Event] = None, error: Optional[Exception] = None,
                 available: bool = True):
        super().__init__(locale)
        self.result = result or HI_THERE
        self.gate = gate
        self.error = error
        self.available = available
        self.initialized = False
        self.cancelled = False
        self.cleaned_up = False
        self.initialize_thread = None
        self.started = threading.Event()
        self.recognized_files: List[Path] = []

    def initialize(self) -> bool:
        self.initialized = True
        self.initialize_thread = threading.current_thread()
        return True

    def is_available(self) -> bool:
        return self.available

    def recognize_file(self, file_path: Path) -> RecognitionResult:
        self.recognized_files.append(file_path)
        self.started.set()
        if self.gate is not None:
            self.gate.wait(timeout=5.0)
        if self.error is not None:
            raise self.error
        return self.result

    def cancel(self) -> None:
        self.cancelled = True

    def cleanup(self) -> None:
        self.cleaned_up = True


class FakeBackendFactory:
    """Backend factory recording every locale it is asked for."""

    def __init__(self, **backend_kwargs):
        self.backend_kwargs = backend_kwargs
        self.locales: List[str] = []
        self.backends: List[FakeRecognitionBackend] = []

    def __call__(self, locale: str) -> FakeRecognitionBackend:
        self.locales.append(locale)
        backend = FakeRecognitionBackend(locale, **self.backend_kwargs)
        self.backends.append(backend)
        return backend


def drain_until_idle(recognizer: SpeechRecognizer, dispatcher: QueueDispatcher, timeout: float = 5.0) -> None:
    """Run dispatched callbacks until the recognizer stops requesting."""
    deadline = time.monotonic() + timeout
    while recognizer.is_requesting and time.monotonic() < deadline:
        dispatcher.drain(timeout=0.05)
    dispatcher.drain()


@pytest.fixture(autouse=True)
def clean_pubsub():
    """Drop pub/sub listeners left behind by a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def sample_audio_file(temp_data_dir):
    """Create a short 16 kHz mono WAV file (440 Hz sine)."""
    sample_rate = 16000
    t = np.linspace(0, 1.0, sample_rate, False)
    audio_data = (np.sin(2 * np.pi * 440 * t) * 32767).astype(np.int16)

    file_path = Path(temp_data_dir) / "hello.wav"
    with wave.open(str(file_path), 'wb') as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(audio_data.tobytes())
    return file_path


@pytest.fixture
def backend_factory():
    return FakeBackendFactory()


@pytest.fixture
def dispatcher():
    return QueueDispatcher()


@pytest.fixture
def recognizer(backend_factory, dispatcher):
    recognizer = SpeechRecognizer(
        backend_factory=backend_factory,
        authorizer=lambda: True,
        dispatcher=dispatcher,
        publisher=ReportPublisher("test_recognizer"),
    )
    yield recognizer
    recognizer.close()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100)
