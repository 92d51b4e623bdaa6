"""Speech recognizer that orchestrates one file transcription at a time."""

import asyncio
import time
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

from .base import AbstractRecognitionBackend
from .dispatch import ImmediateDispatcher
from .errors import NotAuthorizedError, RecognizerUnavailableError
from .publisher import ReportPublisher
from ..models.recognition import RecognitionResult
from ..models.report import TranscriptionReport
from ..models.ui import RecognizerStatus

logger = logging.getLogger(__name__)


class SpeechRecognizer:
    """Runs single-flight file transcriptions and publishes their reports.

    Only the most recent `transcribe_file` call can affect the published
    report. Each call takes a generation token; callbacks whose token is no
    longer current are dropped on the dispatcher's context, so a result that
    raced past `reset()` is never applied.
    """

    def __init__(self,
                 backend_factory: Callable[[str], AbstractRecognitionBackend],
                 authorizer: Callable[[], bool],
                 dispatcher=None,
                 publisher: Optional[ReportPublisher] = None,
                 clock: Callable[[], float] = time.monotonic,
                 max_workers: int = 2):
        """Initialize speech recognizer.

        Args:
            backend_factory: Builds a recognition backend for a locale tag
            authorizer: Returns True when speech recognition is authorized (may block)
            dispatcher: UI-refresh context that owns published state
            publisher: Publisher for reports and errors
            clock: Monotonic clock used for response time
            max_workers: Size of the background worker pool
        """
        self.backend_factory = backend_factory
        self.authorizer = authorizer
        self.dispatcher = dispatcher or ImmediateDispatcher()
        self.publisher = publisher or ReportPublisher()
        self.clock = clock
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="recognizer")
        self.lock = threading.Lock()

        # Published state, written on the dispatcher's context only
        self.transcript = ""
        self.report = TranscriptionReport.empty()
        self.status = RecognizerStatus.IDLE
        self.last_error: Optional[Exception] = None

        # In-flight request
        self.backend: Optional[AbstractRecognitionBackend] = None
        self.task: Optional[Future] = None
        self.generation = 0
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    @property
    def is_requesting(self) -> bool:
        return self.status is RecognizerStatus.REQUESTING

    async def transcribe_file(self, file_path: Union[str, Path], locale: str) -> Future:
        """Start transcribing an audio file.

        Returns once the request is submitted; the report is published later
        from the terminal callback.

        Args:
            file_path: Audio file to transcribe
            locale: Locale tag, e.g. 'en-US'

        Returns:
            Future of the background recognition task

        Raises:
            NotAuthorizedError: speech recognition is not authorized
            RecognizerUnavailableError: no recognizer for the locale
        """
        loop = asyncio.get_running_loop()
        authorized = await loop.run_in_executor(None, self.authorizer)
        if not authorized:
            logger.warning("Speech recognition is not authorized")
            raise NotAuthorizedError()

        self.reset()

        backend = await loop.run_in_executor(None, self._create_backend, locale)

        file_path = Path(file_path)
        with self.lock:
            self.backend = backend
            self.generation += 1
            token = self.generation
            start_time = self.clock()
            self.start_time = start_time
            self.status = RecognizerStatus.REQUESTING
            self.last_error = None
            task = self.executor.submit(backend.recognize_file, file_path)
            self.task = task

        logger.info(f"Transcribing {file_path.name} (locale={locale}, request #{token})")
        task.add_done_callback(partial(self._recognition_handler, token, start_time))
        return task

    def _create_backend(self, locale: str) -> AbstractRecognitionBackend:
        try:
            backend = self.backend_factory(locale)
            initialized = backend.initialize()
        except Exception as e:
            logger.error(f"Recognizer for {locale} failed to initialize: {e}")
            raise RecognizerUnavailableError(locale) from e

        if not initialized or not backend.is_available():
            logger.warning(f"Recognizer for {locale} is unavailable")
            backend.cleanup()
            raise RecognizerUnavailableError(locale)
        return backend

    def _recognition_handler(self, token: int, start_time: float, task: Future) -> None:
        """Terminal callback, runs on a worker thread."""
        if task.cancelled():
            logger.debug(f"Request #{token} was cancelled")
            return

        error = task.exception()
        if error is not None:
            logger.error(f"Request #{token} failed: {error}")
            self.dispatcher.dispatch(partial(self._fail, token, error))
            return

        end_time = self.clock()
        self.dispatcher.dispatch(partial(self._publish, token, task.result(), start_time, end_time))

    def _publish(self, token: int, result: RecognitionResult, start_time: float, end_time: float) -> None:
        """Apply a completed result. Runs on the dispatcher's context."""
        if token != self.generation:
            logger.debug(f"Discarding stale result of request #{token} (current #{self.generation})")
            return

        report = TranscriptionReport.from_result(result, response_time=end_time - start_time)
        with self.lock:
            self.end_time = end_time
            self.task = None
        self.transcript = report.transcript
        self.report = report
        self.status = RecognizerStatus.COMPLETED

        logger.info(f"Request #{token} completed in {report.response_time:.3f}s: "
                    f"'{report.transcript[:50]}' ({len(report.sentences)} sentences)")
        self.publisher.publish_report(report)

    def _fail(self, token: int, error: Exception) -> None:
        """Record a mid-flight failure. The report is left untouched."""
        if token != self.generation:
            logger.debug(f"Discarding stale error of request #{token}: {error}")
            return

        with self.lock:
            self.task = None
        self.last_error = error
        self.status = RecognizerStatus.FAILED
        self.publisher.publish_error(error)

    def reset(self) -> None:
        """Cancel any in-flight recognition and release the previous backend."""
        cancel_running = False
        with self.lock:
            task, backend = self.task, self.backend
            if task is not None:
                # Invalidate callbacks already queued for the old request
                self.generation += 1
                cancel_running = not task.cancel()
                logger.info(f"Reset recognizer; request superseded (generation #{self.generation})")
            self.task = None
            self.backend = None
            self.start_time = None
            self.end_time = None
            self.status = RecognizerStatus.IDLE

        if backend is None:
            return
        try:
            if cancel_running:
                backend.cancel()
            backend.cleanup()
        except Exception as e:
            logger.error(f"Error cleaning up {backend.__class__.__name__}: {e}")

    def close(self) -> None:
        """Reset and release the worker pool."""
        self.reset()
        self.executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self):
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        self.close()
