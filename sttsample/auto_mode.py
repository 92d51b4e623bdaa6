"""One-shot mode: transcribe a single file, print the report and exit."""

import asyncio
import logging
from pathlib import Path
from typing import Optional
from pubsub import pub
from rich.console import Console

from .config import SttSampleConfig
from .models.language import Language
from .models.report import TranscriptionReport
from .services.recognition_service import create_speech_recognizer
from .transcription import EventLoopDispatcher, SpeechRecognizer
from .ui.report_view import render_report

logger = logging.getLogger(__name__)


async def transcribe_once(recognizer: SpeechRecognizer, file_path: Path, language: Language,
                          timeout: Optional[float] = None) -> TranscriptionReport:
    """Transcribe a file and wait for its report.

    The recognizer must dispatch onto the running event loop.

    Raises:
        SpeechRecognizerError: if the request cannot start or fails mid-flight
        asyncio.TimeoutError: if no outcome arrives within timeout
    """
    loop = asyncio.get_running_loop()
    outcome: asyncio.Future = loop.create_future()

    def on_report(report: TranscriptionReport) -> None:
        if not outcome.done():
            outcome.set_result(report)

    def on_error(error: Exception) -> None:
        if not outcome.done():
            outcome.set_exception(error)

    pub.subscribe(on_report, recognizer.publisher.report_topic)
    pub.subscribe(on_error, recognizer.publisher.error_topic)
    try:
        await recognizer.transcribe_file(file_path, language.locale)
        return await asyncio.wait_for(outcome, timeout)
    finally:
        pub.unsubscribe(on_report, recognizer.publisher.report_topic)
        pub.unsubscribe(on_error, recognizer.publisher.error_topic)


async def _run(config: SttSampleConfig, file_path: Path, language: Language) -> TranscriptionReport:
    dispatcher = EventLoopDispatcher(asyncio.get_running_loop())
    with create_speech_recognizer(config, dispatcher) as recognizer:
        return await transcribe_once(recognizer, file_path, language)


def run_auto_mode(config: SttSampleConfig, file_path: str, language: Language,
                  console: Optional[Console] = None) -> TranscriptionReport:
    """Run SttSample in one-shot mode.

    Args:
        config: Application configuration
        file_path: Audio file to transcribe
        language: Recognition language
        console: Console to print the report to

    Returns:
        The completed TranscriptionReport
    """
    console = console or Console()
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Audio file not found: {path}")

    console.print(f"📋 Transcribing {path.name} ({language.display_name}, {language.locale})")
    logger.info(f"Auto mode: {path} ({language.locale})")

    report = asyncio.run(_run(config, path, language))

    render_report(console, report)
    console.print("✅ Transcription completed", style="green")
    return report
