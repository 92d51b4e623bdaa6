"""Single-screen transcription interface."""

import asyncio
import time
import logging
from typing import Optional
from pubsub import pub
from rich.console import Console
from rich.prompt import Prompt

from ..models.language import Language
from ..models.report import TranscriptionReport
from ..transcription.dispatch import QueueDispatcher
from ..transcription.errors import SpeechRecognizerError
from ..transcription.recognizer import SpeechRecognizer
from .file_importer import AudioFileImporter
from .report_view import render_report
from .state import ContentState

logger = logging.getLogger(__name__)


class ContentScreen:
    """Renders the selected file, language and report; forwards user actions."""

    def __init__(self,
                 recognizer: SpeechRecognizer,
                 dispatcher: QueueDispatcher,
                 state: Optional[ContentState] = None,
                 importer: Optional[AudioFileImporter] = None,
                 console: Optional[Console] = None):
        """Initialize content screen.

        Args:
            recognizer: Orchestrator that runs transcriptions
            dispatcher: UI-refresh context the recognizer publishes through
            state: Observable state container (created if None)
            importer: File selection capability (created if None)
            console: Rich console to render to
        """
        self.recognizer = recognizer
        self.dispatcher = dispatcher
        self.state = state or ContentState()
        self.console = console or Console()
        self.importer = importer or AudioFileImporter(console=self.console)
        self.notice: Optional[str] = None
        self.running = False

        pub.subscribe(self._on_state_change, self.state.topic)
        pub.subscribe(self._on_report, recognizer.publisher.report_topic)
        pub.subscribe(self._on_error, recognizer.publisher.error_topic)

    # Pub/sub listeners

    def _on_state_change(self, field: str, state: ContentState) -> None:
        self.render()

    def _on_report(self, report: TranscriptionReport) -> None:
        self.notice = None
        self.state.report = report
        self.state.transcript = report.transcript

    def _on_error(self, error: Exception) -> None:
        self.notice = f"Transcription failed: {error}"
        self.render()

    # Actions

    def import_file(self) -> bool:
        """Present the file importer; the state is unchanged on cancel or failure."""
        selected = self.importer.present()
        if selected is None:
            return False
        self.state.selected_file = selected
        return True

    def clear_file(self) -> None:
        """Clear the selected file, reset the recognizer and clear the transcript."""
        if self.state.selected_file is None:
            return
        self.state.selected_file = None
        self.recognizer.reset()
        self.notice = None
        self.state.transcript = ""
        self.state.report = TranscriptionReport.empty()

    def select_language(self, language: Language) -> None:
        self.state.language = language

    def start_transcription(self, wait: bool = True, timeout: Optional[float] = None) -> bool:
        """Start transcribing the selected file in the selected language.

        Args:
            wait: Drain the dispatcher until the recognizer is no longer requesting
            timeout: Maximum seconds to wait, forever if None

        Returns:
            True if a request was submitted
        """
        selected = self.state.selected_file
        if selected is None:
            return False

        locale = self.state.language.locale
        try:
            asyncio.run(self.recognizer.transcribe_file(selected.path, locale))
        except SpeechRecognizerError as e:
            logger.warning(f"Could not start transcription of {selected.name}: {e}")
            self.notice = str(e)
            self.render()
            return False

        if wait:
            self.wait_for_result(timeout)
        return True

    def wait_for_result(self, timeout: Optional[float] = None) -> None:
        """Run dispatched callbacks until the in-flight request settles."""
        deadline = None if timeout is None else time.monotonic() + timeout
        try:
            with self.console.status("Transcribing..."):
                while self.recognizer.is_requesting:
                    if deadline is not None and time.monotonic() >= deadline:
                        logger.warning(f"Stopped waiting for transcription after {timeout}s")
                        break
                    self.dispatcher.drain(timeout=0.1)
        except KeyboardInterrupt:
            logger.info("Transcription interrupted by user")
            self.recognizer.reset()
        # Callbacks that arrived after the status changed
        self.dispatcher.drain()

    # Rendering

    def render(self) -> None:
        """Render the whole screen from the current state."""
        self.console.clear()
        self.console.print("🎙️  SttSample", style="bold blue")
        self.console.print("=" * 50)

        selected = self.state.selected_file
        self.console.print(f"File : {selected.name if selected else 'Empty'}", style="bold")
        self.console.print(f"Language : {self.state.language.display_name} ({self.state.language.locale})")
        if self.recognizer.is_requesting:
            self.console.print("⏳ Transcribing...", style="yellow")

        render_report(self.console, self.state.report)

        if self.notice:
            self.console.print(f"⚠️  {self.notice}", style="red")

        self.console.print("\n" + "=" * 50)
        self.console.print("Commands:")
        self.console.print("  [bold green]1[/bold green] - Import audio file")
        if selected is not None:
            self.console.print("  [bold yellow]2[/bold yellow] - Clear file")
        self.console.print("  [bold blue]3[/bold blue] - Select language")
        if selected is not None:
            self.console.print("  [bold magenta]4[/bold magenta] - Transcribe")
        self.console.print("  [bold red]q[/bold red] - Quit")
        self.console.print("=" * 50)

    # Command loop

    def handle_command(self, command: str) -> bool:
        """Handle one menu command. Returns False when the user quits."""
        command = command.strip().lower()
        if command == "1":
            self.import_file()
        elif command == "2":
            self.clear_file()
        elif command == "3":
            choice = Prompt.ask(
                "Language",
                choices=[language.value for language in Language],
                default=self.state.language.value,
                console=self.console,
            )
            self.select_language(Language.parse(choice))
        elif command == "4":
            self.start_transcription()
        elif command == "q":
            return False
        else:
            logger.debug(f"Unknown command: {command!r}")
        return True

    def run(self) -> None:
        """Run the interactive command loop until the user quits."""
        self.running = True
        self.render()
        try:
            while self.running:
                self.dispatcher.drain()
                command = Prompt.ask("Command", choices=["1", "2", "3", "4", "q"], console=self.console)
                self.running = self.handle_command(command)
        except (KeyboardInterrupt, EOFError):
            logger.info("Interactive session interrupted")
        finally:
            self.running = False
            self.shutdown()

    def shutdown(self) -> None:
        """Unsubscribe from pub/sub topics."""
        for listener, topic in (
            (self._on_state_change, self.state.topic),
            (self._on_report, self.recognizer.publisher.report_topic),
            (self._on_error, self.recognizer.publisher.error_topic),
        ):
            try:
                pub.unsubscribe(listener, topic)
            except Exception as e:
                logger.warning(f"Error during unsubscribe: {e}")
