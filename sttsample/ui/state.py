"""Observable state container for the content screen."""

import logging
from typing import Optional
from pubsub import pub

from ..models.file import SelectedFile
from ..models.language import Language
from ..models.report import TranscriptionReport

logger = logging.getLogger(__name__)


class ContentState:
    """Holds the screen's published state and announces every change.

    Each assignment that changes a value sends
    ``pub.sendMessage(topic, field=<name>, state=self)`` before returning,
    so subscribers see the new value without polling.
    """

    FIELDS = ("selected_file", "language", "transcript", "report")

    def __init__(self, topic: str = "ui.state", language: Optional[Language] = None):
        self.topic = topic
        self._selected_file: Optional[SelectedFile] = None
        self._language = language or Language.default()
        self._transcript = ""
        self._report = TranscriptionReport.empty()

    def _update(self, field: str, value) -> None:
        if getattr(self, f"_{field}") == value:
            return
        setattr(self, f"_{field}", value)
        logger.debug(f"State changed: {field}")
        pub.sendMessage(self.topic, field=field, state=self)

    @property
    def selected_file(self) -> Optional[SelectedFile]:
        return self._selected_file

    @selected_file.setter
    def selected_file(self, value: Optional[SelectedFile]) -> None:
        self._update("selected_file", value)

    @property
    def language(self) -> Language:
        return self._language

    @language.setter
    def language(self, value: Language) -> None:
        self._update("language", value)

    @property
    def transcript(self) -> str:
        return self._transcript

    @transcript.setter
    def transcript(self, value: str) -> None:
        self._update("transcript", value)

    @property
    def report(self) -> TranscriptionReport:
        return self._report

    @report.setter
    def report(self, value: TranscriptionReport) -> None:
        self._update("report", value)
