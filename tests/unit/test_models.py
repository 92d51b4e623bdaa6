"""Unit tests for SttSample data models."""

from pathlib import Path

import pytest

from sttsample.models import Language, RecognitionResult, SelectedFile, TranscriptionReport


@pytest.mark.unit
class TestModels:

    def test_language_locales(self):
        assert Language.ENGLISH.locale == "en-US"
        assert Language.KOREAN.locale == "ko-KR"
        assert Language.default() is Language.ENGLISH

    def test_language_parse(self):
        assert Language.parse("Korean") is Language.KOREAN
        assert Language.parse("en-us") is Language.ENGLISH
        with pytest.raises(ValueError):
            Language.parse("klingon")

    def test_selected_file_name_is_last_path_component(self):
        selected = SelectedFile.from_path("/data/audio/meeting.m4a")
        assert selected.name == "meeting.m4a"
        assert selected.path == Path("/data/audio/meeting.m4a")

    def test_empty_report(self):
        report = TranscriptionReport.empty()
        assert report.response_time == 0.0
        assert report.transcript == ""
        assert report.sentences == ()
        assert report.is_empty

    def test_report_from_result_without_segments(self):
        report = TranscriptionReport.from_result(RecognitionResult(best_text=""), response_time=0.4)
        assert report.response_time == 0.4
        assert report.sentences == ()
