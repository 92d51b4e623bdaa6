"""Errors raised by the speech recognizer."""


class SpeechRecognizerError(RuntimeError):
    """Base class for recognizer failures."""

    message = "Speech recognition failed"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class NotAuthorizedError(SpeechRecognizerError):
    """Raised when speech recognition has not been authorized."""

    message = "Not authorized to recognize speech"


class RecognizerUnavailableError(SpeechRecognizerError):
    """Raised when no recognizer is available for the requested locale."""

    message = "Recognizer is unavailable"


class RecognitionFailedError(SpeechRecognizerError):
    """Raised by backends when a recognition run fails mid-flight."""

    message = "Recognition failed"
