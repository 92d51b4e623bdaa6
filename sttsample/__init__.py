"""SttSample: transcribe an audio file with per-segment timing."""

__version__ = "0.1.0"
