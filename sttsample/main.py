"""Main application entry point for SttSample."""

import sys
import argparse
import logging
from pathlib import Path

from .auto_mode import run_auto_mode
from .config import SttSampleConfig
from .models.language import Language
from .services.recognition_service import create_speech_recognizer
from .transcription import QueueDispatcher
from .ui.content_screen import ContentScreen
from .ui.state import ContentState

logger = logging.getLogger(__name__)


def setup_logging(config: SttSampleConfig, level: str = "INFO") -> None:
    """Set up logging configuration from YAML config."""
    log_file_path = config.get('logging.file_path', 'logs/sttsample.log')
    console_output = config.get('logging.console_output', True)

    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers = []

    # File handler - always write to file
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    # Console handler - only if enabled in config
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info("=" * 50)
    logger.info("SttSample application starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")
    logger.info("=" * 50)


def run_interactive(config: SttSampleConfig, language: Language) -> None:
    """Run the interactive content screen."""
    dispatcher = QueueDispatcher()
    with create_speech_recognizer(config, dispatcher) as recognizer:
        screen = ContentScreen(recognizer, dispatcher, state=ContentState(language=language))
        screen.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SttSample - transcribe an audio file with per-segment timing",
        epilog="Commands: 1=Import file, 2=Clear file, 3=Select language, 4=Transcribe, q=Quit"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: looks for sttsample.yaml)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: logging.level from config)"
    )

    parser.add_argument(
        "--file",
        type=str,
        help="Transcribe this audio file once, print the report and exit"
    )

    parser.add_argument(
        "--language",
        type=str,
        choices=[language.value for language in Language],
        help="Recognition language (default: app.default_language from config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="SttSample v0.1.0"
    )
    return parser


def main() -> None:
    """Main entry point for SttSample application."""
    args = build_parser().parse_args()

    try:
        config = SttSampleConfig(args.config)
        setup_logging(config, args.log_level or config.get('logging.level', 'INFO'))
        language = Language.parse(args.language or config.get('app.default_language', 'english'))

        if args.file:
            run_auto_mode(config, args.file, language)
        else:
            run_interactive(config, language)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except Exception as e:
        print(f"❌ Error: {e}")
        logging.error(f"Application error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
