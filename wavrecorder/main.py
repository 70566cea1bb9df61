"""Main application entry point for WavRecorder."""

import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

from wavrecorder import __version__
from wavrecorder.config import RecordingConfig, WavRecorderConfig
from wavrecorder.errors import RecorderError
from wavrecorder.services.recording_service import RecordingService

logger = logging.getLogger(__name__)


FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
CONSOLE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(config: WavRecorderConfig, level: Optional[str] = None) -> str:
    """Route log records to the configured log file and, optionally, the console.

    The file always receives DEBUG and above; the console only warnings.

    Args:
        config: Loaded configuration providing the ``logging.*`` keys
        level: Root level name overriding ``logging.level``

    Returns:
        The root level name that was applied

    Raises:
        ConfigError: If the level name is not recognised
    """
    level_name = config.log_level(level)
    log_file = Path(config.get('logging.file_path', 'logs/wavrecorder.log'))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handlers = [_handler(logging.FileHandler(log_file), logging.DEBUG, FILE_LOG_FORMAT)]
    if config.get('logging.console_output', True):
        handlers.append(_handler(logging.StreamHandler(sys.stdout), logging.WARNING, CONSOLE_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level_name)
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info(f"WavRecorder {__version__} logging to {log_file} at {level_name}")
    return level_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="WavRecorder - record a fixed duration of PCM audio to a WAV file"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: built-in settings)"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Output WAV file path (overrides config)"
    )

    parser.add_argument(
        "--duration",
        type=int,
        help="Recording duration in seconds (overrides config)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (overrides config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"WavRecorder v{__version__}"
    )

    return parser


def main(argv=None) -> None:
    """Main entry point for WavRecorder."""
    args = build_parser().parse_args(argv)

    try:
        config = WavRecorderConfig(args.config)
        if args.output:
            config.set('output.path', args.output)
        if args.duration is not None:
            config.set('audio.duration_seconds', args.duration)

        setup_logging(config, args.log_level)
        recording_config = RecordingConfig.from_config(config)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    service = RecordingService(recording_config)
    try:
        result = service.record()
    except KeyboardInterrupt:
        print("\nRecording interrupted, nothing written")
        sys.exit(1)
    except RecorderError as e:
        print(f"Error: {e}")
        logger.error(f"Recording failed: {e}")
        sys.exit(1)

    print(f"Recording saved: {result.output_path} ({result.frame_count} frames, "
          f"{result.bytes_written} bytes)")


if __name__ == "__main__":
    main()
