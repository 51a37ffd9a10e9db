"""
Audio Batch Transcriber.

Entry point of the command line tool. It handles:
- Loading configuration from CLI arguments, the environment and a .env file.
- Checking the API key and the requested model before any work starts.
- Transcribing every audio file of the source folder into the output folder.
- Structured JSON logging of progress and of the final summary.
"""

import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from .cli import build_parser, format_models
from .config import AppConfig, load_config
from .constants import SUPPORTED_MODELS
from .dependencies import build_runner
from .exceptions import (
    DirectoryAccessError,
    DirectoryScanError,
    InvalidConfigurationError,
    MissingCredentialError,
    TranscriptWriteError,
    UnsupportedModelError,
)
from .logging import setup_logging
from .runner import ensure_ready

logger = setup_logging()


def main(argv: Sequence[str] | None = None) -> int:
    """Runs the transcriber and returns the process exit status."""
    args = build_parser().parse_args(argv)
    if args.list_models:
        print(format_models())
        return 0

    load_dotenv()
    try:
        config = load_config(args)
    except InvalidConfigurationError as e:
        logger.error(str(e), extra={"error_type": type(e).__name__})
        return 1
    setup_logging(logging.DEBUG if config.debug else logging.INFO)

    try:
        ensure_ready(config)
    except (MissingCredentialError, UnsupportedModelError) as e:
        logger.error(str(e), extra={"error_type": type(e).__name__})
        return 1

    if config.debug:
        _log_settings(config)

    try:
        build_runner(config).run()
    except (DirectoryAccessError, DirectoryScanError, TranscriptWriteError) as e:
        logger.error(
            str(e),
            extra={"error": str(e.cause) if e.cause else None},
            exc_info=e if config.debug else None,
        )
        return 1
    except Exception:
        logger.exception("An unexpected error occurred")
        return 1

    return 0


def _log_settings(config: AppConfig) -> None:
    settings = config.transcription
    logger.debug(
        "Debug information",
        extra={
            "model": settings.model,
            "model_description": SUPPORTED_MODELS[settings.model],
            "language": settings.language,
            "prompt": settings.prompt or "none",
            "source_dir": str(config.paths.source_dir),
            "output_dir": str(config.paths.output_dir),
        },
    )


if __name__ == "__main__":
    sys.exit(main())
