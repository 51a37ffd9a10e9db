"""Application configuration loaded from CLI arguments and environment variables."""

import argparse
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .constants import AUTO_LANGUAGE, DEFAULT_MODEL, DEFAULT_OUTPUT_DIR, DEFAULT_SOURCE_DIR
from .exceptions import InvalidConfigurationError


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str
    base_url: str | None = None
    timeout_seconds: float | None = Field(default=None, gt=0)


class TranscriptionSettings(BaseModel, frozen=True):
    """Model, language and prompt applied to every request of a run."""

    model: str = DEFAULT_MODEL
    language: str = AUTO_LANGUAGE
    prompt: str | None = None


class PathsConfig(BaseModel, frozen=True):
    """Input and output locations."""

    source_dir: Path
    output_dir: Path


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    openai: OpenAIConfig
    transcription: TranscriptionSettings
    paths: PathsConfig
    debug: bool = False


def load_config(args: argparse.Namespace) -> AppConfig:
    """
    Loads configuration from parsed CLI arguments and environment variables.

    Raises:
        InvalidConfigurationError: If a value fails validation.
    """
    try:
        return _build_config(args)
    except ValidationError as e:
        raise InvalidConfigurationError(e) from e


def _build_config(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            base_url=os.getenv("OPENAI_BASE_URL") or None,
            timeout_seconds=os.getenv("OPENAI_TIMEOUT_SECONDS") or None,
        ),
        transcription=TranscriptionSettings(
            model=args.model,
            language=args.language,
            prompt=args.prompt,
        ),
        paths=PathsConfig(
            source_dir=Path(
                args.source or os.getenv("TRANSCRIBER_SOURCE_DIR", DEFAULT_SOURCE_DIR)
            ).resolve(),
            output_dir=Path(
                args.output or os.getenv("TRANSCRIBER_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
            ).resolve(),
        ),
        debug=bool(args.debug),
    )
