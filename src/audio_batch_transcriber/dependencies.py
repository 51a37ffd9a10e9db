"""Dependency wiring for the audio batch transcriber."""

from openai import OpenAI

from .config import AppConfig
from .domain import FileDiscoverer, TranscriptBuilder
from .handlers import AudioFileHandler
from .infrastructure import LocalTranscriptStore, OpenAITranscriber
from .infrastructure.interfaces import TranscriptionService
from .runner import BatchRunner


def get_openai_client(config: AppConfig) -> OpenAI:
    """Returns an OpenAI client that never retries on its own."""
    kwargs = {}
    if config.openai.timeout_seconds is not None:
        kwargs["timeout"] = config.openai.timeout_seconds
    return OpenAI(
        api_key=config.openai.api_key,
        base_url=config.openai.base_url,
        max_retries=0,
        **kwargs,
    )


def get_transcription_service(config: AppConfig) -> TranscriptionService:
    """Returns the configured transcription service."""
    return OpenAITranscriber(get_openai_client(config))


def get_handler(
    config: AppConfig, transcription_service: TranscriptionService
) -> AudioFileHandler:
    """Returns the configured audio file handler."""
    return AudioFileHandler(
        transcription_service,
        LocalTranscriptStore(config.paths.output_dir),
        TranscriptBuilder(),
        config.transcription,
    )


def build_runner(
    config: AppConfig, transcription_service: TranscriptionService | None = None
) -> BatchRunner:
    """Returns a runner wired from ``config``."""
    service = transcription_service or get_transcription_service(config)
    return BatchRunner(FileDiscoverer(), get_handler(config, service), config)
