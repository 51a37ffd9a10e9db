"""Shared fixtures for the transcriber tests."""

from pathlib import Path

import pytest

from audio_batch_transcriber.config import (
    AppConfig,
    OpenAIConfig,
    PathsConfig,
    TranscriptionSettings,
)
from audio_batch_transcriber.domain import TranscriptionRequest
from audio_batch_transcriber.exceptions import TranscriptionError
from audio_batch_transcriber.infrastructure.interfaces import TranscriptionService


class FakeTranscriptionService(TranscriptionService):
    """Returns canned text per file name, or fails for names mapped to an exception."""

    def __init__(self, results: dict[str, str | Exception] | None = None, default: str = "text"):
        self.results = results or {}
        self.default = default
        self.requests: list[TranscriptionRequest] = []

    def transcribe(self, request: TranscriptionRequest) -> str:
        self.requests.append(request)
        result = self.results.get(request.file_path.name, self.default)
        if isinstance(result, Exception):
            raise TranscriptionError(request.file_path.name, result)
        return result


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x00")
    return path


@pytest.fixture
def source_dir(tmp_path):
    return tmp_path / "source"


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "transcriptions"


@pytest.fixture
def make_config(source_dir, output_dir):
    def _make(**settings):
        debug = settings.pop("debug", False)
        api_key = settings.pop("api_key", "sk-test")
        return AppConfig(
            openai=OpenAIConfig(api_key=api_key),
            transcription=TranscriptionSettings(**settings),
            paths=PathsConfig(source_dir=source_dir, output_dir=output_dir),
            debug=debug,
        )

    return _make
