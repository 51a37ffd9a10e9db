"""Domain models for the audio batch transcriber."""

from pathlib import Path

from pydantic import BaseModel

from ..config import TranscriptionSettings
from ..constants import AUTO_LANGUAGE


class AudioFile(BaseModel, frozen=True):
    """An audio file found under the source directory."""

    path: Path
    relative_path: Path

    @property
    def name(self) -> str:
        return self.path.name


class TranscriptionRequest(BaseModel, frozen=True):
    """A single call to the transcription service."""

    file_path: Path
    model: str
    language: str | None = None
    prompt: str | None = None

    @classmethod
    def build(
        cls, audio_file: AudioFile, settings: TranscriptionSettings
    ) -> "TranscriptionRequest":
        """Creates the request for a file, dropping the language hint for 'auto'."""
        return cls(
            file_path=audio_file.path,
            model=settings.model,
            language=None if settings.language == AUTO_LANGUAGE else settings.language,
            prompt=settings.prompt,
        )


class FileOutcome(BaseModel, frozen=True):
    """Result of processing one audio file."""

    audio_file: AudioFile
    output_path: Path | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class RunSummary(BaseModel, frozen=True):
    """Counters reported once a batch run has finished."""

    total: int
    succeeded: int
    failed: int
    outcomes: tuple[FileOutcome, ...] = ()

    @classmethod
    def from_outcomes(cls, outcomes: list[FileOutcome]) -> "RunSummary":
        succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
        return cls(
            total=len(outcomes),
            succeeded=succeeded,
            failed=len(outcomes) - succeeded,
            outcomes=tuple(outcomes),
        )
