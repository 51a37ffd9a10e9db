"""Runner that discovers audio files and transcribes them one at a time."""

from pathlib import Path

from .config import AppConfig
from .constants import SUPPORTED_MODELS
from .domain import FileDiscoverer, FileOutcome, RunSummary
from .exceptions import MissingCredentialError, TranscriptionError, UnsupportedModelError
from .handlers import AudioFileHandler
from .infrastructure import ensure_directory
from .logging import setup_logging

logger = setup_logging()


def ensure_ready(config: AppConfig) -> None:
    """
    Checks the preconditions of a run before anything touches the network or disk.

    Raises:
        MissingCredentialError: If no API key is configured.
        UnsupportedModelError: If the requested model is unknown.
    """
    if not config.openai.api_key:
        raise MissingCredentialError("OPENAI_API_KEY")

    model = config.transcription.model
    if model not in SUPPORTED_MODELS:
        raise UnsupportedModelError(model, list(SUPPORTED_MODELS))


class BatchRunner:
    """Transcribes every discovered audio file sequentially and summarizes the run."""

    def __init__(
        self,
        discoverer: FileDiscoverer,
        handler: AudioFileHandler,
        config: AppConfig,
    ):
        self._discoverer = discoverer
        self._handler = handler
        self._config = config

    def run(self) -> RunSummary:
        """
        Runs the whole batch.

        Only per-file transcription failures are absorbed; directory and write
        errors propagate and abort the run.

        Returns:
            RunSummary with the counters and the outcome of every file.

        Raises:
            DirectoryAccessError: If the source or output directory cannot be created.
            DirectoryScanError: If the source tree cannot be read.
            TranscriptWriteError: If a transcript cannot be written.
        """
        source_dir = self._config.paths.source_dir
        ensure_directory(source_dir)
        ensure_directory(self._config.paths.output_dir)

        logger.info("Searching for audio files", extra={"source_dir": str(source_dir)})
        audio_files = self._discoverer.discover(source_dir)
        logger.info("Audio files found", extra={"file_count": len(audio_files)})

        if not audio_files:
            logger.warning(
                "No audio files to process in the source folder",
                extra={
                    "source_dir": str(source_dir),
                    "supported_formats": self._discoverer.extensions,
                },
            )
            summary = RunSummary.from_outcomes([])
            self._report(summary)
            return summary

        outcomes: list[FileOutcome] = []
        written: dict[str, Path] = {}
        total = len(audio_files)
        for index, audio_file in enumerate(audio_files, start=1):
            logger.info(
                "Processing audio file",
                extra={
                    "position": f"{index}/{total}",
                    "audio_file": str(audio_file.relative_path),
                },
            )
            try:
                outcome = self._handler.process(audio_file)
            except TranscriptionError as e:
                self._log_failure(audio_file.relative_path, e)
                outcome = FileOutcome(audio_file=audio_file, error=e.reason)
            else:
                self._check_overwrite(written, outcome)
            outcomes.append(outcome)

        summary = RunSummary.from_outcomes(outcomes)
        self._report(summary)
        return summary

    def _check_overwrite(self, written: dict[str, Path], outcome: FileOutcome) -> None:
        name = outcome.output_path.name
        previous = written.get(name)
        if previous is not None:
            logger.warning(
                "Transcript overwritten by a file with the same name",
                extra={
                    "transcript_file": name,
                    "previous_audio_file": str(previous),
                    "audio_file": str(outcome.audio_file.relative_path),
                },
            )
        written[name] = outcome.audio_file.relative_path

    def _log_failure(self, relative_path: Path, error: TranscriptionError) -> None:
        extra = {"audio_file": str(relative_path), "error": error.reason}
        if self._config.debug:
            logger.error("Failed to create transcript", extra=extra, exc_info=error)
        else:
            logger.error("Failed to create transcript", extra=extra)

    def _report(self, summary: RunSummary) -> None:
        logger.info(
            "Processing completed",
            extra={
                "total": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
            },
        )
        if summary.failed:
            logger.warning(
                "Some files failed to transcribe",
                extra={
                    "failed_files": [
                        str(o.audio_file.relative_path)
                        for o in summary.outcomes
                        if not o.succeeded
                    ]
                },
            )
