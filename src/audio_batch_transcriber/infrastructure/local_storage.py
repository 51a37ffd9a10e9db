"""Filesystem implementation of the TranscriptStore interface."""

from pathlib import Path

from ..exceptions import DirectoryAccessError, TranscriptWriteError
from ..logging import setup_logging
from .interfaces import TranscriptStore

logger = setup_logging()


class LocalTranscriptStore(TranscriptStore):
    """Stores transcripts as UTF-8 text files in a single output directory."""

    def __init__(self, output_dir: Path):
        self._output_dir = Path(output_dir)

    def write(self, file_name: str, text: str) -> Path:
        path = self._output_dir / file_name
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.exception("Transcript write failed", extra={"path": str(path)})
            raise TranscriptWriteError(file_name, e) from e

        logger.debug("Transcript written", extra={"path": str(path)})
        return path


def ensure_directory(path: Path) -> None:
    """Creates ``path`` and its parents when missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.exception("Directory creation failed", extra={"directory": str(path)})
        raise DirectoryAccessError(path, e) from e
