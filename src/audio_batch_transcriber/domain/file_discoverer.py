"""Recursive discovery of audio files under a source directory."""

import os
from collections.abc import Iterable
from pathlib import Path

from ..constants import SUPPORTED_EXTENSIONS
from ..exceptions import DirectoryScanError
from ..logging import setup_logging
from .models import AudioFile

logger = setup_logging()


class FileDiscoverer:
    """Finds files with a supported audio extension, descending into subdirectories."""

    def __init__(self, extensions: Iterable[str] = SUPPORTED_EXTENSIONS):
        self._extensions = frozenset(ext.lower() for ext in extensions)

    @property
    def extensions(self) -> list[str]:
        return sorted(self._extensions)

    def discover(self, root: Path) -> list[AudioFile]:
        """
        Lists audio files under ``root`` in directory listing order.

        Subdirectories are expanded where they are encountered. Symbolic links
        to directories are not followed, which keeps link cycles from looping
        forever; symbolic links to files are treated like regular files.

        Args:
            root: Directory to scan. Must exist.

        Returns:
            Audio files found, possibly empty.

        Raises:
            DirectoryScanError: If any directory in the tree cannot be read.
        """
        root = Path(root)
        audio_files = [
            AudioFile(path=path, relative_path=path.relative_to(root))
            for path in self._walk(root)
        ]
        logger.debug(
            "Audio file discovery finished",
            extra={"source_dir": str(root), "file_count": len(audio_files)},
        )
        return audio_files

    def is_supported(self, file_name: str) -> bool:
        return os.path.splitext(file_name)[1].lower() in self._extensions

    def _walk(self, directory: Path) -> list[Path]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.exception(
                "Directory scan failed", extra={"directory": str(directory)}
            )
            raise DirectoryScanError(directory, e) from e

        found: list[Path] = []
        for entry in entries:
            path = directory / entry.name
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise DirectoryScanError(path, e) from e

            if is_dir:
                found.extend(self._walk(path))
            elif self.is_supported(entry.name):
                found.append(path)
        return found
