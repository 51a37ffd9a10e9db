"""Abstract interface for transcript storage operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class TranscriptStore(ABC):
    """Abstract base class for transcript destinations."""

    @abstractmethod
    def write(self, file_name: str, text: str) -> Path:
        """
        Writes a transcript, replacing any existing one with the same name.

        Args:
            file_name: Destination file name inside the store.
            text: Complete transcript content.

        Returns:
            Location of the written transcript.

        Raises:
            TranscriptWriteError: If the write fails.
        """
