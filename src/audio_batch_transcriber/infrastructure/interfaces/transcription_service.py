"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from ...domain.models import TranscriptionRequest


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(self, request: TranscriptionRequest) -> str:
        """
        Transcribes the audio file named by the request and returns its text.

        Args:
            request: File, model and optional language/prompt hints.

        Returns:
            The recognized text.

        Raises:
            TranscriptionError: If transcription fails.
        """
