"""Infrastructure interface exports."""

from .transcript_store import TranscriptStore
from .transcription_service import TranscriptionService

__all__ = ["TranscriptStore", "TranscriptionService"]
