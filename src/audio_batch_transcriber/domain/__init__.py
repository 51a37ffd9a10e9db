"""Domain layer exports."""

from .file_discoverer import FileDiscoverer
from .models import AudioFile, FileOutcome, RunSummary, TranscriptionRequest
from .transcript_builder import TranscriptBuilder

__all__ = [
    "AudioFile",
    "FileDiscoverer",
    "FileOutcome",
    "RunSummary",
    "TranscriptBuilder",
    "TranscriptionRequest",
]
