"""Infrastructure layer exports."""

from .local_storage import LocalTranscriptStore, ensure_directory
from .openai_transcriber import OpenAITranscriber

__all__ = ["LocalTranscriptStore", "OpenAITranscriber", "ensure_directory"]
