"""Batch transcription of local audio files through the OpenAI speech-to-text API."""

__version__ = "1.0.0"
