"""Core business logic for transcript naming."""

import os

from ..constants import TRANSCRIPT_SUFFIX


class TranscriptBuilder:
    """Derives transcript file names from audio file names."""

    def derive_name(self, audio_file_name: str) -> str:
        """Converts an audio file name to its transcript name (e.g. talk.wav -> talk.txt)."""
        base_name = os.path.basename(audio_file_name)
        return os.path.splitext(base_name)[0] + TRANSCRIPT_SUFFIX
