"""Handler for transcribing a single audio file."""

from ..config import TranscriptionSettings
from ..domain import AudioFile, FileOutcome, TranscriptBuilder, TranscriptionRequest
from ..infrastructure.interfaces import TranscriptionService, TranscriptStore
from ..logging import setup_logging

logger = setup_logging()


class AudioFileHandler:
    """Orchestrates audio-to-transcript operations for one file."""

    def __init__(
        self,
        transcription_service: TranscriptionService,
        store: TranscriptStore,
        transcript_builder: TranscriptBuilder,
        settings: TranscriptionSettings,
    ):
        self._transcription_service = transcription_service
        self._store = store
        self._transcript_builder = transcript_builder
        self._settings = settings

    def process(self, audio_file: AudioFile) -> FileOutcome:
        """
        Transcribes an audio file and stores the resulting text.

        Args:
            audio_file: The discovered audio file.

        Returns:
            FileOutcome pointing at the written transcript.

        Raises:
            TranscriptionError: If transcription fails.
            TranscriptWriteError: If the transcript cannot be written.
        """
        request = TranscriptionRequest.build(audio_file, self._settings)
        logger.debug(
            "Sending transcription request",
            extra={
                "file_name": audio_file.name,
                "model": request.model,
                "language": request.language,
                "has_prompt": request.prompt is not None,
            },
        )

        text = self._transcription_service.transcribe(request)

        output_name = self._transcript_builder.derive_name(audio_file.name)
        output_path = self._store.write(output_name, text)

        logger.info(
            "Transcript completed",
            extra={
                "audio_file": str(audio_file.relative_path),
                "transcript_file": output_name,
            },
        )

        return FileOutcome(audio_file=audio_file, output_path=output_path)
