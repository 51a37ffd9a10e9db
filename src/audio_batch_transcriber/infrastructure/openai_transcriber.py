"""OpenAI implementation of the TranscriptionService interface."""

from typing import Any

from openai import OpenAI

from ..domain.models import TranscriptionRequest
from ..exceptions import TranscriptionError
from ..logging import setup_logging
from .interfaces import TranscriptionService

logger = setup_logging()


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: OpenAI):
        self._client = client

    def transcribe(self, request: TranscriptionRequest) -> str:
        """
        Transcribes an audio file using OpenAI.

        The file is streamed from disk. Language and prompt are only sent
        when set, so an unset language lets the service detect it.
        """
        file_name = request.file_path.name
        params: dict[str, Any] = {"model": request.model}
        if request.language is not None:
            params["language"] = request.language
        if request.prompt is not None:
            params["prompt"] = request.prompt

        try:
            with open(request.file_path, "rb") as audio:
                transcription = self._client.audio.transcriptions.create(
                    file=audio, **params
                )
        except Exception as e:
            raise TranscriptionError(file_name, e) from e

        text = getattr(transcription, "text", None)
        if not text:
            raise TranscriptionError(
                file_name, Exception("Transcription returned no text")
            )

        logger.info(
            "Audio transcription successful",
            extra={"file_name": file_name, "model": request.model},
        )
        return text
