"""Custom exceptions for the audio batch transcriber."""

from pathlib import Path


class MissingCredentialError(Exception):
    """Raised when the transcription service credential is not configured."""

    def __init__(self, variable_name: str):
        self.variable_name = variable_name
        super().__init__(f"{variable_name} is not set in the environment or .env file")


class UnsupportedModelError(Exception):
    """Raised when the requested model is not one of the supported models."""

    def __init__(self, model: str, supported_models: list[str]):
        self.model = model
        self.supported_models = supported_models
        super().__init__(
            f"Invalid model '{model}'. Available models: {', '.join(supported_models)}"
        )


class DirectoryAccessError(Exception):
    """Raised when the source or output directory cannot be created."""

    def __init__(self, path: Path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to prepare directory '{path}'")


class DirectoryScanError(Exception):
    """Raised when a directory cannot be read during audio file discovery."""

    def __init__(self, path: Path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to scan directory '{path}'")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")

    @property
    def reason(self) -> str:
        """Message of the underlying failure, or of this error when there is none."""
        if self.cause is None:
            return str(self)
        return str(self.cause) or type(self.cause).__name__


class TranscriptWriteError(Exception):
    """Raised when writing a transcript to the output directory fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to write transcript '{file_name}'")


class InvalidConfigurationError(Exception):
    """Raised when configuration values from the CLI or environment are invalid."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__(f"Invalid configuration: {cause}")
