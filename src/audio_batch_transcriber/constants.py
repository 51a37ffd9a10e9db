"""Fixed values shared across the transcriber."""

SUPPORTED_MODELS: dict[str, str] = {
    "whisper-1": "OpenAI Whisper (most accurate)",
    "gpt-4o-transcribe": "GPT-4o transcription",
    "gpt-4o-mini-transcribe": "GPT-4o mini transcription (faster, cheaper)",
}

DEFAULT_MODEL = "whisper-1"

AUTO_LANGUAGE = "auto"

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
    {".mp3", ".mp4", ".mpeg", ".mpga", ".m4a", ".wav", ".webm"}
)

DEFAULT_SOURCE_DIR = "source"
DEFAULT_OUTPUT_DIR = "transcriptions"

TRANSCRIPT_SUFFIX = ".txt"
