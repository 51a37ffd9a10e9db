import argparse

from . import __version__
from .constants import AUTO_LANGUAGE, DEFAULT_MODEL, SUPPORTED_MODELS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-batch-transcriber",
        description="Transcribe every audio file in a folder with the OpenAI speech-to-text API.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-m", "--model", default=DEFAULT_MODEL, help="Model to use (default: %(default)s).")
    parser.add_argument(
        "-l",
        "--language",
        default=AUTO_LANGUAGE,
        help="Language code such as en or hu; 'auto' lets the service detect it (default: %(default)s).",
    )
    parser.add_argument("-p", "--prompt", default=None, help="Helper prompt for more accurate transcription.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging and full error details.")
    parser.add_argument(
        "-s",
        "--source",
        default=None,
        help="Folder with audio files (default: $TRANSCRIBER_SOURCE_DIR or ./source).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Folder for transcripts (default: $TRANSCRIBER_OUTPUT_DIR or ./transcriptions).",
    )
    parser.add_argument("--list-models", action="store_true", help="Print the supported models and exit.")
    return parser


def format_models() -> str:
    return "\n".join(f"  - {model_id}: {description}" for model_id, description in SUPPORTED_MODELS.items())
