"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from audio_batch_transcriber import main as main_module
from audio_batch_transcriber.main import main

from .conftest import FakeTranscriptionService, touch


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    for name in ("OPENAI_BASE_URL", "OPENAI_TIMEOUT_SECONDS", "TRANSCRIBER_SOURCE_DIR", "TRANSCRIBER_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    with patch.object(main_module, "load_dotenv"):
        yield


@pytest.fixture
def dirs(tmp_path):
    return tmp_path / "source", tmp_path / "transcriptions"


def run(dirs, *extra):
    source, output = dirs
    return main(["-s", str(source), "-o", str(output), *extra])


class TestMain:
    """Tests for main exit codes and side effects."""

    def test_missing_credential_stops_before_work(self, monkeypatch, dirs):
        """Should exit non-zero before creating folders or building the runner."""
        monkeypatch.delenv("OPENAI_API_KEY")

        with patch.object(main_module, "build_runner") as build_runner:
            assert run(dirs) == 1

        build_runner.assert_not_called()
        assert not dirs[0].exists()

    def test_unknown_model_stops_before_discovery(self, dirs):
        with patch.object(main_module, "build_runner") as build_runner:
            assert run(dirs, "-m", "whisper-1-quantized") == 1

        build_runner.assert_not_called()

    def test_partial_failure_exits_zero(self, dirs):
        """Should exit 0 when some files fail."""
        source, output = dirs
        touch(source / "a.wav")
        touch(source / "b.mp3")
        service = FakeTranscriptionService({"a.wav": "hello", "b.mp3": RuntimeError("nope")})

        with patch(
            "audio_batch_transcriber.dependencies.get_transcription_service",
            return_value=service,
        ):
            assert run(dirs) == 0

        assert (output / "a.txt").read_text(encoding="utf-8") == "hello"
        assert not (output / "b.txt").exists()

    def test_all_failed_exits_zero(self, dirs):
        touch(dirs[0] / "a.wav")
        service = FakeTranscriptionService({"a.wav": RuntimeError("nope")})

        with patch(
            "audio_batch_transcriber.dependencies.get_transcription_service",
            return_value=service,
        ):
            assert run(dirs, "--debug") == 0

    def test_no_files_exits_zero(self, dirs):
        """Should exit 0 and write nothing when the source folder is empty."""
        with patch(
            "audio_batch_transcriber.dependencies.get_transcription_service",
            return_value=FakeTranscriptionService(),
        ):
            assert run(dirs) == 0

        assert list(dirs[1].iterdir()) == []

    def test_directory_failure_exits_non_zero(self, dirs):
        """Should exit 1 when the output folder cannot be created."""
        dirs[1].parent.mkdir(parents=True, exist_ok=True)
        dirs[1].write_text("not a folder")

        with patch(
            "audio_batch_transcriber.dependencies.get_transcription_service",
            return_value=FakeTranscriptionService(),
        ):
            assert run(dirs) == 1

    def test_invalid_timeout_exits_non_zero(self, monkeypatch, dirs):
        """Should exit 1 before any work when the timeout setting is not a number."""
        monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "soon")

        with patch.object(main_module, "build_runner") as build_runner:
            assert run(dirs) == 1

        build_runner.assert_not_called()

    def test_unexpected_error_exits_non_zero(self, dirs):
        with patch.object(main_module, "build_runner", side_effect=RuntimeError("boom")):
            assert run(dirs) == 1

    def test_list_models(self, capsys):
        assert main(["--list-models"]) == 0
        assert "whisper-1" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
