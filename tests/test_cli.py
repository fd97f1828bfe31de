"""Tests for scriptcut CLI."""

from __future__ import annotations

import os
import signal
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from scriptcut import __version__, cli
from scriptcut.cli import app
from scriptcut.exceptions import DependencyError

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the CLI inside tmp_path with ffmpeg checks stubbed out."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "check_ffmpeg", lambda: "/usr/bin/ffmpeg")
    (tmp_path / "input.mp4").write_bytes(b"fake video content")
    return tmp_path


@pytest.fixture
def wired(workdir: Path, monkeypatch: pytest.MonkeyPatch, fake_media, fake_client):
    monkeypatch.setattr(cli, "FFmpegTool", lambda binary="ffmpeg": fake_media)
    monkeypatch.setattr(cli, "create_client_from_config", lambda config: fake_client)
    return fake_media, fake_client


class TestUsage:
    def test_no_arguments_is_usage_error(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code != 0

    def test_missing_prompt_is_usage_error(self, workdir: Path) -> None:
        result = runner.invoke(app, ["input.mp4"])
        assert result.exit_code != 0

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCutCommand:
    def test_success_writes_output(self, workdir: Path, wired) -> None:
        fake_media, fake_client = wired
        result = runner.invoke(app, ["input.mp4", "keep", "the", "intro"])

        assert result.exit_code == 0, result.output
        assert fake_client.prompts == ["keep the intro"]
        assert (workdir / "output.mp4").exists()
        assert not (workdir / "audio.mp3").exists()
        assert not (workdir / "cut_files.txt").exists()
        assert not (workdir / ".cuts").exists()
        assert "00:00:00-00:00:05" in result.output
        assert "Wrote 1 segment(s)" in result.output

    def test_output_option(self, workdir: Path, wired) -> None:
        result = runner.invoke(app, ["input.mp4", "intro", "-o", "clips/final.mp4"])
        assert result.exit_code == 0, result.output
        assert (workdir / "clips" / "final.mp4").exists()
        assert not (workdir / "output.mp4").exists()

    def test_invalid_model_output_exits_1(self, workdir: Path, wired) -> None:
        _, fake_client = wired
        fake_client.response = "Here you go: 00:00:00-00:00:05"
        result = runner.invoke(app, ["input.mp4", "intro"])
        assert result.exit_code == 1
        assert "Unusable model output" in result.output
        assert not (workdir / "audio.mp3").exists()

    def test_malformed_range_exits_1(self, workdir: Path, wired) -> None:
        _, fake_client = wired
        fake_client.response = '{"stamps":"00:01:00"}'
        result = runner.invoke(app, ["input.mp4", "intro"])
        assert result.exit_code == 1
        assert "Malformed range" in result.output

    def test_missing_video_exits_1(self, workdir: Path, wired) -> None:
        result = runner.invoke(app, ["nope.mp4", "intro"])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_missing_api_key_exits_1(self, workdir: Path) -> None:
        result = runner.invoke(app, ["input.mp4", "intro"])
        assert result.exit_code == 1
        assert "GEMINI_KEY" in result.output

    def test_missing_ffmpeg_shows_hint(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_ffmpeg():
            raise DependencyError("ffmpeg", "FFmpeg not found in PATH", "Install with: apt install ffmpeg")

        monkeypatch.setattr(cli, "check_ffmpeg", no_ffmpeg)
        result = runner.invoke(app, ["input.mp4", "intro"])
        assert result.exit_code == 1
        assert "apt install ffmpeg" in result.output

    def test_invalid_poll_interval_exits_1(self, workdir: Path, wired) -> None:
        result = runner.invoke(app, ["input.mp4", "intro", "--poll-interval", "0"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_uses_resolved_ffmpeg_binary(self, workdir: Path, monkeypatch: pytest.MonkeyPatch, fake_media, fake_client) -> None:
        binaries = []

        def make_tool(binary="ffmpeg"):
            binaries.append(binary)
            return fake_media

        monkeypatch.setattr(cli, "FFmpegTool", make_tool)
        monkeypatch.setattr(cli, "create_client_from_config", lambda config: fake_client)
        result = runner.invoke(app, ["input.mp4", "intro"])
        assert result.exit_code == 0, result.output
        assert binaries == ["/usr/bin/ffmpeg"]


class TestWorkspaceErrors:
    def test_scratch_path_is_a_file_exits_1(self, workdir: Path, wired) -> None:
        _, fake_client = wired
        (workdir / ".cuts").write_text("not a directory")

        result = runner.invoke(app, ["input.mp4", "intro"])

        assert result.exit_code == 1
        assert "Cannot create scratch directory" in result.output
        assert not isinstance(result.exception, OSError)
        assert not (workdir / "audio.mp3").exists()
        assert not (workdir / "cut_files.txt").exists()
        assert (workdir / ".cuts").read_text() == "not a directory"
        assert fake_client.deleted == ["files/abc123"]


@pytest.mark.skipif(sys.platform == "win32", reason="Requires POSIX signals")
class TestTermination:
    def test_sigterm_during_cut_cleans_up(self, workdir: Path, wired) -> None:
        fake_media, fake_client = wired
        previous = signal.getsignal(signal.SIGTERM)

        def terminated_cut(video_path: Path, start: str, end: str, output_path: Path) -> Path:
            output_path.write_text(f"{start}-{end}")
            os.kill(os.getpid(), signal.SIGTERM)
            return output_path

        fake_media.cut_range = terminated_cut
        try:
            result = runner.invoke(app, ["input.mp4", "intro"])
        finally:
            signal.signal(signal.SIGTERM, previous)

        assert result.exit_code == 128 + signal.SIGTERM
        assert not (workdir / "audio.mp3").exists()
        assert not (workdir / "cut_files.txt").exists()
        assert not (workdir / ".cuts").exists()
        assert not (workdir / "output.mp4").exists()
        assert fake_client.deleted == ["files/abc123"]
