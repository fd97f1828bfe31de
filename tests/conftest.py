"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from scriptcut.config import ScriptcutConfig
from scriptcut.exceptions import MediaError
from scriptcut.models import RemoteFile

MANIFEST_ENTRY = re.compile(r"^file '(.*)'$")


class FakeMediaTool:
    """MediaTool that writes small text files instead of running FFmpeg."""

    def __init__(self, fail_extract: bool = False, fail_cut_at: int | None = None, fail_concat: bool = False):
        self.fail_extract = fail_extract
        self.fail_cut_at = fail_cut_at
        self.fail_concat = fail_concat
        self.cuts: list[tuple[str, str, Path]] = []
        self.concatenated: list[Path] = []

    def extract_audio(self, video_path: Path, audio_path: Path) -> Path:
        audio_path.write_bytes(b"partial")
        if self.fail_extract:
            raise MediaError("extract failed")
        audio_path.write_bytes(b"ID3 fake audio")
        return audio_path

    def cut_range(self, video_path: Path, start: str, end: str, output_path: Path) -> Path:
        if self.fail_cut_at is not None and len(self.cuts) == self.fail_cut_at:
            raise MediaError("cut failed")
        output_path.write_text(f"{start}-{end}")
        self.cuts.append((start, end, output_path))
        return output_path

    def concatenate(self, manifest_path: Path, output_path: Path) -> Path:
        if self.fail_concat:
            raise MediaError("concat failed")
        parts = []
        for line in manifest_path.read_text().splitlines():
            match = MANIFEST_ENTRY.match(line)
            assert match, line
            segment = manifest_path.parent / match.group(1)
            self.concatenated.append(segment)
            parts.append(segment.read_text())
        output_path.write_text("|".join(parts))
        return output_path


class FakeInferenceClient:
    """InferenceClient replaying scripted file states and a fixed response."""

    def __init__(self, response: str = '{"stamps":"00:00:00-00:00:05"}', states: list[str] | None = None):
        self.model = "fake-model"
        self.response = response
        self.states = list(states or ["ACTIVE"])
        self.uploaded: list[tuple[Path, str]] = []
        self.prompts: list[str] = []
        self.deleted: list[str] = []
        self.polls = 0

    def upload(self, path: Path, mime_type: str) -> RemoteFile:
        assert path.exists()
        self.uploaded.append((path, mime_type))
        return self._file(self.states[0])

    def get_file(self, name: str) -> RemoteFile:
        self.polls += 1
        index = min(self.polls, len(self.states) - 1)
        return self._file(self.states[index])

    def generate(self, prompt: str, remote_file: RemoteFile) -> str:
        assert remote_file.state == "ACTIVE"
        self.prompts.append(prompt)
        return self.response

    def delete_file(self, name: str) -> None:
        self.deleted.append(name)

    def _file(self, state: str) -> RemoteFile:
        return RemoteFile(
            name="files/abc123",
            uri="https://example.invalid/files/abc123",
            mime_type="audio/mp3",
            state=state,
        )


@pytest.fixture
def fake_media() -> FakeMediaTool:
    return FakeMediaTool()


@pytest.fixture
def fake_client() -> FakeInferenceClient:
    return FakeInferenceClient()


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """Create a placeholder input video."""
    path = tmp_path / "input.mp4"
    path.write_bytes(b"fake video content")
    return path


@pytest.fixture
def run_config(tmp_path: Path) -> ScriptcutConfig:
    """Config with every artifact under tmp_path."""
    return ScriptcutConfig(
        api_key="test-key",
        model="fake-model",
        poll_interval=0.01,
        max_poll_attempts=3,
        audio_path=tmp_path / "audio.mp3",
        manifest_path=tmp_path / "cut_files.txt",
        scratch_dir=tmp_path / ".cuts",
        output_path=tmp_path / "output.mp4",
    )


@pytest.fixture
def stamps_response() -> str:
    return json.dumps({"stamps": "00:01:00-00:02:00,00:02:00-00:03:00"})


@pytest.fixture
def make_client() -> type[FakeInferenceClient]:
    """Factory for clients with scripted states or responses."""
    return FakeInferenceClient


@pytest.fixture
def make_media() -> type[FakeMediaTool]:
    """Factory for media tools that fail at a chosen stage."""
    return FakeMediaTool


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from GEMINI_* variables, including ones set by load_dotenv."""
    for var in ("GEMINI_KEY", "GEMINI_MODEL"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
