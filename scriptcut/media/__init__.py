"""
scriptcut.media - Media tool abstraction.

Pipeline Stages 1, 5 and 6: audio extraction, per-range cuts and
concatenation, expressed as a narrow capability interface so the
orchestration can run against a fake in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class MediaTool(Protocol):
    def extract_audio(self, video_path: Path, audio_path: Path) -> Path:
        """Write the audio stream of video_path to audio_path."""

    def cut_range(self, video_path: Path, start: str, end: str, output_path: Path) -> Path:
        """Stream-copy [start, end] of video_path into output_path."""

    def concatenate(self, manifest_path: Path, output_path: Path) -> Path:
        """Join the files listed in a concat manifest into output_path."""
