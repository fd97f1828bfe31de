"""
scriptcut.media.ffmpeg - FFmpeg subprocess implementation of MediaTool.

Every call is a blocking child process; a nonzero exit is raised as a
MediaError (or subclass) carrying FFmpeg's output.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from scriptcut.exceptions import ConcatError, ExtractionError, MediaError
from scriptcut.logging import logger


class FFmpegTool:
    """MediaTool backed by the ffmpeg binary."""

    def __init__(self, binary: str = "ffmpeg") -> None:
        self.binary = binary

    def extract_audio(self, video_path: Path, audio_path: Path) -> Path:
        """Extract the audio stream at maximum VBR quality.

        Raises:
            ExtractionError: If FFmpeg fails
        """
        cmd = [
            self.binary,
            "-y",
            "-i",
            str(video_path),
            "-q:a",
            "0",
            "-map",
            "a",
            str(audio_path),
        ]
        try:
            proc = self._run(cmd)
        except OSError as e:
            raise ExtractionError(f"Audio extraction failed: {e}") from e
        if proc.returncode != 0:
            raise ExtractionError(f"FFmpeg audio extraction failed: {proc.stderr}")
        return audio_path

    def cut_range(self, video_path: Path, start: str, end: str, output_path: Path) -> Path:
        """Cut [start, end] without re-encoding.

        Seeking before -i is input seeking; with -c copy the cut snaps to the
        nearest keyframe.

        Raises:
            MediaError: If FFmpeg fails
        """
        cmd = [
            self.binary,
            "-y",
            "-ss",
            start,
            "-to",
            end,
            "-i",
            str(video_path),
            "-c",
            "copy",
            str(output_path),
        ]
        try:
            proc = self._run(cmd)
        except OSError as e:
            raise MediaError(f"FFmpeg cut failed: {e}") from e
        if proc.returncode != 0:
            raise MediaError(f"FFmpeg cut failed: {proc.stderr}")
        return output_path

    def concatenate(self, manifest_path: Path, output_path: Path) -> Path:
        """Join segments with the concat demuxer.

        Raises:
            ConcatError: If FFmpeg fails, with combined stdout/stderr
        """
        cmd = [
            self.binary,
            "-y",
            "-f",
            "concat",
            "-safe",
            "0",
            "-i",
            str(manifest_path),
            "-c",
            "copy",
            str(output_path),
        ]
        try:
            proc = self._run(cmd, combined=True)
        except OSError as e:
            raise ConcatError(f"FFmpeg concat failed: {e}") from e
        if proc.returncode != 0:
            raise ConcatError(
                f"FFmpeg concat failed (rc={proc.returncode}) - output: {proc.stdout}"
            )
        return output_path

    def _run(self, cmd: list[str], combined: bool = False) -> subprocess.CompletedProcess:
        logger.debug("Running: %s", " ".join(cmd))
        return subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combined else subprocess.PIPE,
            text=True,
        )

