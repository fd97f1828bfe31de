"""
scriptcut.validation - Dependency checks and input validation.

Checked up front, before any audio is extracted or uploaded.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from scriptcut.exceptions import DependencyError, ValidationError
from scriptcut.logging import logger


def check_ffmpeg(binary: str = "ffmpeg") -> str:
    """Resolve the FFmpeg binary used for extraction, cuts and concat.

    Returns:
        Absolute path of the binary

    Raises:
        DependencyError: If the binary is not on PATH
    """
    ffmpeg_path = shutil.which(binary)
    if not ffmpeg_path:
        raise DependencyError(
            binary,
            "FFmpeg not found in PATH",
            "Install with: brew install ffmpeg (macOS) or apt install ffmpeg (Linux)",
        )
    logger.debug("Using FFmpeg at %s", ffmpeg_path)
    return ffmpeg_path


def validate_video_file(path: Path) -> Path:
    """Check that the input video is an existing regular file.

    Raises:
        ValidationError: If it is missing or not a file
    """
    if not path.exists():
        raise ValidationError(f"File not found: {path}")
    if not path.is_file():
        raise ValidationError(f"Not a file: {path}")
    return path


def validate_prompt(prompt: str) -> str:
    """Return the stripped prompt, rejecting empty ones."""
    prompt = prompt.strip()
    if not prompt:
        raise ValidationError("Prompt must not be empty")
    return prompt
