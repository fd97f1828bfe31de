"""
scriptcut.utils - Shared utility functions.

Contains common functions used across multiple modules to avoid duplication.
"""

from __future__ import annotations

from pathlib import Path


def format_duration(seconds: float) -> str:
    """Format a selected duration as [H:]MM:SS.s.

    Reversed ranges count negatively, so the total can be below zero; the
    sign is kept rather than clamped.
    """
    sign = "-" if seconds < 0 else ""
    tenths = round(abs(seconds) * 10)
    hours, rest = divmod(tenths, 36000)
    minutes, rest = divmod(rest, 600)
    secs = rest / 10
    if hours:
        return f"{sign}{hours}:{minutes:02d}:{secs:04.1f}"
    return f"{sign}{minutes}:{secs:04.1f}"


def format_size(path: Path) -> str:
    """Format file size in human-readable format."""
    if not path.exists():
        return "-"
    size = path.stat().st_size
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"
