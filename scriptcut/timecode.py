"""
scriptcut.timecode - Clock timestamp utilities.

Handles the HH:MM:SS[.ff] timestamps exchanged with the model and passed
to FFmpeg seek options.
"""

from __future__ import annotations

import re

TIMESTAMP_RE = re.compile(r"^(\d{1,2}):([0-5]\d):([0-5]\d)(?:\.(\d{1,2}))?$")


def is_valid_timestamp(timestamp: str) -> bool:
    """Check whether a string is an HH:MM:SS or HH:MM:SS.ff timestamp."""
    return TIMESTAMP_RE.match(timestamp) is not None


def timestamp_to_seconds(timestamp: str) -> float:
    """Convert HH:MM:SS[.ff] timestamp to seconds.

    Args:
        timestamp: Timestamp string, at most two fractional digits

    Returns:
        Time in seconds

    Raises:
        ValueError: If the timestamp is malformed
    """
    match = TIMESTAMP_RE.match(timestamp)
    if not match:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")

    hh, mm, ss, frac = match.groups()
    seconds = int(hh) * 3600 + int(mm) * 60 + int(ss)
    if frac:
        seconds += int(frac) / (10 ** len(frac))
    return seconds
