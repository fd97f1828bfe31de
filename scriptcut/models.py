"""
scriptcut.models - Shared data types used across Scriptcut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from scriptcut.timecode import timestamp_to_seconds


@dataclass(frozen=True)
class TimeRange:
    """A start/end pair of HH:MM:SS[.ff] timestamps, as given by the model."""

    start: str
    end: str

    @property
    def duration(self) -> float:
        """Length in seconds. Negative when end precedes start; no check is made."""
        return timestamp_to_seconds(self.end) - timestamp_to_seconds(self.start)

    def as_tuple(self) -> tuple[str, str]:
        return (self.start, self.end)


@dataclass
class RemoteFile:
    """An uploaded file as known to the inference service."""

    name: str
    uri: str | None
    mime_type: str | None
    state: str = "STATE_UNSPECIFIED"


@dataclass
class PipelineResult:
    output_path: Path
    ranges: list[TimeRange] = field(default_factory=list)
    segments: list[Path] = field(default_factory=list)
    response_text: str = ""

    @property
    def selected_duration(self) -> float:
        return sum(r.duration for r in self.ranges)
