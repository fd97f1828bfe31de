"""
scriptcut.cut - Per-range cutting and concatenation.

Pipeline Stages 5-6: cut each time range into a numbered segment file,
list the segments in a concat manifest, then join them into the output.
"""

from __future__ import annotations

import os
from pathlib import Path

from scriptcut.exceptions import CutError, MediaError, WorkspaceError
from scriptcut.logging import logger
from scriptcut.media import MediaTool
from scriptcut.models import TimeRange

DEFAULT_SEGMENT_SUFFIX = ".mp4"


def segment_path(scratch_dir: Path, index: int, suffix: str) -> Path:
    """Deterministic path of the index-th segment."""
    return scratch_dir / f"cut_{index}{suffix}"


def manifest_line(segment: Path, manifest_path: Path) -> str:
    """Format a concat demuxer entry for segment.

    The path is written relative to the manifest's directory, which is how
    the demuxer resolves relative entries.
    """
    rel = os.path.relpath(segment, manifest_path.parent)
    escaped = Path(rel).as_posix().replace("'", "'\\''")
    return f"file '{escaped}'\n"


def cut_segments(
    media: MediaTool,
    video_path: Path,
    ranges: list[TimeRange],
    scratch_dir: Path,
    manifest_path: Path,
    console=None,
) -> list[Path]:
    """Cut every range into scratch_dir and record it in the manifest.

    Args:
        media: Media tool performing the cuts
        video_path: Source video
        ranges: Ranges in output order
        scratch_dir: Directory for segment files (created if missing)
        manifest_path: Concat manifest to write
        console: Optional rich console for output

    Returns:
        Segment paths, one per range, in range order

    Raises:
        CutError: If any cut fails; earlier segments are left for cleanup
        WorkspaceError: If the scratch directory or manifest cannot be written
    """
    try:
        scratch_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WorkspaceError(f"Cannot create scratch directory {scratch_dir}: {e}") from e
    suffix = video_path.suffix or DEFAULT_SEGMENT_SUFFIX

    segments = []
    try:
        manifest = open(manifest_path, "w")
    except OSError as e:
        raise WorkspaceError(f"Cannot create manifest {manifest_path}: {e}") from e

    with manifest:
        for index, time_range in enumerate(ranges):
            output = segment_path(scratch_dir, index, suffix)
            if console:
                console.print(
                    f"[dim]  Cutting {index + 1}/{len(ranges)}: "
                    f"{time_range.start} - {time_range.end}[/dim]"
                )
            try:
                media.cut_range(video_path, time_range.start, time_range.end, output)
            except MediaError as e:
                raise CutError(index, str(e)) from e

            try:
                manifest.write(manifest_line(output, manifest_path))
            except OSError as e:
                raise WorkspaceError(f"Cannot write manifest {manifest_path}: {e}") from e
            segments.append(output)

    logger.debug("Wrote %d segments to %s", len(segments), manifest_path)
    return segments


def concatenate_segments(media: MediaTool, manifest_path: Path, output_path: Path) -> Path:
    """Join the manifest's segments into output_path.

    Raises:
        ConcatError: If FFmpeg fails
        WorkspaceError: If the output directory cannot be created
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WorkspaceError(f"Cannot create output directory {output_path.parent}: {e}") from e
    return media.concatenate(manifest_path, output_path)
