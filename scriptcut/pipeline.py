"""
scriptcut.pipeline - End-to-end orchestration.

Runs the stages strictly in order: extract audio → upload → wait until
active → generate → parse → cut → concatenate. Every temporary resource
is registered for cleanup as soon as it exists, so the audio file, the
remote upload, the manifest and the scratch directory are removed on
success, on error and on interrupt alike.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from contextlib import ExitStack
from pathlib import Path

from scriptcut.config import ScriptcutConfig
from scriptcut.cut import concatenate_segments, cut_segments
from scriptcut.exceptions import ScriptcutError
from scriptcut.llm import InferenceClient
from scriptcut.llm.parsing import parse_stamps_response
from scriptcut.llm.upload import wait_until_active
from scriptcut.logging import logger
from scriptcut.media import MediaTool
from scriptcut.models import PipelineResult
from scriptcut.validation import validate_prompt, validate_video_file


def _remove_file(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)


def _remove_dir(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove %s: %s", path, e)


def _delete_remote(client: InferenceClient, name: str) -> None:
    try:
        client.delete_file(name)
    except ScriptcutError as e:
        logger.warning("Could not delete remote file %s: %s", name, e)


def run_pipeline(
    video_path: Path,
    prompt: str,
    config: ScriptcutConfig,
    media: MediaTool,
    client: InferenceClient,
    console=None,
    sleep: Callable[[float], None] = time.sleep,
) -> PipelineResult:
    """Cut the parts of video_path that match prompt into config.output_path.

    Args:
        video_path: Source video
        prompt: Free-text description of what to keep
        config: Resolved configuration (paths, model, polling limits)
        media: Media tool used for extraction, cuts and concat
        client: Inference client used for upload and generation
        console: Optional rich console for progress output
        sleep: Sleep function used while polling (injected in tests)

    Returns:
        PipelineResult describing the output

    Raises:
        ScriptcutError: On any failure; temporary files are removed first
    """
    validate_video_file(video_path)
    prompt = validate_prompt(prompt)

    def _status(message: str) -> None:
        if console:
            console.print(message)
        logger.debug(message)

    with ExitStack() as cleanup:
        cleanup.callback(_remove_file, config.audio_path)
        _status(f"Extracting audio from {video_path.name}...")
        media.extract_audio(video_path, config.audio_path)
        _status(f"Audio written to {config.audio_path}")

        _status("Uploading audio...")
        remote_file = client.upload(config.audio_path, config.mime_type)
        cleanup.callback(_delete_remote, client, remote_file.name)

        remote_file = wait_until_active(
            client,
            remote_file,
            poll_interval=config.poll_interval,
            max_attempts=config.max_poll_attempts,
            sleep=sleep,
            console=console,
        )

        _status(f"Asking {config.model} for cuts...")
        response_text = client.generate(prompt, remote_file)
        if console:
            console.print(response_text, markup=False, highlight=False)

        ranges = parse_stamps_response(response_text)

        cleanup.callback(_remove_file, config.manifest_path)
        cleanup.callback(_remove_dir, config.scratch_dir)
        segments = cut_segments(
            media,
            video_path,
            ranges,
            config.scratch_dir,
            config.manifest_path,
            console=console,
        )

        _status(f"Joining {len(segments)} segment(s)...")
        concatenate_segments(media, config.manifest_path, config.output_path)

    return PipelineResult(
        output_path=config.output_path,
        ranges=ranges,
        segments=segments,
        response_text=response_text,
    )
