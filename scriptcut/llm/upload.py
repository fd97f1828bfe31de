"""
scriptcut.llm.upload - Upload readiness polling.

An uploaded file moves from an unspecified/processing state to ACTIVE
(usable) or FAILED. Polling re-fetches the file at a fixed interval and
gives up after a bounded number of attempts.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from scriptcut.exceptions import UploadFailedError, UploadTimeoutError
from scriptcut.llm import InferenceClient
from scriptcut.logging import logger
from scriptcut.models import RemoteFile

ACTIVE = "ACTIVE"
FAILED = "FAILED"


def wait_until_active(
    client: InferenceClient,
    remote_file: RemoteFile,
    poll_interval: float = 5.0,
    max_attempts: int = 120,
    sleep: Callable[[float], None] = time.sleep,
    console=None,
) -> RemoteFile:
    """Block until remote_file reports ACTIVE.

    Args:
        client: Client used to re-fetch the file
        remote_file: Handle returned by the upload
        poll_interval: Seconds to sleep between fetches
        max_attempts: Maximum number of re-fetches before giving up
        sleep: Sleep function (injected in tests)
        console: Optional rich console for output

    Returns:
        The ACTIVE file handle

    Raises:
        UploadFailedError: If the service reports the file as FAILED
        UploadTimeoutError: If the file is not ACTIVE after max_attempts fetches
        UploadError: If a fetch fails
    """
    current = remote_file
    attempts = 0

    while current.state != ACTIVE:
        if current.state == FAILED:
            raise UploadFailedError(f"Remote processing of {current.name} failed")
        if attempts >= max_attempts:
            raise UploadTimeoutError(current.name, attempts, current.state)

        if console:
            console.print(f"[dim]  Processing audio... (state: {current.state})[/dim]")
        logger.debug("File %s in state %s, attempt %d", current.name, current.state, attempts)

        sleep(poll_interval)
        current = client.get_file(current.name)
        attempts += 1

    return current
