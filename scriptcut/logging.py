"""
scriptcut.logging - Centralized logging configuration.

Log records share the rich console used for progress output. The Gemini
SDK and its HTTP layer stay at WARNING unless verbose mode is on.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("scriptcut")

SDK_LOGGERS = ("google_genai", "httpx", "httpcore")


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging for a scriptcut run.

    Args:
        verbose: If True, DEBUG for scriptcut and INFO for the SDK; otherwise WARNING
        console: Console to render records on (stderr console if None)
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler])
    logger.setLevel(level)

    sdk_level = logging.INFO if verbose else logging.WARNING
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
