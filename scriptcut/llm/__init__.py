"""
scriptcut.llm - Gemini inference passes.

Pipeline Stages 2-4:
- Upload the extracted audio and wait for it to become active
- Prompt the model with the fixed cutting instruction
- Parse the returned time ranges
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from scriptcut.models import RemoteFile


class InferenceClient(Protocol):
    def upload(self, path: Path, mime_type: str) -> RemoteFile:
        """Upload a local file and return its remote handle."""

    def get_file(self, name: str) -> RemoteFile:
        """Re-fetch a remote file handle to observe its current state."""

    def generate(self, prompt: str, remote_file: RemoteFile) -> str:
        """Run a single-turn generation referencing remote_file; return the text."""

    def delete_file(self, name: str) -> None:
        """Delete a remote file."""
