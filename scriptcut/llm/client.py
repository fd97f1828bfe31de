"""
scriptcut.llm.client - Gemini backend using google-genai.

Wraps the Files and Models endpoints behind the InferenceClient interface:
upload, status lookup, single-turn generation and deletion.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from google import genai
from google.genai import types

from scriptcut.exceptions import LLMError, LLMResponseError, UploadError
from scriptcut.llm.templates import SYSTEM_PROMPT
from scriptcut.logging import logger
from scriptcut.models import RemoteFile


class GeminiClient:
    """Gemini client wrapper producing RemoteFile handles and response text."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
        system_prompt: str = SYSTEM_PROMPT,
        client: Any = None,
    ) -> None:
        self.model = model
        self.system_prompt = system_prompt
        self._client = client if client is not None else genai.Client(api_key=api_key)

    def upload(self, path: Path, mime_type: str) -> RemoteFile:
        """Upload a local file to the Files API.

        Raises:
            UploadError: If the upload request fails
        """
        logger.debug("Uploading %s as %s", path, mime_type)
        try:
            uploaded = self._client.files.upload(
                file=str(path),
                config=types.UploadFileConfig(mime_type=mime_type),
            )
        except Exception as e:
            raise UploadError(f"Upload of {path} failed: {e}") from e
        return to_remote_file(uploaded)

    def get_file(self, name: str) -> RemoteFile:
        """Fetch the current state of an uploaded file.

        Raises:
            UploadError: If the lookup fails
        """
        try:
            fetched = self._client.files.get(name=name)
        except Exception as e:
            raise UploadError(f"Fetching file {name} failed: {e}") from e
        return to_remote_file(fetched)

    def generate(self, prompt: str, remote_file: RemoteFile) -> str:
        """Send the user prompt plus a reference to remote_file.

        Args:
            prompt: The user's free-text prompt
            remote_file: An active uploaded file

        Returns:
            Response text

        Raises:
            LLMError: If the file has no URI or the request fails
            LLMResponseError: If the response carries no text
        """
        if not remote_file.uri:
            raise LLMError(f"File {remote_file.name} has no URI to reference")

        logger.debug("Generating with model %s", self.model)
        try:
            contents = [
                types.Content(
                    role="user",
                    parts=[
                        types.Part.from_text(text=prompt),
                        types.Part.from_uri(
                            file_uri=remote_file.uri,
                            mime_type=remote_file.mime_type,
                        ),
                    ],
                )
            ]
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(system_instruction=self.system_prompt),
            )
        except Exception as e:
            raise LLMError(f"Gemini request failed: {e}") from e

        text = getattr(response, "text", None)
        if not text:
            raise LLMResponseError("Empty response from Gemini")
        return text

    def delete_file(self, name: str) -> None:
        """Delete an uploaded file.

        Raises:
            LLMError: If the delete request fails
        """
        logger.debug("Deleting remote file %s", name)
        try:
            self._client.files.delete(name=name)
        except Exception as e:
            raise LLMError(f"Deleting file {name} failed: {e}") from e


def state_name(state: Any) -> str:
    """Normalize an SDK FileState (enum, string or None) to its name."""
    if state is None:
        return "STATE_UNSPECIFIED"
    return str(getattr(state, "value", state)).upper()


def to_remote_file(sdk_file: Any) -> RemoteFile:
    """Convert a google-genai File into a RemoteFile."""
    return RemoteFile(
        name=sdk_file.name,
        uri=getattr(sdk_file, "uri", None),
        mime_type=getattr(sdk_file, "mime_type", None),
        state=state_name(getattr(sdk_file, "state", None)),
    )


def create_client_from_config(config: Any) -> GeminiClient:
    """Create Gemini client from ScriptcutConfig.

    Args:
        config: ScriptcutConfig instance

    Returns:
        Configured GeminiClient

    Raises:
        ConfigError: If no API key is configured
    """
    return GeminiClient(api_key=config.require_api_key(), model=config.model)
