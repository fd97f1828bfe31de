"""
scriptcut.config - YAML/.env config loading and validation.

Handles loading scriptcut.yaml and .env from a working directory, applying
environment overrides, and validating all parameters.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from scriptcut.exceptions import ConfigError

CONFIG_FILENAME = "scriptcut.yaml"
ENV_FILENAME = ".env"

ENV_OVERRIDES: dict[str, str] = {
    "GEMINI_KEY": "api_key",
    "GEMINI_MODEL": "model",
}


class ScriptcutConfig(BaseModel):
    """Resolved configuration for a Scriptcut run."""

    api_key: str | None = None
    model: str = "gemini-2.5-flash"
    mime_type: str = "audio/mp3"

    poll_interval: float = Field(default=5.0, gt=0.0)
    max_poll_attempts: int = Field(default=120, gt=0)

    audio_path: Path = Path("audio.mp3")
    manifest_path: Path = Path("cut_files.txt")
    scratch_dir: Path = Path(".cuts")
    output_path: Path = Path("output.mp4")

    @field_validator("model", "mime_type")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("mime_type")
    @classmethod
    def validate_mime_type(cls, v: str) -> str:
        if not v.startswith("audio/"):
            raise ValueError("mime_type must be an audio/* type")
        return v

    def require_api_key(self) -> str:
        """Return the API key or raise ConfigError if none was configured."""
        if not self.api_key:
            raise ConfigError(
                "No Gemini API key configured. Set GEMINI_KEY in the environment or .env file."
            )
        return self.api_key


def env_overrides(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Collect config values supplied through environment variables."""
    environ = os.environ if environ is None else environ
    overrides = {}
    for var, key in ENV_OVERRIDES.items():
        value = environ.get(var)
        if value:
            overrides[key] = value
    return overrides


def merge_config(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge override values into base config. Overrides take precedence; None is ignored."""
    merged = base.copy()
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def build_config(values: dict[str, Any]) -> ScriptcutConfig:
    """Validate raw values into a ScriptcutConfig, raising ConfigError on failure."""
    try:
        return ScriptcutConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(
    directory: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ScriptcutConfig:
    """Load and validate configuration for a run.

    Precedence, lowest first: built-in defaults, scriptcut.yaml, environment
    (including .env), explicit overrides.

    Args:
        directory: Directory holding scriptcut.yaml and .env (defaults to cwd)
        overrides: Values supplied on the command line

    Returns:
        Validated ScriptcutConfig

    Raises:
        ConfigError: If the YAML file is unreadable or values are invalid
    """
    directory = directory or Path.cwd()

    env_file = directory / ENV_FILENAME
    if env_file.exists():
        load_dotenv(env_file, override=False)

    raw_config: dict[str, Any] = {}
    config_file = directory / CONFIG_FILENAME
    if config_file.exists():
        try:
            with open(config_file) as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse {config_file}: {e}") from e
        if not isinstance(raw_config, dict):
            raise ConfigError(f"{config_file} must contain a mapping")

    merged = merge_config(raw_config, env_overrides())
    merged = merge_config(merged, overrides or {})
    return build_config(merged)
