"""
scriptcut.exceptions - Custom exception classes.

All Scriptcut-specific exceptions inherit from ScriptcutError.
"""


class ScriptcutError(Exception):
    """Base exception for all Scriptcut errors."""

    pass


class ConfigError(ScriptcutError):
    """Configuration loading or validation error."""

    pass


class ValidationError(ScriptcutError):
    """Input validation error."""

    pass


class MediaError(ScriptcutError):
    """FFmpeg invocation error."""

    pass


class WorkspaceError(ScriptcutError):
    """Scratch directory or manifest could not be created or written."""

    pass


class ExtractionError(MediaError):
    """Audio extraction error."""

    pass


class CutError(MediaError):
    """Segment cut error."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"Cut {index} failed: {message}")


class ConcatError(MediaError):
    """Segment concatenation error."""

    pass


class LLMError(ScriptcutError):
    """Gemini backend or prompt error."""

    pass


class UploadError(LLMError):
    """Audio upload or processing error."""

    pass


class UploadFailedError(UploadError):
    """Remote service reported the uploaded file as unusable."""

    pass


class UploadTimeoutError(UploadError):
    """Uploaded file never became active within the allowed attempts."""

    def __init__(self, name: str, attempts: int, state: str):
        self.name = name
        self.attempts = attempts
        self.state = state
        super().__init__(
            f"File {name} still {state} after {attempts} polling attempts"
        )


class LLMResponseError(LLMError):
    """Model returned malformed or unexpected response."""

    pass


class MalformedRangeError(LLMResponseError):
    """A time range token in the model response could not be parsed."""

    def __init__(self, index: int, token: str, reason: str):
        self.index = index
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed range #{index} {token!r}: {reason}")


class DependencyError(ScriptcutError):
    """Required dependency missing or misconfigured."""

    def __init__(self, dependency: str, message: str, install_hint: str | None = None):
        self.dependency = dependency
        self.message = message
        self.install_hint = install_hint
        super().__init__(f"{dependency}: {message}")
