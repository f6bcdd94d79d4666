from __future__ import annotations


class CaptureCoreError(RuntimeError):
    """Base class for library-level capture errors."""

    code = "CAPTURE_ERROR"

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class SanitizationDepthError(CaptureCoreError):
    """Raised when a payload is nested deeper than the interpreter can traverse."""

    code = "DEPTH_EXCEEDED"

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Payload nesting exceeded the traversal limit ({limit} frames)",
            user_message="Event properties are nested too deeply to be sanitized.",
        )
        self.limit = limit


class ScriptLoadError(CaptureCoreError):
    """Raised (and handed to callbacks) when a remote script cannot be loaded."""

    code = "SCRIPT_LOAD_FAILED"

    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(f"Failed to load script {url}: {reason}")
        self.url = url
        self.status_code = status_code
