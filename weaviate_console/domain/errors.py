from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """Raised when a request is missing a required parameter or carries an unusable one."""


class RemoteError(RuntimeError):
    """Raised when a call to the Weaviate instance fails.

    The message is the human-readable detail shown to the caller; ``path`` is
    the API path that was requested.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class RemoteRequestFailed(RemoteError):
    """Raised when Weaviate answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None, path: str = "") -> None:
        super().__init__(message, path)
        self.status_code = status_code


class InvalidResponseBody(RemoteError):
    """Raised when Weaviate answers with a success status but the body is not JSON."""
