from __future__ import annotations

import json
from typing import Any, Optional


class FreeloClientError(Exception):
    """Base error for client failures."""


class FreeloHTTPError(FreeloClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Any = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.response_json = response_json
        self.response_text = response_text

    @property
    def body(self) -> Any:
        """Upstream error body as received: parsed JSON if possible, else raw text."""
        if self.response_json is not None:
            return self.response_json
        return self.response_text or ""


class FreeloUnavailableError(FreeloClientError):
    """No response was received from upstream (connect/read/timeout failures)."""


class FreeloParseError(FreeloClientError):
    pass


class ToolExecutionError(FreeloClientError):
    """
    A Freelo failure surfaced to an MCP client.

    The message is a JSON object with ``error``, ``message`` and ``details``
    (the upstream error body, when there was one).
    """

    def __init__(self, cause: FreeloClientError):
        self.details = cause.body if isinstance(cause, FreeloHTTPError) else None
        self.status_code = getattr(cause, "status_code", None)
        super().__init__(
            json.dumps(
                {
                    "error": "Tool execution failed",
                    "message": str(cause),
                    "details": self.details,
                },
                default=str,
            )
        )


class InvalidInputError(ValueError):
    """Caller input rejected before any upstream call."""

    def __init__(self, message: str, *, error: str = "Validation failed"):
        super().__init__(message)
        self.error = error
        self.message = message


class MissingCredentialsError(ValueError):
    """Raised when Freelo credentials are required but missing."""


class InvalidCredentialsError(ValueError):
    """Raised when supplied credentials cannot be decoded."""


__all__ = [
    "FreeloClientError",
    "FreeloHTTPError",
    "FreeloUnavailableError",
    "FreeloParseError",
    "ToolExecutionError",
    "InvalidInputError",
    "MissingCredentialsError",
    "InvalidCredentialsError",
]
