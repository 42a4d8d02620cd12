"""SDK exception hierarchy."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from streamchat_sdk.models.errors import APIError


class ChatHTTPError(Exception):
    """Raised when the chat API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        error: APIError | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        code = error.code if error else "UNKNOWN"
        msg = error.message if error else f"HTTP {status}"
        super().__init__(f"[{status}] {code}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> ChatHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: APIError | None = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "message" in body:
            try:
                error = APIError.model_validate(body)
            except ValidationError:
                error = None
        return cls(status=response.status_code, error=error, response=response)

    @property
    def code(self) -> int | None:
        return self.error.code if self.error else None

    @property
    def retry_after(self) -> float | None:
        """Unix timestamp at which the rate-limit window resets, if sent."""
        if self.response is None:
            return None
        reset = self.response.headers.get("x-ratelimit-reset")
        return float(reset) if reset else None


class ChatNetworkError(Exception):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ChatValidationError(ValueError):
    """Raised before any request is sent when its parameters conflict."""
