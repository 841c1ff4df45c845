"""Error taxonomy for the RCK SDK.

Three categories cover every failure a call can produce:

- ``ValidationError``: caller input problem, raised before any network call
- ``NetworkError``: transport failure, timeout, or a response that breaks the
  wire contract
- ``APIError``: failure signalled by the server, including authentication
  (``AuthenticationError``) and a success status with no output

All of them derive from ``RCKError`` so callers can catch the whole family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rck.core.types import UnifiedAPIResponse


class RCKError(Exception):
    """Base class for all SDK errors."""


class ValidationError(RCKError):
    """Invalid caller-supplied parameter.

    Attributes:
        field: Name of the offending parameter
        message: Human-readable reason
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"validation error on field '{field}': {message}")


class NetworkError(RCKError):
    """Client-side transport or deserialization failure."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        if cause is not None:
            text = f"network error: {message} (caused by: {cause})"
        else:
            text = f"network error: {message}"
        super().__init__(text)


class APIError(RCKError):
    """Error signalled by the RCK API.

    Attributes:
        status_code: HTTP status code of the response
        response_data: Parsed (or best-effort raw) response envelope, if any
    """

    def __init__(
        self, status_code: int, response_data: UnifiedAPIResponse | None = None
    ) -> None:
        self.status_code = status_code
        self.response_data = response_data
        if response_data is not None and response_data.error:
            text = (
                f"API error (status {status_code}): "
                f"{response_data.error} - {response_data.details or ''}"
            )
        else:
            text = f"API error with status code {status_code}"
        super().__init__(text)


class AuthenticationError(APIError):
    """The API rejected the key (HTTP 401 or 403)."""

    def __init__(self, status_code: int = 401) -> None:
        super().__init__(status_code)

    def __str__(self) -> str:
        return f"authentication failed (status {self.status_code}): check your API key"
