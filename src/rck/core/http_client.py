"""HTTP transport for the RCK API.

Processing flow:
    1. Serialise the ``UnifiedAPIRequest`` envelope to JSON.
    2. POST it with the API key, content type and SDK user agent.
    3. Read the body under a whole-request deadline.
    4. Parse the body into a ``UnifiedAPIResponse``.
    5. Map HTTP error statuses onto the SDK error taxonomy.

Deadline:
    ``requests`` timeouts only bound each connect and each socket read, so a
    server trickling bytes could hold a call open indefinitely. The timeout
    here is a deadline for the whole call: the connect and header phase use it
    as their socket timeout, and a watchdog shuts the socket down if the body
    is still being read when the deadline passes.

Retry behavior:
    No retry loop is implemented. Each call is attempted once; retrying is the
    caller's decision.

Concurrency:
    Every call goes through a fresh ``requests.post`` so no connection state or
    buffers are shared between callers. The instance itself only holds
    read-only settings.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
import time
from contextlib import suppress
from dataclasses import dataclass

import requests
from pydantic import ValidationError as PydanticValidationError

from rck import __version__
from rck.core.errors import APIError, AuthenticationError, NetworkError
from rck.core.types import UnifiedAPIRequest, UnifiedAPIResponse

logger = logging.getLogger(__name__)

USER_AGENT = f"RCK-PYTHON-SDK/{__version__}"


@dataclass(frozen=True)
class TransportResponse:
    """Successful (status < 400) response plus the status it arrived with."""

    status_code: int
    envelope: UnifiedAPIResponse


def _abort(response: requests.Response) -> None:
    """Unblock a pending body read by shutting the underlying socket down."""
    raw = response.raw
    connection = getattr(raw, "connection", None) or getattr(raw, "_connection", None)
    sock = getattr(connection, "sock", None)
    if sock is None:
        response.close()
        return
    # The socket may already be closed by the reading thread.
    with suppress(OSError):
        sock.shutdown(socket.SHUT_RDWR)


def _read_body(response: requests.Response, deadline: float) -> bytes:
    """Read the full body, raising ``NetworkError`` once ``deadline`` passes."""
    expired = threading.Event()

    def on_deadline() -> None:
        expired.set()
        _abort(response)

    remaining = deadline - time.monotonic()
    if remaining <= 0:
        response.close()
        raise NetworkError("request timeout")

    watchdog = threading.Timer(remaining, on_deadline)
    watchdog.daemon = True
    watchdog.start()
    try:
        content = response.content
    except requests.exceptions.RequestException as e:
        if expired.is_set():
            raise NetworkError("request timeout", e) from e
        raise NetworkError("failed to read response body", e) from e
    finally:
        watchdog.cancel()
        response.close()

    if expired.is_set():
        raise NetworkError("request timeout")
    return content


class HttpClient:
    """Authenticated JSON POST client.

    Args:
        api_key: Opaque key sent verbatim in the ``Authorization`` header
        base_url: API root URL
        timeout_ms: Default timeout in milliseconds
    """

    def __init__(self, api_key: str, base_url: str, timeout_ms: int) -> None:
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": self._api_key,
            "User-Agent": USER_AGENT,
        }

    def post(
        self,
        endpoint: str,
        payload: UnifiedAPIRequest,
        timeout: int | None = None,
    ) -> TransportResponse:
        """Send one envelope to ``endpoint``.

        Args:
            endpoint: Path appended to the base URL
            payload: Request envelope
            timeout: Per-call deadline in milliseconds (defaults to the client's)

        Returns:
            TransportResponse for any status below 400

        Raises:
            NetworkError: Connection failure, deadline expiry, or unparsable 2xx body
            AuthenticationError: HTTP 401 or 403
            APIError: Any other HTTP status >= 400
        """
        url = f"{self.base_url}{endpoint}"
        timeout_ms = timeout if timeout and timeout > 0 else self.timeout_ms
        deadline = time.monotonic() + timeout_ms / 1000
        body = payload.to_payload()

        logger.debug(f"POST {url} (timeout={timeout_ms}ms)")
        try:
            response = requests.post(
                url,
                json=body,
                headers=self._headers(),
                timeout=timeout_ms / 1000,
                stream=True,
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError("request timeout", e) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError("network request failed", e) from e

        status = response.status_code
        logger.debug(f"POST {url} -> {status}")

        if status in (401, 403):
            response.close()
            logger.warning(f"Authentication rejected with status {status}")
            raise AuthenticationError(status)

        content = _read_body(response, deadline)

        try:
            envelope = UnifiedAPIResponse.model_validate(json.loads(content))
        except (ValueError, PydanticValidationError) as e:
            if status >= 400:
                logger.warning(f"API returned status {status} with a non-JSON body")
                raw_text = content.decode("utf-8", errors="replace")
                raise APIError(
                    status,
                    UnifiedAPIResponse(error="Invalid response format", details=raw_text),
                ) from e
            raise NetworkError("failed to unmarshal response JSON", e) from e

        if status >= 400:
            logger.warning(f"API returned status {status}: {envelope.error}")
            raise APIError(status, envelope)

        return TransportResponse(status_code=status, envelope=envelope)


def execute(
    client: HttpClient,
    request: UnifiedAPIRequest,
    endpoint: str,
    timeout: int | None = None,
) -> TransportResponse:
    """Post ``request`` and return the result, rejecting a missing output.

    A success status whose ``output`` is absent or null is reported as an
    ``APIError`` carrying that status and the envelope.
    """
    result = client.post(endpoint, request, timeout=timeout)
    if result.envelope.output is None:
        logger.warning(f"Status {result.status_code} response carried no output")
        raise APIError(result.status_code, result.envelope)
    return result
