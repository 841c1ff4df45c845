"""Shared pytest fixtures for RCK SDK tests."""

import base64
import io
import json
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from rck.client import RCKClient
from rck.core.config import RCKConfig
from rck.core.http_client import HttpClient


def _make_response(status_code: int = 200, body=None, text: str | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body)
    response.text = text
    response.content = text.encode("utf-8")
    return response


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> RCKConfig:
    """Configuration pointing at a fake host, ignoring any local .env file."""
    return RCKConfig(
        base_url="https://rck.test",
        endpoint="/calculs",
        timeout_ms=5000,
        _env_file=None,
    )


@pytest.fixture
def http_client(test_config: RCKConfig) -> HttpClient:
    """Transport bound to the test configuration."""
    return HttpClient("test-key", test_config.base_url, test_config.timeout_ms)


@pytest.fixture
def client(test_config: RCKConfig) -> RCKClient:
    """Client facade bound to the test configuration."""
    return RCKClient("test-key", config=test_config)


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for ``requests.Response`` stand-ins.

    ``make_response(status, body)`` serves ``body`` as JSON bytes;
    ``make_response(status, text="...")`` serves the raw text instead.
    """
    return _make_response


@pytest.fixture
def mock_post() -> Generator[MagicMock, None, None]:
    """Patch ``requests.post`` inside the transport so no network is used."""
    with patch("rck.core.http_client.requests.post") as post:
        post.return_value = _make_response(200, {"output": {"result": "ok"}})
        yield post


@pytest.fixture
def sent_payload(mock_post: MagicMock) -> Callable[[], dict]:
    """Return the JSON body passed to the most recent ``requests.post`` call."""
    return lambda: mock_post.call_args.kwargs["json"]


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny real PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (2, 2), color=(255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_data_url(png_bytes: bytes) -> str:
    """The PNG fixture encoded as a data URL."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
