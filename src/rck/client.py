"""RCK client facade.

``RCKClient`` wires one ``HttpClient`` into the two namespaces:

- ``client.compute``: ``rck.compute.Kernel`` (transforms, few-shot, text, auto)
- ``client.image``: ``rck.image.Generator`` (image generation and saving)

Usage Example
-------------
    from rck import RCKClient, StructuredTransformParams

    client = RCKClient("my-api-key", timeout=30_000)
    response = client.compute.structured_transform(
        StructuredTransformParams(
            input="The sun rose over the quiet harbour.",
            function_logic="Summarise the mood",
            output_data_class={"type": "object", "properties": {"mood": {"type": "string"}}},
        )
    )
    print(response.as_map())
"""

from __future__ import annotations

import logging

from rck.compute.kernel import Kernel
from rck.compute.params import StructuredTransformParams
from rck.core.config import RCKConfig
from rck.core.config import config as default_config
from rck.core.errors import ValidationError
from rck.core.http_client import HttpClient
from rck.image.generator import Generator

logger = logging.getLogger(__name__)


class RCKClient:
    """Entry point for the RCK API.

    Args:
        api_key: Required API key, sent as the ``Authorization`` header
        base_url: Override for the API root URL
        timeout: Override for the default request timeout, in milliseconds;
            values <= 0 fall back to the configured default
        config: Settings to take defaults from (the global ``config`` if omitted)

    Raises:
        ValidationError: If ``api_key`` is empty
    """

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: int | None = None,
        config: RCKConfig | None = None,
    ) -> None:
        if not api_key:
            raise ValidationError("api_key", "API key is required")

        settings = config or default_config
        resolved_url = base_url or settings.base_url
        resolved_timeout = timeout if timeout and timeout > 0 else settings.timeout_ms

        self._http = HttpClient(api_key, resolved_url, resolved_timeout)
        self.compute = Kernel(self._http, settings.endpoint)
        self.image = Generator(self._http, settings.endpoint)

        logger.debug(f"RCKClient ready (base_url={resolved_url}, timeout={resolved_timeout}ms)")

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> int:
        """Default request timeout in milliseconds."""
        return self._http.timeout_ms

    def test_connection(self, *, timeout: int | None = None) -> None:
        """Send a minimal structured transform to verify connectivity and the key.

        Raises:
            NetworkError, APIError, AuthenticationError: As raised by the call
        """
        params = StructuredTransformParams(
            input="test",
            function_logic="simple analysis",
            output_data_class={
                "type": "object",
                "properties": {"result": {"type": "string"}},
            },
        )
        self.compute.structured_transform(params, timeout=timeout)
