"""Compute namespace: text and structured-data transformations.

Every operation follows the same flow:

    params.to_request() -> HttpClient.post() -> output check -> typed wrapper

Validation happens inside ``to_request`` so an invalid parameter set raises
``ValidationError`` before anything touches the network.
"""

from __future__ import annotations

import json
import logging

from rck.compute.params import (
    AnalyzeParams,
    AutoParams,
    GenerateTextParams,
    LearnFromExamplesParams,
    StructuredTransformParams,
    TranslateParams,
)
from rck.compute.resolver import (
    ImageOutput,
    StructuredOutput,
    TextOutput,
    resolve_output,
)
from rck.compute.response import ComputeResponse
from rck.core.config import DEFAULT_ENDPOINT
from rck.core.errors import NetworkError
from rck.core.http_client import HttpClient, execute
from rck.core.types import ComputeConfig, UnifiedAPIRequest, UnifiedAPIResponse
from rck.image.response import ImageResponse

logger = logging.getLogger(__name__)


class Kernel:
    """Compute operations bound to one transport.

    Args:
        client: Shared HttpClient
        endpoint: Unified endpoint path
    """

    def __init__(self, client: HttpClient, endpoint: str = DEFAULT_ENDPOINT) -> None:
        self._client = client
        self._endpoint = endpoint

    def _execute(self, request: UnifiedAPIRequest, timeout: int | None) -> UnifiedAPIResponse:
        return execute(self._client, request, self._endpoint, timeout).envelope

    def structured_transform(
        self,
        params: StructuredTransformParams,
        config: ComputeConfig | None = None,
        *,
        timeout: int | None = None,
    ) -> ComputeResponse:
        """Transform input into data matching ``params.output_data_class`` (standard engine)."""
        request = params.to_request(config)
        return ComputeResponse(self._execute(request, timeout))

    def learn_from_examples(
        self,
        params: LearnFromExamplesParams,
        config: ComputeConfig | None = None,
        *,
        timeout: int | None = None,
    ) -> ComputeResponse:
        """Apply the transformation demonstrated by ``params.examples`` (attractor engine)."""
        request = params.to_request(config)
        return ComputeResponse(self._execute(request, timeout))

    def generate_text(
        self,
        params: GenerateTextParams,
        config: ComputeConfig | None = None,
        *,
        timeout: int | None = None,
    ) -> str:
        """Generate free-form text (pure engine).

        Returns:
            The string output, or the JSON text of a non-string output
        """
        request = params.to_request(config)
        output = self._execute(request, timeout).output
        if isinstance(output, str):
            return output
        return json.dumps(output, ensure_ascii=False)

    def analyze(
        self,
        params: AnalyzeParams,
        config: ComputeConfig | None = None,
        *,
        timeout: int | None = None,
    ) -> ComputeResponse:
        """Structured transform using a predefined schema named by ``output_format``."""
        return self.structured_transform(params.to_transform(), config, timeout=timeout)

    def translate(
        self,
        params: TranslateParams,
        config: ComputeConfig | None = None,
        *,
        timeout: int | None = None,
    ) -> ComputeResponse:
        """Translate text with the fixed ``translation`` schema."""
        return self.structured_transform(params.to_transform(), config, timeout=timeout)

    def auto(
        self, params: AutoParams, *, timeout: int | None = None
    ) -> str | ImageResponse | ComputeResponse:
        """Let the server pick the engine and wrap whatever comes back.

        Returns:
            str for text output, ImageResponse for a list of data URLs,
            ComputeResponse for an object

        Raises:
            NetworkError: If the output is none of the above
        """
        envelope = self._execute(params.to_request(), timeout)
        resolved = resolve_output(envelope.output)
        logger.debug(f"Auto output resolved as {type(resolved).__name__}")
        if isinstance(resolved, TextOutput):
            return resolved.text
        if isinstance(resolved, ImageOutput):
            return ImageResponse.from_data_urls(resolved.data_urls, envelope)
        if isinstance(resolved, StructuredOutput):
            return ComputeResponse(envelope)
        raise NetworkError(
            "failed to determine output type",
            TypeError(f"unexpected output of type {type(envelope.output).__name__}"),
        )
