"""Image namespace: text-to-image generation on the image engine."""

from __future__ import annotations

import logging
from pathlib import Path

from rck.core.config import DEFAULT_ENDPOINT
from rck.core.errors import APIError
from rck.core.http_client import HttpClient, execute
from rck.image.params import GenerateParams
from rck.image.response import ImageResponse
from rck.image.storage import save_images

logger = logging.getLogger(__name__)


class Generator:
    """Image operations bound to one transport.

    Args:
        client: Shared HttpClient
        endpoint: Unified endpoint path
    """

    def __init__(self, client: HttpClient, endpoint: str = DEFAULT_ENDPOINT) -> None:
        self._client = client
        self._endpoint = endpoint

    def generate(self, params: GenerateParams, *, timeout: int | None = None) -> ImageResponse:
        """Generate images from a prompt and style fields.

        Raises:
            ValidationError: If a required field is missing
            APIError: If the output is not a list of strings
        """
        request = params.to_request()
        result = execute(self._client, request, self._endpoint, timeout)
        envelope = result.envelope

        output = envelope.output
        if not isinstance(output, list) or not all(isinstance(item, str) for item in output):
            logger.warning("Image output is not a list of data URLs")
            raise APIError(result.status_code, envelope)

        response = ImageResponse.from_data_urls(output, envelope)
        logger.info(f"Generated {response.count} image(s)")
        return response

    def save_images(
        self, image_response: ImageResponse, output_dir: str | Path, base_filename: str
    ) -> tuple[list[Path], list[Exception]]:
        """Save all images in ``image_response``; see ``rck.image.storage.save_images``."""
        return save_images(image_response, output_dir, base_filename)
