"""Data-URL decoding and the image response wrapper.

Generated images arrive as RFC 2397 data URLs
(``data:<mime>;base64,<payload>``). Entries that do not match that pattern,
or whose payload is not valid base64, are skipped rather than failing the
whole batch. ``ImageResponse.count`` therefore reflects only the images that
decoded, and ``ImageResponse.skipped`` tells callers how many were dropped.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from PIL import Image

from rck.core.types import UnifiedAPIResponse

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"data:(.+?);base64,(.*)")

DEFAULT_EXTENSION = "png"


@dataclass(frozen=True)
class ImageInfo:
    """One decoded image.

    Attributes:
        image_data: Raw image bytes
        index: Position of the data URL in the response output (0-based)
        mime_type: MIME type declared by the data URL
        data_url: The original data URL
    """

    image_data: bytes
    index: int
    mime_type: str
    data_url: str

    @property
    def file_extension(self) -> str:
        """Extension derived from the MIME subtype (``jpeg`` becomes ``jpg``)."""
        parts = self.mime_type.split("/")
        if len(parts) == 2:
            subtype = parts[1]
            return "jpg" if subtype == "jpeg" else subtype
        return DEFAULT_EXTENSION

    def to_pil(self) -> Image.Image:
        """Open the image bytes with Pillow."""
        return Image.open(io.BytesIO(self.image_data))


def decode_data_url(data_url: str, index: int = 0) -> ImageInfo | None:
    """Decode a single data URL, or return None if it is malformed."""
    match = DATA_URL_PATTERN.fullmatch(data_url)
    if match is None:
        return None
    mime_type, payload = match.groups()
    try:
        image_data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return None
    return ImageInfo(image_data=image_data, index=index, mime_type=mime_type, data_url=data_url)


def decode_data_urls(data_urls: Iterable[str]) -> tuple[list[ImageInfo], int]:
    """Decode a sequence of data URLs.

    Returns:
        Tuple of (decoded images in input order, number of skipped entries)
    """
    images: list[ImageInfo] = []
    skipped = 0
    for i, data_url in enumerate(data_urls):
        info = decode_data_url(data_url, i) if isinstance(data_url, str) else None
        if info is None:
            logger.debug(f"Skipping entry {i}: not a decodable base64 data URL")
            skipped += 1
            continue
        images.append(info)
    return images, skipped


@dataclass(frozen=True)
class ImageResponse:
    """Images returned by an image generation (or auto) request."""

    images: tuple[ImageInfo, ...]
    skipped: int
    raw_data: UnifiedAPIResponse

    @classmethod
    def from_data_urls(cls, data_urls: Iterable[str], raw_data: UnifiedAPIResponse) -> ImageResponse:
        images, skipped = decode_data_urls(data_urls)
        if skipped:
            logger.info(f"Decoded {len(images)} image(s), skipped {skipped} invalid data URL(s)")
        return cls(images=tuple(images), skipped=skipped, raw_data=raw_data)

    @property
    def count(self) -> int:
        return len(self.images)

    @property
    def success(self) -> bool:
        """True when at least one image decoded."""
        return self.count > 0

    def first_image(self) -> ImageInfo | None:
        return self.images[0] if self.images else None
