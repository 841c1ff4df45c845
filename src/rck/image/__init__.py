"""Image namespace: generation, data-URL decoding and saving."""

from rck.image.generator import Generator
from rck.image.params import GenerateParams
from rck.image.response import (
    ImageInfo,
    ImageResponse,
    decode_data_url,
    decode_data_urls,
)
from rck.image.storage import save_images

__all__ = [
    "GenerateParams",
    "Generator",
    "ImageInfo",
    "ImageResponse",
    "decode_data_url",
    "decode_data_urls",
    "save_images",
]
