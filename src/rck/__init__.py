"""RCK SDK - client library for the RCK compute and image generation API."""

__version__ = "1.0.0"

from rck.client import RCKClient
from rck.compute import (
    AnalyzeParams,
    AutoParams,
    ComputeResponse,
    Example,
    GenerateTextParams,
    LearnFromExamplesParams,
    StructuredTransformParams,
    TranslateParams,
    get_available_schemas,
    get_predefined_schema,
    get_predefined_schema_as_map,
    has_schema,
)
from rck.core import (
    APIError,
    AuthenticationError,
    ComputeConfig,
    Engine,
    NetworkError,
    RCKConfig,
    RCKError,
    Scale,
    Speed,
    ValidationError,
)
from rck.image import GenerateParams, ImageInfo, ImageResponse

__all__ = [
    "APIError",
    "AnalyzeParams",
    "AuthenticationError",
    "AutoParams",
    "ComputeConfig",
    "ComputeResponse",
    "Engine",
    "Example",
    "GenerateParams",
    "GenerateTextParams",
    "ImageInfo",
    "ImageResponse",
    "LearnFromExamplesParams",
    "NetworkError",
    "RCKClient",
    "RCKConfig",
    "RCKError",
    "Scale",
    "Speed",
    "StructuredTransformParams",
    "TranslateParams",
    "ValidationError",
    "get_available_schemas",
    "get_predefined_schema",
    "get_predefined_schema_as_map",
    "has_schema",
]
