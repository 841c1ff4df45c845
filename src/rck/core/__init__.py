"""Core plumbing shared by the compute and image namespaces.

- **RCKConfig / config**: transport defaults loaded with Pydantic Settings
  (RCK_ prefix)
- **Wire types**: the unified request/response envelope and engine enums
- **Errors**: ValidationError, NetworkError, APIError, AuthenticationError
- **HttpClient**: one authenticated JSON POST per call, mapped onto the errors
"""

from rck.core.config import RCKConfig, config
from rck.core.errors import (
    APIError,
    AuthenticationError,
    NetworkError,
    RCKError,
    ValidationError,
)
from rck.core.http_client import HttpClient, TransportResponse, execute
from rck.core.types import (
    APIConfig,
    APIExample,
    APIInput,
    APIPipeline,
    APIProgram,
    ComputeConfig,
    Engine,
    Scale,
    Speed,
    UnifiedAPIRequest,
    UnifiedAPIResponse,
)

__all__ = [
    "APIConfig",
    "APIError",
    "APIExample",
    "APIInput",
    "APIPipeline",
    "APIProgram",
    "AuthenticationError",
    "ComputeConfig",
    "Engine",
    "HttpClient",
    "NetworkError",
    "RCKConfig",
    "RCKError",
    "Scale",
    "Speed",
    "TransportResponse",
    "UnifiedAPIRequest",
    "UnifiedAPIResponse",
    "ValidationError",
    "config",
    "execute",
]
