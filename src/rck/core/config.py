"""Configuration management for the RCK SDK.

Transport defaults are managed with Pydantic Settings. Values are loaded from
environment variables with the RCK_ prefix, allowing the endpoint and timeout
to be changed without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (RCK_* prefix)
2. .env file in the working directory
3. Default values defined in RCKConfig

Example .env file:
    RCK_BASE_URL=https://rck-aehhddpisa.us-west-1.fcapp.run
    RCK_TIMEOUT_MS=30000

The API key is deliberately absent from this class. It is always passed to
``RCKClient`` by the caller.

Usage Example
-------------
    from rck.core.config import config

    print(config.base_url)
    print(config.timeout_ms)
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://rck-aehhddpisa.us-west-1.fcapp.run"
DEFAULT_ENDPOINT = "/calculs"
DEFAULT_TIMEOUT_MS = 60_000


class RCKConfig(BaseSettings):
    """Transport defaults for RCK clients.

    Attributes
    ----------
    base_url : str
        Root URL of the RCK API (no trailing slash required)
    endpoint : str
        Path of the unified compute endpoint
    timeout_ms : int
        Default per-request timeout in milliseconds

    Examples
    --------
        >>> custom = RCKConfig(base_url="http://localhost:9000", timeout_ms=5000)
        >>> custom.timeout_seconds
        5.0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RCK_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the RCK API",
    )
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Path of the unified compute endpoint",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        description="Default request timeout in milliseconds",
        ge=1,
    )

    @property
    def timeout_seconds(self) -> float:
        """Default timeout converted to seconds for ``requests``."""
        return self.timeout_ms / 1000


# Global configuration instance
config = RCKConfig()
