"""Wire types for the RCK unified endpoint.

Every request is a single ``UnifiedAPIRequest`` envelope::

    {
        "config": {"engine": ..., "speed": ..., "scale": ..., "temperature": ...},
        "program": {
            "input": {"input": "...", "resource": [...]},
            "Pipeline": {"FunctionLogic": "...", "OutputDataClass": "...", ...}
        }
    }

and every response is a ``UnifiedAPIResponse`` (``output``, ``error``,
``details``). Field aliases carry the exact key casing used on the wire;
absent values are dropped when the envelope is serialised.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Engine(str, Enum):
    """Server-side processing mode."""

    STANDARD = "standard"
    ATTRACTOR = "attractor"
    IMAGE = "image"
    PURE = "pure"
    AUTO = "auto"


class Speed(str, Enum):
    """Optimisation strategy."""

    FAST = "fast"
    BALANCED = "balanced"
    QUALITY = "quality"


class Scale(str, Enum):
    """Resource allocation size."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, use_enum_values=True)


class ComputeConfig(_WireModel):
    """Caller-tunable execution settings (everything in ``config`` but the engine)."""

    speed: Speed | None = None
    scale: Scale | None = None
    temperature: float | None = None


class APIConfig(ComputeConfig):
    """Complete ``config`` object sent to the API."""

    engine: Engine

    @classmethod
    def for_engine(cls, engine: Engine, compute_config: ComputeConfig | None = None) -> APIConfig:
        settings = compute_config.model_dump(exclude_none=True) if compute_config else {}
        return cls(engine=engine, **settings)


class APIInput(_WireModel):
    input: str
    resource: list[dict[str, str]] | None = None


class APIExample(_WireModel):
    """Input/output pair for the attractor engine.

    ``output`` is always a JSON-encoded string.
    """

    input: str
    output: str


class APIPipeline(_WireModel):
    function_name: str | None = Field(default=None, alias="FunctionName")
    output_data_class: str | None = Field(default=None, alias="OutputDataClass")
    function_logic: str | None = Field(default=None, alias="FunctionLogic")
    custom_logic: dict[str, str] | None = Field(default=None, alias="CustomLogic")
    examples: list[APIExample] | None = Field(default=None, alias="Examples")
    frame_composition: str | None = None
    lighting: str | None = None
    style: str | None = None


class APIProgram(_WireModel):
    input: APIInput
    pipeline: APIPipeline = Field(alias="Pipeline")


class UnifiedAPIRequest(_WireModel):
    config: APIConfig | None = None
    program: APIProgram

    def to_payload(self) -> dict[str, Any]:
        """Serialise to the JSON-ready dict posted to the endpoint."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class UnifiedAPIResponse(_WireModel):
    """Response envelope. The meaning of ``output`` is inferred client-side."""

    model_config = ConfigDict(frozen=True, extra="allow")

    output: Any = None
    error: str | None = None
    details: str | None = None
