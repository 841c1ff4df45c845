"""Compute namespace: structured transforms, few-shot learning, text generation."""

from rck.compute.kernel import Kernel
from rck.compute.params import (
    AnalyzeParams,
    AutoParams,
    Example,
    GenerateTextParams,
    LearnFromExamplesParams,
    StructuredTransformParams,
    TranslateParams,
    normalize_output_class,
)
from rck.compute.resolver import (
    ImageOutput,
    MalformedOutput,
    StructuredOutput,
    TextOutput,
    resolve_output,
)
from rck.compute.response import ComputeResponse
from rck.compute.schemas import (
    PREDEFINED_SCHEMAS,
    get_available_schemas,
    get_predefined_schema,
    get_predefined_schema_as_map,
    has_schema,
)

__all__ = [
    "AnalyzeParams",
    "AutoParams",
    "ComputeResponse",
    "Example",
    "GenerateTextParams",
    "ImageOutput",
    "Kernel",
    "LearnFromExamplesParams",
    "MalformedOutput",
    "PREDEFINED_SCHEMAS",
    "StructuredOutput",
    "StructuredTransformParams",
    "TextOutput",
    "TranslateParams",
    "get_available_schemas",
    "get_predefined_schema",
    "get_predefined_schema_as_map",
    "has_schema",
    "normalize_output_class",
    "resolve_output",
]
