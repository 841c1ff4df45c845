"""Parameter sets for compute operations.

Each dataclass validates itself and knows how to assemble its request
envelope. ``to_request`` always validates first, so an invalid parameter set
never produces a payload.

Engine policy
-------------
The engine is chosen client-side per operation:

========================  ===========
Operation                 Engine
========================  ===========
structured transform      standard
learn from examples       attractor
generate text             pure
analyze / translate       standard (via structured transform)
auto                      (omitted, server decides)
========================  ===========
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from rck.compute.schemas import TRANSLATION_SCHEMA, get_predefined_schema, has_schema
from rck.core.errors import ValidationError
from rck.core.types import (
    APIConfig,
    APIExample,
    APIInput,
    APIPipeline,
    APIProgram,
    ComputeConfig,
    Engine,
    UnifiedAPIRequest,
)


# Either a ready JSON Schema string or a mapping serialised on the way out.
OutputDataClass = Union[str, Mapping[str, Any]]


def normalize_output_class(value: Any, field_name: str = "output_data_class") -> str:
    """Normalise an output schema to the string form sent on the wire.

    Strings pass through untouched. Mappings are serialised to compact JSON
    with their key order preserved.

    Raises:
        ValidationError: If the value is neither a string nor a JSON-serialisable mapping
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        try:
            return json.dumps(dict(value), ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise ValidationError(field_name, f"is not JSON serialisable: {e}") from e
    raise ValidationError(field_name, "must be a JSON Schema string or a mapping")


@dataclass
class Example:
    """One demonstration pair for learn-from-examples requests."""

    input: str
    output: Any


def encode_examples(examples: list[Example]) -> list[APIExample]:
    """Encode examples for the wire; every output becomes a JSON string."""
    encoded = []
    for i, example in enumerate(examples):
        try:
            output = json.dumps(example.output, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"examples[{i}].output", f"is not JSON serialisable: {e}") from e
        encoded.append(APIExample(input=example.input, output=output))
    return encoded


def _build_request(
    input_text: str,
    pipeline: APIPipeline,
    resource: list[dict[str, str]] | None = None,
    config: APIConfig | None = None,
) -> UnifiedAPIRequest:
    program = APIProgram(
        input=APIInput(input=input_text, resource=resource or None),
        pipeline=pipeline,
    )
    return UnifiedAPIRequest(config=config, program=program)


def _require(value: Any, field_name: str, message: str = "is required") -> None:
    if not value:
        raise ValidationError(field_name, message)


@dataclass
class StructuredTransformParams:
    """Transform ``input`` into data shaped by ``output_data_class``."""

    input: str = ""
    function_logic: str = ""
    output_data_class: OutputDataClass | None = None
    custom_logic: dict[str, str] = field(default_factory=dict)
    resource: list[dict[str, str]] = field(default_factory=list)

    def validate(self) -> None:
        _require(self.input, "input")
        _require(self.function_logic, "function_logic")
        if self.output_data_class is None or self.output_data_class == "":
            raise ValidationError("output_data_class", "is required")

    def to_request(self, compute_config: ComputeConfig | None = None) -> UnifiedAPIRequest:
        self.validate()
        pipeline = APIPipeline(
            output_data_class=normalize_output_class(self.output_data_class),
            function_logic=self.function_logic,
            custom_logic=self.custom_logic or None,
        )
        return _build_request(
            self.input,
            pipeline,
            self.resource,
            APIConfig.for_engine(Engine.STANDARD, compute_config),
        )


@dataclass
class AnalyzeParams:
    """Structured transform whose schema comes from the predefined registry."""

    input: str = ""
    function_logic: str = ""
    output_format: str = ""
    custom_logic: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        _require(self.input, "input")
        _require(self.function_logic, "function_logic")
        _require(self.output_format, "output_format")
        if not has_schema(self.output_format):
            raise ValidationError("output_format", f"unknown schema name '{self.output_format}'")

    def to_transform(self) -> StructuredTransformParams:
        self.validate()
        return StructuredTransformParams(
            input=self.input,
            function_logic=self.function_logic,
            output_data_class=get_predefined_schema(self.output_format),
            custom_logic=dict(self.custom_logic),
        )


@dataclass
class TranslateParams:
    """Translation into ``target_language`` using the fixed translation schema."""

    input: str = ""
    target_language: str = ""
    include_cultural_notes: bool = False

    def validate(self) -> None:
        _require(self.input, "input")
        _require(self.target_language, "target_language")

    def to_transform(self) -> StructuredTransformParams:
        self.validate()
        function_logic = f"Translate text to {self.target_language}"
        if self.include_cultural_notes:
            function_logic += " and provide cultural background notes"
        return StructuredTransformParams(
            input=self.input,
            function_logic=function_logic,
            output_data_class=get_predefined_schema(TRANSLATION_SCHEMA),
            custom_logic={
                "target_language": self.target_language,
                "include_cultural_notes": str(self.include_cultural_notes).lower(),
            },
        )


@dataclass
class LearnFromExamplesParams:
    """Few-shot transform handled by the attractor engine."""

    input: str = ""
    examples: list[Example] = field(default_factory=list)
    custom_logic: dict[str, str] = field(default_factory=dict)
    resource: list[dict[str, str]] = field(default_factory=list)

    def validate(self) -> None:
        _require(self.input, "input")
        _require(self.examples, "examples", "requires at least one example")

    def to_request(self, compute_config: ComputeConfig | None = None) -> UnifiedAPIRequest:
        self.validate()
        pipeline = APIPipeline(
            examples=encode_examples(self.examples),
            custom_logic=self.custom_logic or None,
        )
        return _build_request(
            self.input,
            pipeline,
            self.resource,
            APIConfig.for_engine(Engine.ATTRACTOR, compute_config),
        )


@dataclass
class GenerateTextParams:
    """Free-form text generation on the pure engine."""

    input: str = ""
    function_logic: str = ""
    custom_logic: dict[str, str] = field(default_factory=dict)
    resource: list[dict[str, str]] = field(default_factory=list)

    def validate(self) -> None:
        _require(self.input, "input")
        _require(self.function_logic, "function_logic")

    def to_request(self, compute_config: ComputeConfig | None = None) -> UnifiedAPIRequest:
        self.validate()
        pipeline = APIPipeline(
            function_logic=self.function_logic,
            custom_logic=self.custom_logic or None,
        )
        return _build_request(
            self.input,
            pipeline,
            self.resource,
            APIConfig.for_engine(Engine.PURE, compute_config),
        )


@dataclass
class AutoParams:
    """Request with no engine; the server infers it from the pipeline.

    At least one logic-defining field (``function_logic``, ``examples``,
    ``frame_composition``, ``lighting`` or ``style``) must be set.
    """

    input: str = ""
    resource: list[dict[str, str]] = field(default_factory=list)
    function_logic: str = ""
    output_data_class: OutputDataClass | None = None
    custom_logic: dict[str, str] = field(default_factory=dict)
    examples: list[Example] = field(default_factory=list)
    frame_composition: str = ""
    lighting: str = ""
    style: str = ""

    def validate(self) -> None:
        _require(self.input, "input")
        has_logic = any(
            (self.function_logic, self.examples, self.frame_composition, self.lighting, self.style)
        )
        if not has_logic:
            raise ValidationError(
                "logic",
                "at least one logic-defining property is required "
                "(function_logic, examples, or image parameters)",
            )

    def to_request(self) -> UnifiedAPIRequest:
        self.validate()
        output_data_class = None
        if self.output_data_class is not None and self.output_data_class != "":
            output_data_class = normalize_output_class(self.output_data_class)
        pipeline = APIPipeline(
            function_logic=self.function_logic or None,
            output_data_class=output_data_class,
            custom_logic=self.custom_logic or None,
            examples=encode_examples(self.examples) or None,
            frame_composition=self.frame_composition or None,
            lighting=self.lighting or None,
            style=self.style or None,
        )
        return _build_request(self.input, pipeline, self.resource)
