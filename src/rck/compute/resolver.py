"""Disambiguation of the polymorphic ``output`` field.

The server does not declare what ``output`` holds, so the client probes its
structure in a fixed order and the first match wins:

1. a single string          -> ``TextOutput``
2. a list of strings        -> ``ImageOutput`` (data URLs)
3. a keyed object           -> ``StructuredOutput``
4. anything else            -> ``MalformedOutput``

``resolve_output`` is pure: it never decodes images or raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class TextOutput:
    text: str


@dataclass(frozen=True)
class ImageOutput:
    data_urls: tuple[str, ...]


@dataclass(frozen=True)
class StructuredOutput:
    data: dict[str, Any]


@dataclass(frozen=True)
class MalformedOutput:
    value: Any


ResolvedOutput = Union[TextOutput, ImageOutput, StructuredOutput, MalformedOutput]


def resolve_output(output: Any) -> ResolvedOutput:
    """Classify a parsed JSON ``output`` value."""
    if isinstance(output, str):
        return TextOutput(output)
    if isinstance(output, list) and all(isinstance(item, str) for item in output):
        return ImageOutput(tuple(output))
    if isinstance(output, dict):
        return StructuredOutput(output)
    return MalformedOutput(output)
