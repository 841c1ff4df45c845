"""Predefined output schemas.

The registry is a read-only mapping built once at import time. It is never
mutated, so concurrent readers need no locking.
"""

import json
from types import MappingProxyType
from typing import Any

from rck.core.errors import ValidationError

_BASIC_ANALYSIS = """{
  "type": "object",
  "properties": {
    "emotion": { "type": "string", "description": "Emotion analysis result" },
    "theme": { "type": "string", "description": "Theme analysis" },
    "analysis": { "type": "string", "description": "Detailed analysis" }
  },
  "required": ["emotion", "theme", "analysis"]
}"""

_POEM_CREATION = """{
  "type": "object",
  "properties": {
    "poem": { "type": "string", "description": "Created poem" },
    "creative_process": { "type": "string", "description": "Creative process" },
    "style_notes": { "type": "string", "description": "Style notes" }
  },
  "required": ["poem"]
}"""

_SCENE_DESCRIPTION = """{
  "type": "object",
  "properties": {
    "scene_description": {
      "type": "object",
      "properties": {
        "main_subjects": { "type": "string", "description": "Main objects and spatial relationships" },
        "lighting": { "type": "string", "description": "Lighting conditions and atmosphere" },
        "composition": { "type": "string", "description": "Picture composition" },
        "style": { "type": "string", "description": "Artistic style" }
      },
      "required": ["main_subjects", "lighting", "composition", "style"]
    }
  },
  "required": ["scene_description"]
}"""

_TRANSLATION = """{
  "type": "object",
  "properties": {
    "translation": { "type": "string", "description": "Translation result" },
    "original_language": { "type": "string", "description": "Source language" },
    "target_language": { "type": "string", "description": "Target language" },
    "cultural_notes": { "type": "string", "description": "Cultural background notes" }
  },
  "required": ["translation"]
}"""

PREDEFINED_SCHEMAS: MappingProxyType[str, str] = MappingProxyType(
    {
        "basic_analysis": _BASIC_ANALYSIS,
        "poem_creation": _POEM_CREATION,
        "scene_description": _SCENE_DESCRIPTION,
        "translation": _TRANSLATION,
    }
)

TRANSLATION_SCHEMA = "translation"


def get_predefined_schema(schema_name: str) -> str | None:
    """Return the JSON Schema string registered under ``schema_name``, if any."""
    return PREDEFINED_SCHEMAS.get(schema_name)


def get_predefined_schema_as_map(schema_name: str) -> dict[str, Any]:
    """Return a freshly parsed copy of a predefined schema.

    Raises:
        ValidationError: If the schema name is unknown
    """
    schema = get_predefined_schema(schema_name)
    if schema is None:
        raise ValidationError("schema_name", "unknown schema name")
    return json.loads(schema)


def get_available_schemas() -> list[str]:
    return list(PREDEFINED_SCHEMAS)


def has_schema(schema_name: str) -> bool:
    return schema_name in PREDEFINED_SCHEMAS
