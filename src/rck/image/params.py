"""Parameters for image generation."""

from dataclasses import dataclass

from rck.core.errors import ValidationError
from rck.core.types import (
    APIConfig,
    APIInput,
    APIPipeline,
    APIProgram,
    Engine,
    UnifiedAPIRequest,
)


@dataclass
class GenerateParams:
    """Prompt plus the three required style fields."""

    input: str = ""
    frame_composition: str = ""
    lighting: str = ""
    style: str = ""

    def validate(self) -> None:
        """Check every field is present, in declaration order.

        Raises:
            ValidationError: Naming the first missing field
        """
        for field_name in ("input", "frame_composition", "lighting", "style"):
            if not getattr(self, field_name):
                raise ValidationError(field_name, "is required")

    def to_request(self) -> UnifiedAPIRequest:
        self.validate()
        return UnifiedAPIRequest(
            config=APIConfig(engine=Engine.IMAGE),
            program=APIProgram(
                input=APIInput(input=self.input),
                pipeline=APIPipeline(
                    frame_composition=self.frame_composition,
                    lighting=self.lighting,
                    style=self.style,
                ),
            ),
        )
