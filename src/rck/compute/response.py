"""Structured response wrapper for compute operations."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from pydantic import TypeAdapter

from rck.core.types import UnifiedAPIResponse

T = TypeVar("T")


@dataclass(frozen=True)
class ComputeResponse:
    """Immutable view over a compute response envelope.

    The output is kept as parsed JSON and decoded on demand, either as a plain
    mapping or into a caller-supplied shape (a pydantic model, a dataclass, a
    ``TypedDict`` or any type ``pydantic.TypeAdapter`` understands).

    Examples
    --------
        >>> class Analysis(BaseModel):
        ...     emotion: str
        ...     theme: str
        >>> analysis = response.decode(Analysis)
    """

    raw_data: UnifiedAPIResponse

    @property
    def raw(self) -> Any:
        """A copy of the ``output`` value exactly as received."""
        return copy.deepcopy(self.raw_data.output)

    @overload
    def decode(self) -> Any: ...

    @overload
    def decode(self, shape: type[T]) -> T: ...

    def decode(self, shape=None):
        """Decode the output, optionally validating it into ``shape``.

        Raises:
            pydantic.ValidationError: If the output does not fit ``shape``
        """
        data = copy.deepcopy(self.raw_data.output)
        if shape is None:
            return data
        return TypeAdapter(shape).validate_python(data)

    def as_map(self) -> dict[str, Any]:
        """Decode the output as a generic mapping."""
        return self.decode(dict[str, Any])
