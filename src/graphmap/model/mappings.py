"""
mappings.py – field-level mapping rules
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
A Mapping is one configured rule of a TypeMap: where the value comes from and
the destination path it is written to. The three variants are told apart by
their ``kind`` discriminator.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphmap.core.types import unwrap_optional

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class MappingKind(str, Enum):
    """Where a Mapping takes its source value from."""

    PROPERTY = "property"
    CONSTANT = "constant"
    SOURCE = "source"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _require_method(value: Any, method: str, role: str) -> Any:
    if value is not None and not callable(getattr(value, method, None)):
        raise ValueError(f"{role} must define a callable '{method}' method")
    return value


# ---------------------------------------------------------------------------
# Mapping variants
# ---------------------------------------------------------------------------


class BaseMapping(BaseModel):
    """Fields shared by every Mapping variant."""

    destination_path: tuple[Any, ...] = Field(
        ...,
        min_length=1,
        description="Mutator chain; intermediate steps are materialised on write.",
    )
    condition: Optional[Any] = Field(
        None, description="Condition gating this mapping (see `Condition`)."
    )
    converter: Optional[Any] = Field(
        None, description="Converter used instead of recursive mapping."
    )
    provider: Optional[Any] = Field(
        None, description="Provider given the first chance to build the value."
    )
    skipped: bool = Field(
        False,
        description="Skip this mapping. Only honoured when no condition is set.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    # ----- validators --------------------------------------------------------
    @field_validator("destination_path")
    @classmethod
    def _mutators(cls, v: tuple[Any, ...]) -> tuple[Any, ...]:
        for step in v:
            _require_method(step, "set_value", "Destination path step")
        return v

    @field_validator("condition")
    @classmethod
    def _condition(cls, v: Any) -> Any:
        return _require_method(v, "applies", "Condition")

    @field_validator("converter")
    @classmethod
    def _converter(cls, v: Any) -> Any:
        return _require_method(v, "convert", "Converter")

    @field_validator("provider")
    @classmethod
    def _provider(cls, v: Any) -> Any:
        return _require_method(v, "get", "Provider")

    # ----- derived properties ------------------------------------------------
    @property
    def last_destination_property(self) -> Any:
        return self.destination_path[-1]

    @property
    def destination_type(self) -> Any:
        """Type of the final destination slot, Optional unwrapped."""
        return unwrap_optional(getattr(self.last_destination_property, "type", Any))


class PropertyMapping(BaseMapping):
    """Reads its value by walking ``source_path`` on the current source."""

    kind: Literal[MappingKind.PROPERTY] = MappingKind.PROPERTY
    source_path: tuple[Any, ...] = Field(
        ..., min_length=1, description="Accessor chain walked on the source."
    )

    @field_validator("source_path")
    @classmethod
    def _accessors(cls, v: tuple[Any, ...]) -> tuple[Any, ...]:
        for step in v:
            _require_method(step, "get_value", "Source path step")
        return v

    @property
    def last_source_property(self) -> Any:
        return self.source_path[-1]


class ConstantMapping(BaseMapping):
    """Writes a configured literal."""

    kind: Literal[MappingKind.CONSTANT] = MappingKind.CONSTANT
    constant: Any = Field(None, description="The literal written to the destination.")


class SourceMapping(BaseMapping):
    """Maps the current source object itself, viewed as ``source_type``."""

    kind: Literal[MappingKind.SOURCE] = MappingKind.SOURCE
    source_type: Any = Field(..., description="Type the source is mapped as.")


Mapping = Annotated[
    Union[PropertyMapping, ConstantMapping, SourceMapping],
    Field(discriminator="kind"),
]
