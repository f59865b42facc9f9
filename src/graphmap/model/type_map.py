"""TypeMap: the ordered rules for one source/destination type pair."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphmap.core.type_pair import TypePair

from .mappings import Mapping, _require_method


class TypeMap(BaseModel):
    """
    Mapping rules for one (source type, destination type) pair.

    The whole-object ``condition``, ``converter`` and ``provider`` apply to the
    pair as a unit. ``mappings`` are applied in order; collaborators may append
    to them while configuring, the engine only reads them.
    """

    source_type: Any = Field(..., description="Type mapped from.")
    destination_type: Any = Field(..., description="Type mapped to.")
    condition: Optional[Any] = Field(
        None, description="Gates all per-field processing of this TypeMap."
    )
    converter: Optional[Any] = Field(
        None, description="Converts the whole object instead of per-field rules."
    )
    provider: Optional[Any] = Field(
        None, description="Supplies destination instances for this pair."
    )
    mappings: list[Mapping] = Field(
        default_factory=list, description="Field-level rules, in application order."
    )

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    # ----- validators --------------------------------------------------------
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

    # ----- API ---------------------------------------------------------------
    @property
    def type_pair(self) -> TypePair:
        return TypePair.of(self.source_type, self.destination_type)

    def add_mapping(self, mapping: Mapping) -> "TypeMap":
        """Append a rule; returns self so calls can be chained."""
        self.mappings.append(mapping)
        return self

    def __str__(self) -> str:
        return f"TypeMap[{self.type_pair}]"
