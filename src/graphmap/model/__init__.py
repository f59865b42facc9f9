"""Mapping rule models."""

from .mappings import (
    BaseMapping,
    ConstantMapping,
    Mapping,
    MappingKind,
    PropertyMapping,
    SourceMapping,
)
from .type_map import TypeMap

__all__ = [
    "BaseMapping",
    "ConstantMapping",
    "Mapping",
    "MappingKind",
    "PropertyMapping",
    "SourceMapping",
    "TypeMap",
]
