"""Rule-driven mapping between live object graphs."""

from .config import InstanceFactoryRegistry, MappingConfiguration
from .core import TypePair
from .engine import MappingContext, MappingEngine
from .exceptions import (
    CircularMappingError,
    ConfigurationError,
    ConvertingError,
    GraphMapError,
    InstantiatingDestinationError,
    MappingError,
    MappingIssue,
    UnexpectedMappingError,
    UnsupportedMappingError,
)
from .mapper import ObjectMapper
from .model import (
    ConstantMapping,
    Mapping,
    MappingKind,
    PropertyMapping,
    SourceMapping,
    TypeMap,
)
from .properties import destination_path, source_path

__all__ = [
    "CircularMappingError",
    "ConfigurationError",
    "ConstantMapping",
    "ConvertingError",
    "GraphMapError",
    "InstanceFactoryRegistry",
    "InstantiatingDestinationError",
    "Mapping",
    "MappingConfiguration",
    "MappingContext",
    "MappingEngine",
    "MappingError",
    "MappingIssue",
    "MappingKind",
    "ObjectMapper",
    "PropertyMapping",
    "SourceMapping",
    "TypeMap",
    "TypePair",
    "UnexpectedMappingError",
    "UnsupportedMappingError",
    "destination_path",
    "source_path",
]
