"""TypeMap and converter repositories."""

from .converter_store import InMemoryConverterStore
from .type_map_store import InMemoryTypeMapStore, TypeMapFactory, empty_type_map

__all__ = [
    "InMemoryConverterStore",
    "InMemoryTypeMapStore",
    "TypeMapFactory",
    "empty_type_map",
]
