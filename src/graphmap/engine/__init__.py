"""The mapping engine and its per-call state."""

from .context import MappingContext, ProvisionRequest
from .converter_cache import ConverterCache
from .engine import MappingEngine
from .errors import ErrorCollector

__all__ = [
    "ConverterCache",
    "ErrorCollector",
    "MappingContext",
    "MappingEngine",
    "ProvisionRequest",
]
