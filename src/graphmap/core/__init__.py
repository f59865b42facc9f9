"""Core building blocks shared by the engine, the stores and the models."""

from .type_pair import TypePair
from .types import default_value, is_iterable, type_name, unwrap_optional

__all__ = [
    "TypePair",
    "default_value",
    "is_iterable",
    "type_name",
    "unwrap_optional",
]
