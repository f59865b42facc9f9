"""Immutable (source type, destination type) key."""

from dataclasses import dataclass
from typing import Any

from .types import type_name


@dataclass(frozen=True)
class TypePair:
    """
    Identifies a source/destination type pair.

    Used as the key of the TypeMap store and of the converter cache. Types may
    be plain classes or typing aliases such as ``list[Item]``.
    """

    source_type: Any
    destination_type: Any

    @classmethod
    def of(cls, source_type: Any, destination_type: Any) -> "TypePair":
        return cls(source_type, destination_type)

    def __str__(self) -> str:
        return f"{type_name(self.source_type)} -> {type_name(self.destination_type)}"
