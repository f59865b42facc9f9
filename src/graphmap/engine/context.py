"""
Mapping Context

Per-invocation state passed through the engine, and through converters and
providers that need to recurse. Contexts of one top-level call form a
parent-linked chain and share a single error collector, cycle guard and
intermediate-destination cache.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from graphmap.core.types import type_name

from .errors import ErrorCollector

if TYPE_CHECKING:
    from graphmap.model.mappings import BaseMapping
    from graphmap.model.type_map import TypeMap

    from .engine import MappingEngine


@dataclass(frozen=True)
class ProvisionRequest:
    """Request for an intermediate destination instance of ``requested_type``."""

    requested_type: Any


@dataclass
class MappingContext:
    """
    State of one mapping invocation.

    ``destination`` may start as None and be filled in by a provider or by the
    instance factories. ``type_map`` is inherited from the parent until the
    frame binds its own.
    """

    source: Any
    source_type: Any
    destination: Any
    destination_type: Any
    engine: "MappingEngine"
    parent: "MappingContext | None" = None
    type_map: "TypeMap | None" = None
    mapping: "BaseMapping | None" = None
    errors: ErrorCollector = field(default_factory=ErrorCollector)
    # Destination types currently under construction, shared per root call
    _mapping_stack: list[Any] = field(default_factory=list, repr=False)
    # (destination id, path prefix) -> (destination, materialised object)
    destination_cache: dict[tuple[int, tuple[Any, ...]], tuple[Any, Any]] = field(
        default_factory=dict, repr=False
    )

    @classmethod
    def root(
        cls,
        source: Any,
        source_type: Any,
        destination: Any,
        destination_type: Any,
        engine: "MappingEngine",
    ) -> "MappingContext":
        """Create the context of a top-level call."""
        return cls(source, source_type, destination, destination_type, engine)

    def create_child(
        self,
        source: Any,
        source_type: Any,
        destination_type: Any,
        destination: Any = None,
        mapping: "BaseMapping | None" = None,
    ) -> "MappingContext":
        """
        Create a nested context sharing this call's per-root state.

        Converters use this to map nested values through
        ``context.engine.map_context(child)``.
        """
        return MappingContext(
            source=source,
            source_type=source_type,
            destination=destination,
            destination_type=destination_type,
            engine=self.engine,
            parent=self,
            type_map=self.type_map,
            mapping=mapping,
            errors=self.errors,
            _mapping_stack=self._mapping_stack,
            destination_cache=self.destination_cache,
        )

    @property
    def requested_type(self) -> Any:
        """The destination type, so a context can serve as a provision request."""
        return self.destination_type

    @property
    def root_context(self) -> "MappingContext":
        context = self
        while context.parent is not None:
            context = context.parent
        return context

    # --------------------------------------------------------------------- #
    # Cycle guard
    # --------------------------------------------------------------------- #

    def is_mapping(self, destination_type: Any) -> bool:
        """Whether ``destination_type`` is under construction higher up the chain."""
        return destination_type in self._mapping_stack

    def enter(self, destination_type: Any) -> None:
        self._mapping_stack.append(destination_type)

    def exit(self, destination_type: Any) -> None:
        self._mapping_stack.remove(destination_type)

    @property
    def currently_mapping(self) -> tuple[Any, ...]:
        return tuple(self._mapping_stack)

    def __str__(self) -> str:
        return (
            f"MappingContext[{type_name(self.source_type)} -> "
            f"{type_name(self.destination_type)}]"
        )
