from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from graphmap.engine.context import MappingContext
    from graphmap.engine.engine import MappingEngine
    from graphmap.model.type_map import TypeMap


@runtime_checkable
class Accessor(Protocol):
    """Defines the contract for reading one property step off a source instance."""

    type: Any

    def get_value(self, instance: Any) -> Any:
        """
        Read the property from ``instance``.

        Args:
            instance: The object the property is read from

        Returns:
            The property value, or None when absent
        """
        ...


@runtime_checkable
class Mutator(Protocol):
    """Defines the contract for writing one property step onto a destination."""

    type: Any

    def set_value(self, instance: Any, value: Any) -> None:
        """Write ``value`` into the property on ``instance``."""
        ...


@runtime_checkable
class ProvisionRequest(Protocol):
    """A request for a destination instance of ``requested_type``."""

    @property
    def requested_type(self) -> Any: ...


@runtime_checkable
class Provider(Protocol):
    """Defines the contract for supplying destination instances."""

    def get(self, request: ProvisionRequest) -> Any:
        """
        Provide an instance for the request.

        Args:
            request: The provision request. For mapping-triggered requests this
                is the full MappingContext.

        Returns:
            The instance, or None to let the next provider (or the default
            instance factory) decide
        """
        ...


@runtime_checkable
class Condition(Protocol):
    """Defines the contract for gating a Mapping or a whole TypeMap."""

    def applies(self, context: "MappingContext") -> bool:
        """Return True if the gated mapping should run for ``context``."""
        ...


@runtime_checkable
class Converter(Protocol):
    """Defines the contract for converting a source value into a destination value."""

    def convert(self, context: "MappingContext") -> Any:
        """
        Convert ``context.source`` into a value of ``context.destination_type``.

        Converters that need to map nested values can build a child context
        with ``context.create_child(...)`` and hand it to
        ``context.engine.map_context``.
        """
        ...


@runtime_checkable
class ConditionalConverter(Converter, Protocol):
    """A converter that can tell which type pairs it handles."""

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        """
        Checks whether this converter can handle the given type pair.

        Args:
            source_type: Source type (e.g., ``int``)
            destination_type: Destination type (e.g., ``str``)

        Returns:
            True if the pair is supported, False otherwise.
        """
        ...


class TypeMapStore(Protocol):
    """Defines the contract of the TypeMap repository consumed by the engine."""

    def get(self, source_type: Any, destination_type: Any) -> "TypeMap | None":
        """Return the TypeMap registered for the pair, if any."""
        ...

    def get_or_create(
        self, source_type: Any, destination_type: Any, engine: "MappingEngine"
    ) -> "TypeMap":
        """
        Return the TypeMap for the pair, creating it if needed.

        Concurrent callers may race to create the TypeMap; all of them must
        receive the one that ended up stored.
        """
        ...


class ConverterStore(Protocol):
    """Defines the contract of the converter repository consumed by the engine."""

    def get_first_supported(
        self, source_type: Any, destination_type: Any
    ) -> ConditionalConverter | None:
        """Return the first converter supporting the pair, if any."""
        ...
