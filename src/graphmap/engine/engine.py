"""
MappingEngine

Runtime algorithm that maps a source object graph onto a destination graph:
applies TypeMaps, delegates to converters, recurses into nested values and
collects per-field failures into one error per top-level call.
"""

import logging
from collections.abc import Callable
from typing import Any

from graphmap.config import MappingConfiguration
from graphmap.core.protocols import Converter, ConverterStore, TypeMapStore
from graphmap.core.types import default_value, is_iterable, type_name, unwrap_optional
from graphmap.exceptions import ConfigurationError
from graphmap.model.mappings import BaseMapping, MappingKind
from graphmap.model.type_map import TypeMap

from .context import MappingContext, ProvisionRequest
from .converter_cache import ConverterCache
from .errors import ErrorCollector

logger = logging.getLogger(__name__)


def _resolved_type(declared: Any, value: Any) -> Any:
    if declared is None or declared is Any:
        return type(value)
    return unwrap_optional(declared)


def _property_source(context: MappingContext, mapping: Any) -> tuple[Any, Any]:
    source_type = _resolved_type(mapping.last_source_property.type, None)
    value = context.source
    for accessor in mapping.source_path:
        value = accessor.get_value(value)
        if value is None:
            return None, source_type
    return value, _resolved_type(mapping.last_source_property.type, value)


def _constant_source(context: MappingContext, mapping: Any) -> tuple[Any, Any]:
    return mapping.constant, type(mapping.constant)


def _source_source(context: MappingContext, mapping: Any) -> tuple[Any, Any]:
    return context.source, mapping.source_type


def _cached(context: MappingContext, owner: Any, prefix: tuple[Any, ...]) -> Any:
    entry = context.destination_cache.get((id(owner), prefix))
    # An id can be reused once its object is gone
    if entry is None or entry[0] is not owner:
        return None
    return entry[1]


def _cache(
    context: MappingContext, owner: Any, prefix: tuple[Any, ...], value: Any
) -> None:
    context.destination_cache[(id(owner), prefix)] = (owner, value)


# How each Mapping kind produces its (source value, source type)
_SOURCE_RESOLVERS: dict[
    MappingKind, Callable[[MappingContext, Any], tuple[Any, Any]]
] = {
    MappingKind.PROPERTY: _property_source,
    MappingKind.CONSTANT: _constant_source,
    MappingKind.SOURCE: _source_source,
}


class MappingEngine:
    """
    Maps source instances onto destination instances.

    One engine is shared by all callers. Only the TypeMap store and the
    converter cache outlive a call; every other piece of state lives in the
    MappingContext chain of that call.
    """

    def __init__(
        self,
        type_map_store: TypeMapStore,
        converter_store: ConverterStore,
        configuration: MappingConfiguration | None = None,
    ):
        self._type_map_store = type_map_store
        self._converter_cache = ConverterCache(converter_store)
        self._configuration = configuration or MappingConfiguration()
        self._logger = logger.getChild(self.__class__.__name__)

    @property
    def configuration(self) -> MappingConfiguration:
        return self._configuration

    @property
    def converter_cache(self) -> ConverterCache:
        return self._converter_cache

    # --------------------------------------------------------------------- #
    # Entry points
    # --------------------------------------------------------------------- #

    def map(
        self,
        source: Any,
        source_type: Any,
        destination: Any,
        destination_type: Any,
    ) -> Any:
        """
        Map ``source`` onto ``destination`` (or a new ``destination_type``).

        Args:
            source: The source instance
            source_type: Type the source is mapped as
            destination: Existing destination instance, or None to create one
            destination_type: Type to map to

        Returns:
            The populated destination, or None if nothing could be produced

        Raises:
            ConfigurationError: On misuse or misconfiguration, immediately
            MappingError: If any failure was recorded during the call
        """
        context = MappingContext.root(
            source, source_type, destination, destination_type, self
        )
        guarded = not is_iterable(destination_type)
        if guarded:
            context.enter(destination_type)

        self._logger.debug(
            f"Mapping {type_name(source_type)} to {type_name(destination_type)}"
        )
        result = None
        try:
            result = self._map_initial(context)
        except ConfigurationError:
            raise
        except Exception as e:
            context.errors.unexpected(source_type, destination_type, e)
        finally:
            if guarded:
                context.exit(destination_type)

        if context.errors.has_errors():
            self._logger.warning(
                f"Mapping {type_name(source_type)} to {type_name(destination_type)} "
                f"recorded {len(context.errors)} error(s)"
            )
        context.errors.raise_if_errors()
        return result

    def _map_initial(self, context: MappingContext) -> Any:
        """Apply a registered TypeMap, else a converter, else a new TypeMap."""
        type_map = self._type_map_store.get(
            context.source_type, context.destination_type
        )
        if type_map is not None:
            return self.apply_type_map(context, type_map)

        converter = self.converter_for(context.source_type, context.destination_type)
        if converter is not None:
            return self._convert(context, converter)

        # Another caller may have created the TypeMap in the meantime
        type_map = self._type_map_store.get_or_create(
            context.source_type, context.destination_type, self
        )
        return self.apply_type_map(context, type_map)

    def map_context(self, context: MappingContext) -> Any:
        """
        Recursive entry point for nested values and re-entrant converters.

        Returns:
            The mapped destination value, or None when the branch failed
        """
        source_type = context.source_type
        destination_type = context.destination_type
        guarded = not is_iterable(destination_type)
        if guarded:
            if context.is_mapping(destination_type):
                self._logger.debug(
                    f"Circular mapping of {type_name(destination_type)} "
                    f"via {type_name(source_type)}"
                )
                context.errors.circular_mapping(source_type, destination_type)
                return None
            context.enter(destination_type)

        try:
            type_map = self._type_map_store.get(source_type, destination_type)
            if type_map is not None:
                return self.apply_type_map(context, type_map)

            converter = self.converter_for(source_type, destination_type)
            if converter is not None:
                return self._convert(context, converter)

            if context.source is not None and context.destination is None:
                context.errors.unsupported_mapping(source_type, destination_type)
                return None
            # Nothing applies: keep whatever the destination already holds
            return context.destination
        finally:
            if guarded:
                context.exit(destination_type)

    # --------------------------------------------------------------------- #
    # TypeMap and per-mapping application
    # --------------------------------------------------------------------- #

    def apply_type_map(self, context: MappingContext, type_map: TypeMap) -> Any:
        context.type_map = type_map
        if context.destination is None and self.create_destination(context) is None:
            return None

        if type_map.condition is not None and not type_map.condition.applies(context):
            self._logger.debug(f"Condition of {type_map} not satisfied, skipping")
            return context.destination

        if type_map.converter is not None:
            return self._convert(context, type_map.converter)

        for mapping in type_map.mappings:
            self._apply_mapping(context, mapping)

        return context.destination

    def _apply_mapping(self, context: MappingContext, mapping: BaseMapping) -> None:
        condition = mapping.condition
        if condition is None and mapping.skipped:
            return

        source, source_type = _SOURCE_RESOLVERS[mapping.kind](context, mapping)
        property_context = context.create_child(
            source, source_type, mapping.destination_type, mapping=mapping
        )

        # With a condition present, the condition decides even over `skipped`
        if condition is not None and not condition.applies(property_context):
            return

        self._provide_destination(property_context)

        destination_value = None
        if source is not None:
            if mapping.converter is not None:
                destination_value = self._convert(property_context, mapping.converter)
            else:
                destination_value = self.map_context(property_context)

        self._set_destination_value(context, mapping, destination_value)

    def _set_destination_value(
        self, context: MappingContext, mapping: BaseMapping, value: Any
    ) -> None:
        """
        Write ``value`` through the mapping's destination path.

        Intermediate objects are materialised once per path prefix and
        destination instance, and reused by every mapping of the call that
        shares that prefix.
        """
        path = mapping.destination_path
        owners = [context.destination]

        # Resolve the whole chain before touching the destination graph
        for index, mutator in enumerate(path[:-1]):
            prefix = path[: index + 1]
            intermediate = _cached(context, owners[-1], prefix)
            if intermediate is None:
                intermediate = self._materialize(mutator.type, context.errors)
                if intermediate is None:
                    self._logger.debug(
                        f"Could not materialise {mutator}, skipping the write"
                    )
                    return
                _cache(context, owners[-1], prefix, intermediate)
            owners.append(intermediate)

        for mutator, owner, intermediate in zip(path, owners, owners[1:]):
            mutator.set_value(owner, intermediate)

        last = path[-1]
        _cache(context, owners[-1], path, value)
        if value is None:
            value = default_value(last.type)
        last.set_value(owners[-1], value)

    # --------------------------------------------------------------------- #
    # Converters
    # --------------------------------------------------------------------- #

    def _convert(self, context: MappingContext, converter: Converter) -> Any:
        try:
            return converter.convert(context)
        except ConfigurationError:
            raise
        except Exception as e:
            context.errors.converting(
                converter, context.source_type, context.destination_type, e
            )
            return None

    def converter_for(self, source_type: Any, destination_type: Any) -> Any:
        """Resolve the converter for a type pair through the shared cache."""
        return self._converter_cache.get(source_type, destination_type)

    # --------------------------------------------------------------------- #
    # Destination instantiation
    # --------------------------------------------------------------------- #

    def _provide_destination(self, context: MappingContext) -> Any:
        """Let the mapping, TypeMap or global provider build the destination."""
        provider = None
        if context.mapping is not None:
            provider = context.mapping.provider
        if provider is None and context.type_map is not None:
            provider = context.type_map.provider
        if provider is None:
            provider = self._configuration.provider
        if provider is None:
            return None

        destination = provider.get(context)
        context.destination = destination
        return destination

    def create_destination(self, context: MappingContext) -> Any:
        """
        Create the destination instance of ``context``.

        Providers are tried first; the instance factories are the fallback.
        A construction failure is recorded and yields None.
        """
        destination = self._provide_destination(context)
        if destination is not None:
            return destination

        destination = self._instantiate(context.destination_type, context.errors)
        context.destination = destination
        return destination

    def _materialize(self, destination_type: Any, errors: ErrorCollector) -> Any:
        provider = self._configuration.provider
        if provider is not None:
            intermediate = provider.get(
                ProvisionRequest(unwrap_optional(destination_type))
            )
            if intermediate is not None:
                return intermediate
        return self._instantiate(destination_type, errors)

    def _instantiate(self, destination_type: Any, errors: ErrorCollector) -> Any:
        try:
            return self._configuration.instance_factories.create(destination_type)
        except Exception as e:
            errors.instantiating_destination(destination_type, e)
            return None
