"""ObjectMapper: the entry point wiring stores, configuration and engine."""

import logging
from typing import Any

from .config import MappingConfiguration
from .core.protocols import ConditionalConverter
from .engine.engine import MappingEngine
from .exceptions import ConfigurationError
from .model.mappings import Mapping
from .model.type_map import TypeMap
from .stores.converter_store import InMemoryConverterStore
from .stores.type_map_store import InMemoryTypeMapStore

logger = logging.getLogger(__name__)


class ObjectMapper:
    """
    Maps objects between type graphs.

    Example::

        mapper = ObjectMapper()
        mapper.create_type_map(
            Order,
            OrderDto,
            mappings=[
                PropertyMapping(
                    source_path=source_path(Order, "customer.name"),
                    destination_path=destination_path(OrderDto, "customer_name"),
                )
            ],
        )
        dto = mapper.map(order, OrderDto)
    """

    def __init__(
        self,
        configuration: MappingConfiguration | None = None,
        type_map_store: InMemoryTypeMapStore | None = None,
        converter_store: InMemoryConverterStore | None = None,
    ):
        self._configuration = configuration or MappingConfiguration()
        self._type_map_store = type_map_store or InMemoryTypeMapStore()
        self._converter_store = converter_store or InMemoryConverterStore.default()
        self._engine = MappingEngine(
            self._type_map_store, self._converter_store, self._configuration
        )
        self._logger = logger.getChild(self.__class__.__name__)

    @property
    def engine(self) -> MappingEngine:
        return self._engine

    @property
    def configuration(self) -> MappingConfiguration:
        return self._configuration

    # --------------------------------------------------------------------- #
    # Configuration
    # --------------------------------------------------------------------- #

    def create_type_map(
        self,
        source_type: Any,
        destination_type: Any,
        *,
        mappings: list[Mapping] | None = None,
        condition: Any = None,
        converter: Any = None,
        provider: Any = None,
    ) -> TypeMap:
        """
        Create and register the TypeMap for a type pair.

        Raises:
            ConfigurationError: If a TypeMap already exists for the pair
            pydantic.ValidationError: If a rule or collaborator is malformed
        """
        type_map = TypeMap(
            source_type=source_type,
            destination_type=destination_type,
            mappings=list(mappings or []),
            condition=condition,
            converter=converter,
            provider=provider,
        )
        return self._type_map_store.register(type_map)

    def get_type_map(self, source_type: Any, destination_type: Any) -> TypeMap | None:
        return self._type_map_store.get(source_type, destination_type)

    def get_type_maps(self) -> list[TypeMap]:
        return self._type_map_store.get_type_maps()

    def add_converter(self, converter: ConditionalConverter) -> None:
        """Register a converter ahead of the ones already known."""
        self._converter_store.add_converter(converter)
        # Cached hits predate the new converter
        self._engine.converter_cache.clear()

    # --------------------------------------------------------------------- #
    # Mapping
    # --------------------------------------------------------------------- #

    def map(
        self, source: Any, destination_type: Any, source_type: Any = None
    ) -> Any:
        """
        Map ``source`` to a new instance of ``destination_type``.

        Raises:
            ConfigurationError: If source or destination_type is None
            MappingError: If any failure was recorded while mapping
        """
        if source is None:
            raise ConfigurationError("source cannot be None")
        if destination_type is None:
            raise ConfigurationError("destination_type cannot be None")

        return self._engine.map(
            source, source_type or type(source), None, destination_type
        )

    def map_into(
        self,
        source: Any,
        destination: Any,
        source_type: Any = None,
        destination_type: Any = None,
    ) -> Any:
        """
        Map ``source`` onto an existing ``destination``.

        Raises:
            ConfigurationError: If source or destination is None
            MappingError: If any failure was recorded while mapping
        """
        if source is None:
            raise ConfigurationError("source cannot be None")
        if destination is None:
            raise ConfigurationError("destination cannot be None")

        return self._engine.map(
            source,
            source_type or type(source),
            destination,
            destination_type or type(destination),
        )
