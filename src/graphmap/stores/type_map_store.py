"""Repository of TypeMaps keyed by type pair."""

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from graphmap.core.type_pair import TypePair
from graphmap.exceptions import ConfigurationError
from graphmap.model.type_map import TypeMap

if TYPE_CHECKING:
    from graphmap.engine.engine import MappingEngine

logger = logging.getLogger(__name__)

TypeMapFactory = Callable[[Any, Any, "MappingEngine | None"], TypeMap]


def empty_type_map(
    source_type: Any, destination_type: Any, engine: "MappingEngine | None" = None
) -> TypeMap:
    """Default factory: a TypeMap with no field-level rules."""
    return TypeMap(source_type=source_type, destination_type=destination_type)


class InMemoryTypeMapStore:
    """
    Thread-safe registry of TypeMaps.

    Lookups read the backing dict directly; inserts are serialised by a lock.
    ``get_or_create`` runs the factory outside the lock so that concurrent
    callers may build redundant TypeMaps for the same pair; the first one
    stored wins and every caller receives it.
    """

    def __init__(self, factory: TypeMapFactory | None = None):
        """
        Initialize the store.

        Args:
            factory: Builds a TypeMap for a pair seen for the first time.
                Defaults to an empty TypeMap.
        """
        self._type_maps: dict[TypePair, TypeMap] = {}
        self._lock = threading.Lock()
        self._factory = factory or empty_type_map
        self._logger = logger.getChild(self.__class__.__name__)

    def get(self, source_type: Any, destination_type: Any) -> TypeMap | None:
        return self._type_maps.get(TypePair.of(source_type, destination_type))

    def register(self, type_map: TypeMap) -> TypeMap:
        """
        Register a TypeMap for its type pair.

        Raises:
            ConfigurationError: If a TypeMap already exists for the pair
        """
        pair = type_map.type_pair
        with self._lock:
            if pair in self._type_maps:
                raise ConfigurationError(f"A TypeMap already exists for {pair}")
            self._type_maps[pair] = type_map

        self._logger.info(f"Registered TypeMap for {pair}")
        return type_map

    def get_or_create(
        self,
        source_type: Any,
        destination_type: Any,
        engine: "MappingEngine | None" = None,
    ) -> TypeMap:
        pair = TypePair.of(source_type, destination_type)
        existing = self._type_maps.get(pair)
        if existing is not None:
            return existing

        created = self._factory(source_type, destination_type, engine)
        with self._lock:
            stored = self._type_maps.setdefault(pair, created)

        if stored is created:
            self._logger.debug(f"Created TypeMap for {pair}")
        else:
            self._logger.debug(f"Discarded concurrently created TypeMap for {pair}")
        return stored

    def get_type_maps(self) -> list[TypeMap]:
        """Return a snapshot of all registered TypeMaps."""
        return list(self._type_maps.values())

    def clear(self) -> None:
        with self._lock:
            self._type_maps.clear()
        self._logger.info("Cleared all TypeMap registrations")

    def __len__(self) -> int:
        return len(self._type_maps)

    def __contains__(self, pair: TypePair) -> bool:
        return pair in self._type_maps
