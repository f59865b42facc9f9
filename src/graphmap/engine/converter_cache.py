"""Memo of resolved converters per type pair."""

import logging
import threading
from typing import Any

from graphmap.core.protocols import ConditionalConverter, ConverterStore
from graphmap.core.type_pair import TypePair

logger = logging.getLogger(__name__)


class ConverterCache:
    """
    Caches the converter resolved for each type pair.

    Hits are kept for the lifetime of the cache. Misses are never cached, so a
    converter registered later is still found, at the cost of querying the
    store again on every lookup of an unsupported pair.
    """

    def __init__(self, store: ConverterStore):
        self._store = store
        self._cache: dict[TypePair, ConditionalConverter] = {}
        self._lock = threading.Lock()
        self._logger = logger.getChild(self.__class__.__name__)

    def get(
        self, source_type: Any, destination_type: Any
    ) -> ConditionalConverter | None:
        pair = TypePair.of(source_type, destination_type)
        converter = self._cache.get(pair)
        if converter is not None:
            return converter

        converter = self._store.get_first_supported(source_type, destination_type)
        if converter is None:
            return None

        with self._lock:
            converter = self._cache.setdefault(pair, converter)
        self._logger.debug(
            f"Cached converter '{converter.__class__.__name__}' for {pair}"
        )
        return converter

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, pair: TypePair) -> bool:
        return pair in self._cache
