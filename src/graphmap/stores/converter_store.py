"""Ordered repository of conditional converters."""

import logging
import threading
from typing import Any

from graphmap.converters import default_converters
from graphmap.core.protocols import ConditionalConverter

logger = logging.getLogger(__name__)


class InMemoryConverterStore:
    """
    Registry of converters queried in order.

    ``get_first_supported`` returns the first converter whose ``supports``
    accepts the type pair. Registration replaces the tuple of converters
    wholesale so that readers always iterate a consistent snapshot.
    """

    def __init__(self, *converters: ConditionalConverter):
        self._converters: tuple[ConditionalConverter, ...] = tuple(converters)
        self._lock = threading.Lock()
        self._logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def default(cls) -> "InMemoryConverterStore":
        """Store preloaded with the built-in converters."""
        return cls(*default_converters())

    def add_converter(
        self, converter: ConditionalConverter, index: int = 0
    ) -> None:
        """
        Register a converter.

        Args:
            converter: The converter to add
            index: Position in lookup order; by default new converters take
                precedence over the ones already registered

        Raises:
            ValueError: If the converter does not implement supports/convert
        """
        if not callable(getattr(converter, "supports", None)) or not callable(
            getattr(converter, "convert", None)
        ):
            raise ValueError(
                f"Converter {converter!r} must define 'supports' and 'convert'"
            )

        with self._lock:
            converters = list(self._converters)
            converters.insert(index, converter)
            self._converters = tuple(converters)

        self._logger.info(f"Registered converter '{converter.__class__.__name__}'")

    def get_first_supported(
        self, source_type: Any, destination_type: Any
    ) -> ConditionalConverter | None:
        for converter in self._converters:
            if converter.supports(source_type, destination_type):
                return converter
        return None

    def get_converters(self) -> list[ConditionalConverter]:
        return list(self._converters)

    def __len__(self) -> int:
        return len(self._converters)

    def __iter__(self):
        return iter(self._converters)
