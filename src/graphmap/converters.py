"""
Built-in conditional converters.

Each converter reports the type pairs it supports through ``supports`` and
converts values given a MappingContext. Container converters map their
elements by re-entering the engine, so element types with a TypeMap are
mapped rule by rule.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, get_args, get_origin

from .core.types import is_iterable, unwrap_optional

logger = logging.getLogger(__name__)


def _origin(tp: Any) -> Any:
    return get_origin(tp) or tp


def _is_class(tp: Any) -> bool:
    return isinstance(tp, type) and get_origin(tp) is None


class CollectionConverter:
    """Converts any non-mapping iterable into a list, tuple, set or frozenset."""

    _TARGETS = (list, tuple, set, frozenset)

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        source_origin = _origin(source_type)
        if not is_iterable(source_type) or issubclass(source_origin, Mapping):
            return False
        return _origin(destination_type) in self._TARGETS

    @staticmethod
    def _element_type(destination_type: Any) -> Any:
        args = get_args(destination_type)
        if not args:
            return Any
        # tuple[X, ...] and list[X] alike
        return unwrap_optional(args[0])

    def convert(self, context: Any) -> Any:
        if context.source is None:
            return None

        element_type = self._element_type(context.destination_type)
        elements = []
        for element in context.source:
            if element is None or element_type is Any:
                elements.append(element)
                continue
            child = context.create_child(element, type(element), element_type)
            elements.append(context.engine.map_context(child))
        return _origin(context.destination_type)(elements)

    def __repr__(self) -> str:
        return "CollectionConverter()"


class DictConverter:
    """Converts a mapping into a ``dict``, mapping values to the declared value type."""

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        source_origin = _origin(source_type)
        return (
            isinstance(source_origin, type)
            and issubclass(source_origin, Mapping)
            and _origin(destination_type) is dict
        )

    def convert(self, context: Any) -> Any:
        if context.source is None:
            return None

        args = get_args(context.destination_type)
        value_type = unwrap_optional(args[1]) if len(args) == 2 else Any
        result = {}
        for key, value in context.source.items():
            if value is None or value_type is Any:
                result[key] = value
                continue
            child = context.create_child(value, type(value), value_type)
            result[key] = context.engine.map_context(child)
        return result

    def __repr__(self) -> str:
        return "DictConverter()"


class AssignableConverter:
    """
    Passes the source through when it is already a destination instance.

    ``bool`` is not treated as an ``int`` here; NumberConverter turns it into
    a plain 0 or 1.
    """

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        if not (_is_class(source_type) and _is_class(destination_type)):
            return False
        if is_iterable(destination_type):
            return False
        if issubclass(source_type, bool) and not issubclass(destination_type, bool):
            return destination_type is object
        return issubclass(source_type, destination_type)

    def convert(self, context: Any) -> Any:
        return context.source

    def __repr__(self) -> str:
        return "AssignableConverter()"


class NumberConverter:
    """Converts between numeric types and from numeric strings."""

    _TARGETS = (int, float, Decimal)
    _SOURCES = (int, float, Decimal, str, bool)

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        return (
            destination_type in self._TARGETS
            and _is_class(source_type)
            and issubclass(source_type, self._SOURCES)
        )

    def convert(self, context: Any) -> Any:
        if context.source is None:
            return None
        if context.destination_type is Decimal and isinstance(context.source, float):
            return Decimal(str(context.source))
        return context.destination_type(context.source)

    def __repr__(self) -> str:
        return "NumberConverter()"


class ToStringConverter:
    """Converts any value to ``str``."""

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        return destination_type is str

    def convert(self, context: Any) -> Any:
        if context.source is None:
            return None
        return str(context.source)

    def __repr__(self) -> str:
        return "ToStringConverter()"


def default_converters() -> list[Any]:
    """Built-in converters in lookup order."""
    return [
        CollectionConverter(),
        DictConverter(),
        AssignableConverter(),
        NumberConverter(),
        ToStringConverter(),
    ]
