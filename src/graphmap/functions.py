"""Adapters turning plain callables into converters, conditions and providers."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FunctionConverter:
    """Converter backed by ``func(context)``, optionally bound to one type pair."""

    func: Callable[[Any], Any]
    source_type: Any = None
    destination_type: Any = None

    def supports(self, source_type: Any, destination_type: Any) -> bool:
        return (self.source_type is None or self.source_type == source_type) and (
            self.destination_type is None or self.destination_type == destination_type
        )

    def convert(self, context: Any) -> Any:
        return self.func(context)

    def __repr__(self) -> str:
        return f"FunctionConverter({getattr(self.func, '__name__', self.func)!s})"


@dataclass(frozen=True)
class FunctionCondition:
    """Condition backed by ``predicate(context)``."""

    predicate: Callable[[Any], bool]

    def applies(self, context: Any) -> bool:
        return bool(self.predicate(context))


@dataclass(frozen=True)
class FunctionProvider:
    """Provider backed by ``factory(request)``."""

    factory: Callable[[Any], Any]

    def get(self, request: Any) -> Any:
        return self.factory(request)


def converter(
    func: Callable[[Any], Any],
    source_type: Any = None,
    destination_type: Any = None,
) -> FunctionConverter:
    """
    Wrap a callable as a converter.

    Args:
        func: Receives the MappingContext, returns the destination value
        source_type: When set, only this source type is supported
        destination_type: When set, only this destination type is supported
    """
    return FunctionConverter(func, source_type, destination_type)


def condition(predicate: Callable[[Any], bool]) -> FunctionCondition:
    return FunctionCondition(predicate)


def provider(factory: Callable[[Any], Any]) -> FunctionProvider:
    return FunctionProvider(factory)


is_null = condition(lambda context: context.source is None)
is_not_null = condition(lambda context: context.source is not None)
