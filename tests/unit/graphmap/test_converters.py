"""Unit tests for the built-in converters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pytest

from graphmap.converters import (
    AssignableConverter,
    CollectionConverter,
    DictConverter,
    NumberConverter,
    ToStringConverter,
)
from graphmap.engine.context import MappingContext
from graphmap.engine.engine import MappingEngine
from graphmap.model.type_map import TypeMap
from graphmap.properties import destination_path, source_path
from graphmap.model.mappings import PropertyMapping
from graphmap.stores.converter_store import InMemoryConverterStore
from graphmap.stores.type_map_store import InMemoryTypeMapStore


@dataclass
class Tag:
    label: str = ""


@dataclass
class TagView:
    label: str | None = None


class Animal:
    pass


class Dog(Animal):
    pass


@pytest.fixture()
def engine() -> MappingEngine:
    store = InMemoryTypeMapStore()
    store.register(
        TypeMap(
            source_type=Tag,
            destination_type=TagView,
            mappings=[
                PropertyMapping(
                    source_path=source_path(Tag, "label"),
                    destination_path=destination_path(TagView, "label"),
                )
            ],
        )
    )
    return MappingEngine(store, InMemoryConverterStore.default())


def context_for(
    engine: MappingEngine, source: Any, source_type: Any, destination_type: Any
) -> MappingContext:
    return MappingContext.root(source, source_type, None, destination_type, engine)


class TestCollectionConverter:
    def test_supports(self) -> None:
        conv = CollectionConverter()
        assert conv.supports(list[Tag], list[TagView])
        assert conv.supports(tuple, set[int])
        assert not conv.supports(dict[str, int], list[int])
        assert not conv.supports(str, list[str])
        assert not conv.supports(list, dict)

    def test_elements_are_mapped_through_engine(self, engine: MappingEngine) -> None:
        ctx = context_for(
            engine, [Tag("a"), None, Tag("b")], list[Tag], tuple[TagView, ...]
        )

        result = CollectionConverter().convert(ctx)

        assert result == (TagView("a"), None, TagView("b"))

    def test_unparametrised_destination_copies(self, engine: MappingEngine) -> None:
        source = [1, 2]
        result = CollectionConverter().convert(context_for(engine, source, list, list))

        assert result == [1, 2]
        assert result is not source

    def test_optional_element_type_uses_its_type_map(
        self, engine: MappingEngine
    ) -> None:
        ctx = context_for(engine, [Tag("a"), None], list[Tag], list[TagView | None])

        assert CollectionConverter().convert(ctx) == [TagView("a"), None]
        assert not ctx.errors.has_errors()

    def test_set_destination(self, engine: MappingEngine) -> None:
        ctx = context_for(engine, ["1", "2", "2"], list[str], set[int])
        assert CollectionConverter().convert(ctx) == {1, 2}


class TestDictConverter:
    def test_values_are_mapped(self, engine: MappingEngine) -> None:
        ctx = context_for(engine, {"x": Tag("a")}, dict[str, Tag], dict[str, TagView])

        assert DictConverter().convert(ctx) == {"x": TagView("a")}

    def test_optional_value_type_uses_its_type_map(
        self, engine: MappingEngine
    ) -> None:
        source = {"x": Tag("a"), "y": None}
        ctx = context_for(engine, source, dict[str, Tag], dict[str, TagView | None])

        assert DictConverter().convert(ctx) == {"x": TagView("a"), "y": None}
        assert not ctx.errors.has_errors()

    def test_supports(self) -> None:
        assert DictConverter().supports(dict, dict[str, int])
        assert not DictConverter().supports(list, dict)


class TestScalarConverters:
    def test_assignable(self) -> None:
        conv = AssignableConverter()
        assert conv.supports(Dog, Animal)
        assert not conv.supports(Animal, Dog)
        assert not conv.supports(list, list)
        assert not conv.supports(list[int], list[int])

    def test_bool_is_converted_rather_than_passed_as_int(
        self, engine: MappingEngine
    ) -> None:
        assert not AssignableConverter().supports(bool, int)
        assert AssignableConverter().supports(bool, bool)
        assert NumberConverter().supports(bool, int)

        result = engine.map(True, bool, None, int)

        assert result == 1
        assert type(result) is int

    def test_number(self, engine: MappingEngine) -> None:
        conv = NumberConverter()
        assert conv.supports(str, int)
        assert not conv.supports(Tag, int)
        assert conv.convert(context_for(engine, "42", str, int)) == 42
        assert conv.convert(context_for(engine, 0.1, float, Decimal)) == Decimal("0.1")

    def test_to_string(self, engine: MappingEngine) -> None:
        conv = ToStringConverter()
        assert conv.supports(Tag, str)
        assert conv.convert(context_for(engine, 3.5, float, str)) == "3.5"
