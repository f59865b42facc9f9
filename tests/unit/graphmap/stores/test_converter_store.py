"""Unit tests for InMemoryConverterStore."""

from __future__ import annotations

import logging

import pytest

from graphmap.converters import AssignableConverter, ToStringConverter
from graphmap.functions import converter
from graphmap.stores.converter_store import InMemoryConverterStore


class TestConverterStore:
    def test_first_supported_respects_order(self) -> None:
        store = InMemoryConverterStore(AssignableConverter(), ToStringConverter())

        assert isinstance(store.get_first_supported(str, str), AssignableConverter)
        assert isinstance(store.get_first_supported(int, str), ToStringConverter)
        assert store.get_first_supported(str, int) is None

    def test_added_converter_takes_precedence(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        store = InMemoryConverterStore(ToStringConverter())
        custom = converter(lambda ctx: "custom", int, str)

        store.add_converter(custom)

        assert store.get_first_supported(int, str) is custom
        assert isinstance(store.get_first_supported(float, str), ToStringConverter)
        assert any("Registered converter" in r.message for r in caplog.records)

    def test_add_converter_at_end(self) -> None:
        store = InMemoryConverterStore(ToStringConverter())
        custom = converter(lambda ctx: "custom", int, str)

        store.add_converter(custom, index=len(store))

        assert isinstance(store.get_first_supported(int, str), ToStringConverter)
        assert store.get_converters()[-1] is custom

    def test_rejects_incomplete_converter(self) -> None:
        class NoSupports:
            def convert(self, context):
                return None

        with pytest.raises(ValueError):
            InMemoryConverterStore().add_converter(NoSupports())

    def test_default_store_is_populated(self) -> None:
        store = InMemoryConverterStore.default()
        assert len(store) == 5
        assert store.get_first_supported(list, list[int]) is not None
