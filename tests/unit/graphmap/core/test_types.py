"""Unit tests for the type helpers."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Optional

import pytest

from graphmap.core.type_pair import TypePair
from graphmap.core.types import default_value, is_iterable, type_name, unwrap_optional


class Widget:
    pass


class TestIsIterable:
    @pytest.mark.parametrize(
        "tp",
        [
            list,
            list[int],
            tuple[int, ...],
            set[str],
            frozenset,
            dict[str, int],
            OrderedDict,
        ],
    )
    def test_containers(self, tp: Any) -> None:
        assert is_iterable(tp)

    @pytest.mark.parametrize("tp", [str, bytes, int, Widget, Optional[list[int]], Any])
    def test_non_containers(self, tp: Any) -> None:
        assert not is_iterable(tp)


class TestDefaultValue:
    def test_scalars_get_zero_values(self) -> None:
        assert default_value(int) == 0
        assert default_value(float) == 0.0
        assert default_value(bool) is False
        assert default_value(complex) == 0j

    def test_nullable_and_reference_types_stay_none(self) -> None:
        assert default_value(Optional[int]) is None
        assert default_value(int | None) is None
        assert default_value(str) is None
        assert default_value(Widget) is None


class TestUnwrapOptional:
    def test_unwraps_single_optional(self) -> None:
        assert unwrap_optional(Optional[Widget]) is Widget
        assert unwrap_optional(Widget | None) is Widget

    def test_leaves_other_types_alone(self) -> None:
        assert unwrap_optional(int | str) == int | str
        assert unwrap_optional(list[int]) == list[int]


class TestTypePair:
    def test_value_equality(self) -> None:
        assert TypePair.of(int, Widget) == TypePair(int, Widget)
        pair = TypePair.of(list[int], Widget)
        assert hash(pair) == hash(TypePair.of(list[int], Widget))
        assert TypePair.of(int, Widget) != TypePair.of(Widget, int)

    def test_names(self) -> None:
        assert str(TypePair.of(int, Widget)) == "int -> Widget"
        assert type_name(list[int]) == "list[int]"
        assert type_name(None) == "None"
