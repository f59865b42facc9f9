"""Unit tests for accessors, mutators and path resolution."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from graphmap.exceptions import ConfigurationError
from graphmap.properties import (
    AttributeAccessor,
    AttributeMutator,
    KeyAccessor,
    KeyMutator,
    destination_path,
    source_path,
)


@dataclass
class Inner:
    value: int = 0


@dataclass
class Outer:
    inner: Inner | None = None
    label: str = ""


class Profile(BaseModel):
    nickname: str
    outer: Outer | None = None


class TestAttributeSteps:
    def test_accessor_and_mutator(self) -> None:
        outer = Outer(label="x")
        AttributeMutator(Outer, "label", str).set_value(outer, "y")
        assert AttributeAccessor(Outer, "label", str).get_value(outer) == "y"

    def test_steps_compare_by_value(self) -> None:
        assert destination_path(Outer, "inner.value") == destination_path(
            Outer, "inner.value"
        )
        assert str(AttributeMutator(Outer, "inner")) == "Outer.inner"


class TestKeySteps:
    def test_key_accessor_reads_missing_as_none(self) -> None:
        accessor = KeyAccessor("missing")
        assert accessor.get_value({}) is None
        assert KeyAccessor("a").get_value({"a": 1}) == 1

    def test_key_mutator_writes(self) -> None:
        target: dict[str, int] = {}
        KeyMutator("a", int).set_value(target, 3)
        assert target == {"a": 3}


class TestPathResolution:
    def test_source_path_types_follow_hints(self) -> None:
        path = source_path(Outer, "inner.value")

        assert [step.name for step in path] == ["inner", "value"]
        assert path[0].owner is Outer
        # Optional is unwrapped for the next owner
        assert path[1].owner is Inner
        assert path[1].type is int

    def test_pydantic_models_resolve(self) -> None:
        path = destination_path(Profile, "outer.label")
        assert path[0].owner is Profile
        assert path[1].owner is Outer

    def test_unknown_property_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown property 'nope'"):
            source_path(Outer, "inner.nope")

    def test_empty_path_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            destination_path(Outer, " ")
