"""
Accessor and Mutator implementations.

Attribute-based steps cover plain classes, dataclasses and pydantic models;
key-based steps cover dict-shaped graphs. All steps are frozen dataclasses so
that two rules built for the same path compare equal and can share
intermediate destinations.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, get_type_hints

from pydantic import BaseModel

from .core.types import type_name, unwrap_optional
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeAccessor:
    """Reads ``name`` off an instance of ``owner``."""

    owner: Any
    name: str
    type: Any = Any

    def get_value(self, instance: Any) -> Any:
        return getattr(instance, self.name)

    def __str__(self) -> str:
        return f"{type_name(self.owner)}.{self.name}"


@dataclass(frozen=True)
class AttributeMutator:
    """Writes ``name`` on an instance of ``owner``."""

    owner: Any
    name: str
    type: Any = Any

    def set_value(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)

    def __str__(self) -> str:
        return f"{type_name(self.owner)}.{self.name}"


@dataclass(frozen=True)
class KeyAccessor:
    """Reads ``key`` off a mapping; a missing key reads as None."""

    key: Any
    type: Any = Any

    def get_value(self, instance: Mapping[Any, Any]) -> Any:
        return instance.get(self.key)


@dataclass(frozen=True)
class KeyMutator:
    """Writes ``key`` into a mutable mapping."""

    key: Any
    type: Any = Any

    def set_value(self, instance: Any, value: Any) -> None:
        instance[self.key] = value


def _resolve_hints(owner: Any) -> dict[str, Any]:
    if inspect.isclass(owner) and issubclass(owner, BaseModel):
        return {name: info.annotation for name, info in owner.model_fields.items()}
    try:
        return get_type_hints(owner)
    except Exception as e:
        raise ConfigurationError(
            f"Cannot resolve type hints of {type_name(owner)}: {e}"
        ) from e


def _walk(owner: Any, path: str) -> list[tuple[Any, str, Any]]:
    if not path or not path.strip():
        raise ConfigurationError("Property path cannot be empty")

    steps: list[tuple[Any, str, Any]] = []
    current = owner
    for name in path.strip().split("."):
        hints = _resolve_hints(current)
        if name not in hints:
            raise ConfigurationError(
                f"Unknown property '{name}' on {type_name(current)} "
                f"while resolving '{path}'"
            )
        declared = hints[name]
        steps.append((current, name, declared))
        current = unwrap_optional(declared)
    return steps


def source_path(owner: Any, path: str) -> tuple[AttributeAccessor, ...]:
    """
    Build the accessor chain for a dotted path on ``owner``.

    Args:
        owner: The source type the path starts from
        path: Dotted attribute path (e.g. "customer.address.city")

    Returns:
        Tuple of accessors, one per step, typed from the owners' type hints

    Raises:
        ConfigurationError: If a step does not exist on its owner type
    """
    chain = tuple(
        AttributeAccessor(step_owner, name, declared)
        for step_owner, name, declared in _walk(owner, path)
    )
    logger.debug(f"Resolved source path {type_name(owner)}.{path}")
    return chain


def destination_path(owner: Any, path: str) -> tuple[AttributeMutator, ...]:
    """
    Build the mutator chain for a dotted path on ``owner``.

    Raises:
        ConfigurationError: If a step does not exist on its owner type
    """
    chain = tuple(
        AttributeMutator(step_owner, name, declared)
        for step_owner, name, declared in _walk(owner, path)
    )
    logger.debug(f"Resolved destination path {type_name(owner)}.{path}")
    return chain
