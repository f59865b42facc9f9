"""Global mapping configuration and the instance factory registry."""

import inspect
import logging
from collections.abc import Callable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.types import type_name, unwrap_optional

logger = logging.getLogger(__name__)

InstanceFactory = Callable[[Any], Any]


def construct_default(destination_type: Any) -> Any:
    """
    Default instance factory.

    Pydantic models are built with ``model_construct()`` so that required
    fields do not block construction; the mapping fills them in afterwards.
    Any other type is called with no arguments.
    """
    if inspect.isclass(destination_type) and issubclass(destination_type, BaseModel):
        return destination_type.model_construct()
    return destination_type()


class InstanceFactoryRegistry:
    """
    Explicit factories keyed by destination type.

    Types without a registered factory fall back to the default factory.
    """

    def __init__(self, default_factory: InstanceFactory = construct_default):
        self._factories: dict[Any, InstanceFactory] = {}
        self._default_factory = default_factory
        self._logger = logger.getChild(self.__class__.__name__)

    def register(self, destination_type: Any, factory: InstanceFactory) -> None:
        """
        Register a factory for ``destination_type``.

        Args:
            destination_type: The type the factory builds
            factory: Callable receiving the requested type, returning an instance

        Raises:
            ValueError: If the factory is not callable
        """
        if not callable(factory):
            raise ValueError("Instance factory must be callable")

        if destination_type in self._factories:
            self._logger.warning(
                f"Overwriting instance factory for '{type_name(destination_type)}'"
            )
        self._factories[destination_type] = factory
        self._logger.info(
            f"Registered instance factory for '{type_name(destination_type)}'"
        )

    def create(self, destination_type: Any) -> Any:
        """
        Build an instance of ``destination_type``.

        Raises:
            Exception: Whatever the factory raises; the engine records it
        """
        target = unwrap_optional(destination_type)
        factory = self._factories.get(target, self._default_factory)
        return factory(target)

    def __contains__(self, destination_type: Any) -> bool:
        return unwrap_optional(destination_type) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


class MappingConfiguration(BaseModel):
    """Settings shared by every call of one engine."""

    provider: Optional[Any] = Field(
        None,
        description="Global provider consulted after mapping and TypeMap providers.",
    )
    instance_factories: InstanceFactoryRegistry = Field(
        default_factory=InstanceFactoryRegistry,
        description="Factories used when no provider supplies an instance.",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    @field_validator("provider")
    @classmethod
    def _provider(cls, v: Any) -> Any:
        if v is not None and not callable(getattr(v, "get", None)):
            raise ValueError("Provider must define a callable 'get' method")
        return v
