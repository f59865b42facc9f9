"""
exceptions.py

Typed exception hierarchy raised by the mapping engine and its collaborators.
"""

from __future__ import annotations

from typing import Any

from .core.types import type_name

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class GraphMapError(Exception):
    """
    Root of all errors raised by this project.
    """


class ConfigurationError(GraphMapError):
    """
    Raised when the mapper is misused or misconfigured.

    Never aggregated: it aborts the mapping call immediately.

    Examples
    --------
    * Registering a second TypeMap for an already registered type pair
    * Resolving a property path that does not exist on the owner type
    * Passing ``None`` as source or destination to the facade
    """


# --------------------------------------------------------------------------- #
#                     Errors recorded during a mapping call                   #
# --------------------------------------------------------------------------- #


class MappingIssue(GraphMapError):
    """
    Base class for the failures collected while a top-level call runs.

    These are never raised on their own; they are gathered into a
    `MappingError` at the end of the call.
    """

    def __init__(
        self,
        message: str,
        source_type: Any = None,
        destination_type: Any = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source_type = source_type
        self.destination_type = destination_type
        self.cause = cause


class CircularMappingError(MappingIssue):
    """A destination type was re-entered while it was still being mapped."""

    def __init__(self, source_type: Any, destination_type: Any) -> None:
        super().__init__(
            f"A circular reference was detected while mapping "
            f"{type_name(source_type)} to {type_name(destination_type)}.",
            source_type,
            destination_type,
        )


class UnsupportedMappingError(MappingIssue):
    """Neither a TypeMap nor a converter applies and no destination exists."""

    def __init__(self, source_type: Any, destination_type: Any) -> None:
        super().__init__(
            f"Unsupported mapping of {type_name(source_type)} to "
            f"{type_name(destination_type)}: no TypeMap or converter applies.",
            source_type,
            destination_type,
        )


class ConvertingError(MappingIssue):
    """A converter raised while converting a value."""

    def __init__(
        self,
        converter: Any,
        source_type: Any,
        destination_type: Any,
        cause: BaseException,
    ) -> None:
        super().__init__(
            f"Converter {converter!r} failed to convert "
            f"{type_name(source_type)} to {type_name(destination_type)}: {cause}",
            source_type,
            destination_type,
            cause,
        )
        self.converter = converter


class InstantiatingDestinationError(MappingIssue):
    """A destination (or intermediate destination) could not be constructed."""

    def __init__(self, destination_type: Any, cause: BaseException) -> None:
        super().__init__(
            f"Failed to instantiate instance of destination "
            f"{type_name(destination_type)}. Ensure that it can be constructed "
            f"without arguments or register an instance factory for it: {cause}",
            None,
            destination_type,
            cause,
        )


class UnexpectedMappingError(MappingIssue):
    """Any other exception that escaped a top-level mapping call."""

    def __init__(
        self, source_type: Any, destination_type: Any, cause: BaseException
    ) -> None:
        super().__init__(
            f"Failed to map {type_name(source_type)} to "
            f"{type_name(destination_type)}: {cause}",
            source_type,
            destination_type,
            cause,
        )


class MappingError(GraphMapError):
    """
    Aggregated failure raised once at the end of a top-level call.

    Attributes
    ----------
    errors
        Every distinct `MappingIssue` recorded during the call, in the order
        they occurred.
    """

    def __init__(self, errors: list[MappingIssue]) -> None:
        self.errors = list(errors)
        super().__init__(self._format(self.errors))

    @staticmethod
    def _format(errors: list[MappingIssue]) -> str:
        lines = ["Mapping errors:", ""]
        for index, error in enumerate(errors, start=1):
            lines.append(f"{index}) {error.message}")
        lines.append("")
        lines.append(f"{len(errors)} error{'s' if len(errors) != 1 else ''}")
        return "\n".join(lines)
