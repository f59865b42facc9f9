"""Per-call accumulator of mapping failures."""

import logging
from typing import Any

from graphmap.exceptions import (
    CircularMappingError,
    ConvertingError,
    InstantiatingDestinationError,
    MappingError,
    MappingIssue,
    UnexpectedMappingError,
    UnsupportedMappingError,
)

logger = logging.getLogger(__name__)


class ErrorCollector:
    """
    Collects the failures of one top-level mapping call.

    A single instance is shared by every context of the call. Failures are
    only appended; `raise_if_errors` consumes them once the call completes.
    """

    def __init__(self) -> None:
        self._errors: list[MappingIssue] = []
        self._consumed = False

    def record(self, error: MappingIssue) -> MappingIssue:
        logger.debug(f"Recorded {error.__class__.__name__}: {error.message}")
        self._errors.append(error)
        return error

    def circular_mapping(
        self, source_type: Any, destination_type: Any
    ) -> MappingIssue:
        return self.record(CircularMappingError(source_type, destination_type))

    def unsupported_mapping(
        self, source_type: Any, destination_type: Any
    ) -> MappingIssue:
        return self.record(UnsupportedMappingError(source_type, destination_type))

    def converting(
        self,
        converter: Any,
        source_type: Any,
        destination_type: Any,
        cause: BaseException,
    ) -> MappingIssue:
        return self.record(
            ConvertingError(converter, source_type, destination_type, cause)
        )

    def instantiating_destination(
        self, destination_type: Any, cause: BaseException
    ) -> MappingIssue:
        return self.record(InstantiatingDestinationError(destination_type, cause))

    def unexpected(
        self, source_type: Any, destination_type: Any, cause: BaseException
    ) -> MappingIssue:
        return self.record(UnexpectedMappingError(source_type, destination_type, cause))

    @property
    def errors(self) -> list[MappingIssue]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def raise_if_errors(self) -> None:
        """
        Raise one `MappingError` carrying every distinct recorded failure.

        Raises:
            MappingError: If any failure was recorded
            RuntimeError: If the collector was already consumed
        """
        if self._consumed:
            raise RuntimeError("Mapping errors were already consumed")
        self._consumed = True

        if not self._errors:
            return

        distinct: list[MappingIssue] = []
        seen: set[tuple[type, str]] = set()
        for error in self._errors:
            key = (error.__class__, error.message)
            if key not in seen:
                seen.add(key)
                distinct.append(error)
        raise MappingError(distinct)

    def __len__(self) -> int:
        return len(self._errors)
