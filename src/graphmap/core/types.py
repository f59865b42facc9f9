"""Helpers for reasoning about destination and source types."""

import collections.abc
import types
from typing import Any, Union, get_args, get_origin

# Zero values for slots that should not be left as None
_DEFAULT_VALUES: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
}

_CONTAINER_BASES = (
    collections.abc.Sequence,
    collections.abc.Set,
    collections.abc.Mapping,
)

_TEXT_TYPES = (str, bytes, bytearray)


def is_iterable(tp: Any) -> bool:
    """
    Check whether a type describes a multi-element container.

    Lists, tuples, sets and mappings (bare or parametrised) qualify; text
    types do not.

    Args:
        tp: A class or a typing alias (e.g. ``list[int]``)

    Returns:
        True if values of this type hold several elements, False otherwise
    """
    origin = get_origin(tp) or tp
    if not isinstance(origin, type):
        return False
    if issubclass(origin, _TEXT_TYPES):
        return False
    return issubclass(origin, _CONTAINER_BASES)


def unwrap_optional(tp: Any) -> Any:
    """Return ``X`` for ``Optional[X]`` / ``X | None``, else ``tp`` unchanged."""
    if get_origin(tp) in (Union, types.UnionType):
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def default_value(tp: Any) -> Any:
    """
    Zero value to write into a slot of type ``tp`` when the mapped value is None.

    Only exact scalar types get a zero value; optional and reference types
    stay None.
    """
    if isinstance(tp, type):
        return _DEFAULT_VALUES.get(tp)
    return None


def type_name(tp: Any) -> str:
    """Readable name for a class or typing alias."""
    if tp is None:
        return "None"
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp).replace("typing.", "")
