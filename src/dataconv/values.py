"""
Generic Value Model

The "array" representation every conversion passes through.

A value is one of four kinds, expressed with plain Python types:

    - NULL   : None
    - SCALAR : str, int, float, bool
    - LIST   : list (tuples are accepted on input)
    - MAP    : dict with string keys, insertion-ordered

Map key order is significant: it decides CSV column order and XML
element order.

Numeric policy:
    CSV and XML decoders only ever produce str scalars.
    JSON and YAML decoders produce int / float / bool / None as parsed.
"""

from enum import Enum
from typing import Any, Dict, List, Union

from .errors import UnsupportedShapeError


Scalar = Union[str, int, float, bool]
Value = Union[None, Scalar, List[Any], Dict[str, Any]]


class ValueKind(Enum):
    """The four variants of the generic value."""
    NULL = "null"
    SCALAR = "scalar"
    LIST = "list"
    MAP = "map"


def kind_of(value: Any) -> ValueKind:
    """
    Classify a Python object as one of the generic value kinds.

    Raises:
        UnsupportedShapeError: If the object is not part of the model
    """
    if value is None:
        return ValueKind.NULL
    # bool is an int subclass, both are scalars
    if isinstance(value, (str, int, float)):
        return ValueKind.SCALAR
    if isinstance(value, (list, tuple)):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAP
    raise UnsupportedShapeError(
        f"{type(value).__name__} is not a null, scalar, list or map value"
    )


def is_scalar(value: Any) -> bool:
    """True for None and scalar values (anything that is not a container)."""
    return kind_of(value) in (ValueKind.NULL, ValueKind.SCALAR)


def is_container(value: Any) -> bool:
    return kind_of(value) in (ValueKind.LIST, ValueKind.MAP)


def scalar_to_text(value: Any) -> str:
    """
    Render a scalar as text for CSV fields and XML content.

    Examples:
        None  -> ""
        True  -> "true"
        9     -> "9"
        "Al"  -> "Al"
    """
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if kind_of(value) is not ValueKind.SCALAR:
        raise UnsupportedShapeError(
            f"Expected a scalar, got {type(value).__name__}"
        )
    return str(value)


def is_integer_key(key: Any) -> bool:
    """True for positional keys: ints, or strings of ASCII digits."""
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isascii() and key.isdigit()


def iter_entries(value: Any):
    """Yield (key, item) pairs of a map, or (index, item) pairs of a list."""
    if isinstance(value, dict):
        return iter(value.items())
    return enumerate(value)


__all__ = [
    "Scalar",
    "Value",
    "ValueKind",
    "kind_of",
    "is_scalar",
    "is_container",
    "scalar_to_text",
    "is_integer_key",
    "iter_entries",
]
