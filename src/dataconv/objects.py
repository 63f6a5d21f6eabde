"""
Keyed-object representation.

A DataObject carries a map's entries as attributes instead of dict items,
for callers that prefer ``record.name`` over ``record["name"]``. Keys that
are not Python identifiers (e.g. "@attributes") are still stored and can
be read with getattr() or vars().
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from .errors import UnsupportedShapeError
from .json_codec import value_to_json
from .values import ValueKind, kind_of


class DataObject(SimpleNamespace):
    """A map with its keys exposed as attributes."""

    def to_dict(self) -> dict:
        return object_to_value(self)


def _to_object(value: Any) -> Any:
    kind = kind_of(value)
    if kind is ValueKind.MAP:
        obj = DataObject()
        for key, item in value.items():
            setattr(obj, str(key), _to_object(item))
        return obj
    if kind is ValueKind.LIST:
        return [_to_object(item) for item in value]
    return value


def value_to_object(value: Any) -> Any:
    """
    Convert a map (or list of maps) into DataObjects.

    Raises:
        UnsupportedShapeError: If the root is a scalar or null
    """
    if kind_of(value) not in (ValueKind.MAP, ValueKind.LIST):
        raise UnsupportedShapeError(
            f"Object conversion needs a map or list at the root, got {kind_of(value).value}"
        )
    return _to_object(value)


def object_to_value(obj: Any) -> Any:
    """
    Convert DataObjects (or any objects with a __dict__) back to plain values.

    Raises:
        UnsupportedShapeError: If a nested value is neither an object nor
            part of the generic value model
    """
    if isinstance(obj, (list, tuple)):
        return [object_to_value(item) for item in obj]
    if isinstance(obj, dict):
        return {key: object_to_value(item) for key, item in obj.items()}
    if hasattr(obj, "__dict__"):
        return {key: object_to_value(item) for key, item in vars(obj).items()}
    kind_of(obj)  # raises for types outside the model
    return obj


def _encode_default(obj: Any) -> Any:
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def object_to_json(obj: Any, pretty: bool = False) -> str:
    """Serialize objects straight to JSON, without the value intermediate."""
    return value_to_json(obj, pretty=pretty, default=_encode_default)


__all__ = [
    "DataObject",
    "value_to_object",
    "object_to_value",
    "object_to_json",
]
