"""
JSON and YAML codecs for the generic value model.

Both formats are lossless for the model: objects/mappings become dicts
(key order kept), arrays/sequences become lists, and numbers, booleans
and null pass through as int / float / bool / None.
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from .errors import ParseError, UnsupportedShapeError


def json_to_value(text: str) -> Any:
    """
    Decode JSON text.

    Raises:
        ParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {str(e)}") from e


def value_to_json(value: Any, pretty: bool = False, default=None) -> str:
    """
    Encode a value as JSON text.

    Compact by default; pretty=True indents nested levels by 4 spaces.
    default is passed to json.dumps for objects outside the value model.

    Raises:
        UnsupportedShapeError: If the value holds something JSON cannot encode
    """
    try:
        if pretty:
            return json.dumps(value, ensure_ascii=False, indent=4, default=default, allow_nan=False)
        return json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), default=default, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise UnsupportedShapeError(f"Value cannot be encoded as JSON: {str(e)}") from e


def yaml_to_value(text: str) -> Any:
    """
    Decode YAML text (safe loader only).

    Raises:
        ParseError: If the text is not valid YAML
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {str(e)}") from e


def value_to_yaml(value: Any) -> str:
    """Encode a value as block-style YAML, keeping key order."""
    try:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise UnsupportedShapeError(f"Value cannot be encoded as YAML: {str(e)}") from e


__all__ = [
    "json_to_value",
    "value_to_json",
    "yaml_to_value",
    "value_to_yaml",
]
