"""
XML codec for the generic value model.

XML has no native list, so the encoder relies on key naming conventions
to tell three shapes apart:

    - list value         -> repeated sibling elements with the same tag
    - "@attributes" map  -> attributes of the current element
    - "_value" key       -> text content of the element owning the map

Integer keys (list positions) have no usable name, so their elements
take the tag of the enclosing key ("prev_key", "data" at the top). A
list found under an integer key (a row of a list of lists) is wrapped
in its own element so rows stay apart.

Decoding applies the same conventions in reverse: attributes land under
"@attributes", repeated tags collapse into a list, a leaf element
becomes its text, and text next to attributes or children goes under
"_value". The root tag itself is not part of the decoded value.

Known lossy cases:
    - lists mixing scalars and maps (LossyConversionWarning is emitted)
    - single-item lists decode as the bare item
    - numbers and booleans decode as strings
"""
from __future__ import annotations

import re
import warnings
from typing import Any, Dict, List, Union

from lxml import etree

from .errors import (
    InvalidTagNameError,
    LossyConversionWarning,
    ParseError,
    UnsupportedShapeError,
)
from .values import (
    ValueKind,
    is_container,
    is_integer_key,
    iter_entries,
    kind_of,
    scalar_to_text,
)


ATTRIBUTES_KEY = "@attributes"
VALUE_KEY = "_value"

DEFAULT_ROOT_NODE = "root"
DEFAULT_PREV_KEY = "data"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_DECLARATION_RE = re.compile(r"^\s*<\?xml\b[^>]*\?>")


# =========================================================================
# DECODING
# =========================================================================

def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(name: str) -> str:
    return etree.QName(name).localname


def _element_to_value(element) -> Union[str, Dict[str, Any]]:
    children = [child for child in element if isinstance(child.tag, str)]

    if not children and not element.attrib:
        return element.text or ""

    value: Dict[str, Any] = {}
    if element.attrib:
        value[ATTRIBUTES_KEY] = {
            _local_name(name): text for name, text in element.attrib.items()
        }
    if element.text is not None and element.text.strip():
        value[VALUE_KEY] = element.text

    repeated = set()
    for child in children:
        tag = _local_name(child.tag)
        item = _element_to_value(child)
        if tag not in value:
            value[tag] = item
        elif tag in repeated:
            value[tag].append(item)
        else:
            value[tag] = [value[tag], item]
            repeated.add(tag)

    return value


def xml_to_value(text: Union[str, bytes]) -> Dict[str, Any]:
    """
    Decode an XML document into a map.

    Args:
        text: XML document as str (any declared encoding is ignored, the
            text is already decoded) or bytes (decoded as declared)

    Returns:
        The root element's content as a dict

    Raises:
        ParseError: If the document is empty or not well-formed
    """
    if isinstance(text, str):
        data = _DECLARATION_RE.sub("", text.lstrip("\ufeff"), count=1)
    else:
        data = text
    if not data.strip():
        raise ParseError("XML document is empty")

    try:
        root = etree.fromstring(data, _make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"Invalid XML: {str(e)}") from e
    if root is None:
        raise ParseError("XML document has no root element")

    value = _element_to_value(root)
    if isinstance(value, str):
        # Text-only root
        return {VALUE_KEY: value} if value.strip() else {}
    return value


# =========================================================================
# ENCODING
# =========================================================================

def _new_element(tag: Any, parent=None):
    """Create an element (or a child of parent), validating the tag name."""
    name = str(tag)
    if name.startswith("{"):
        raise InvalidTagNameError(tag)
    try:
        if parent is None:
            return etree.Element(name)
        return etree.SubElement(parent, name)
    except ValueError as e:
        raise InvalidTagNameError(tag) from e


def _set_text(element, value: Any, key: Any) -> None:
    if is_container(value):
        raise UnsupportedShapeError(
            f"{key!r} holds a {kind_of(value).value}, element text must be a scalar"
        )
    if value is None:
        return
    try:
        element.text = scalar_to_text(value)
    except ValueError as e:
        raise UnsupportedShapeError(f"Text of {key!r} is not valid XML content: {str(e)}") from e


def _set_attributes(element, attributes: Dict[Any, Any]) -> None:
    for name, value in attributes.items():
        if is_container(value):
            raise UnsupportedShapeError(
                f"Attribute {name!r} holds a {kind_of(value).value}, attributes must be scalars"
            )
        attr_name = str(name)
        if attr_name.startswith("{"):
            raise InvalidTagNameError(name)
        try:
            element.set(attr_name, "")
        except ValueError as e:
            raise InvalidTagNameError(name) from e
        try:
            element.set(attr_name, scalar_to_text(value))
        except ValueError as e:
            raise UnsupportedShapeError(
                f"Value of attribute {name!r} is not valid XML content: {str(e)}"
            ) from e


def _append_container(parent, tag: str, value: Any, lossy: List[str]) -> None:
    child = _new_element(tag, parent)
    if isinstance(value, dict) and VALUE_KEY in value:
        _set_text(child, value[VALUE_KEY], VALUE_KEY)
    _append_entries(child, value, tag, lossy)


def _append_list(parent, tag: str, items, lossy: List[str]) -> None:
    if not items:
        _new_element(tag, parent)
        return

    if len({is_container(item) for item in items}) > 1:
        lossy.append(tag)

    for item in items:
        if is_container(item):
            _append_container(parent, tag, item, lossy)
        else:
            leaf = _new_element(tag, parent)
            _set_text(leaf, item, tag)


def _append_entries(element, value: Any, prev_key: str, lossy: List[str]) -> None:
    """
    Recursively add the entries of a map or list below element.

    Tags of lists that will not round-trip are collected in lossy.
    """
    for key, item in iter_entries(value):
        positional = is_integer_key(key)
        tag = prev_key if positional else key
        kind = kind_of(item)

        if kind is ValueKind.LIST and positional:
            # A row of a list of lists keeps its own element
            _append_container(element, tag, item, lossy)
        elif kind is ValueKind.LIST:
            _append_list(element, tag, item, lossy)
        elif key == ATTRIBUTES_KEY and kind is ValueKind.MAP:
            _set_attributes(element, item)
        elif kind is ValueKind.MAP:
            _append_container(element, tag, item, lossy)
        elif key == VALUE_KEY:
            # Already written as the element's text
            continue
        else:
            leaf = _new_element(tag, element)
            _set_text(leaf, item, key)


def value_to_xml(
    value: Any,
    root_node: str = DEFAULT_ROOT_NODE,
    prev_key: str = DEFAULT_PREV_KEY,
    pretty: bool = False,
) -> str:
    """
    Encode a map (or list of records) as an XML document.

    Args:
        value: Map or list to encode
        root_node: Tag of the document element
        prev_key: Tag used for top-level positional entries
        pretty: Indent nested elements

    Returns:
        XML text starting with a UTF-8 declaration

    Warns:
        LossyConversionWarning: For each list mixing scalars and containers

    Raises:
        UnsupportedShapeError: If value is not a map or list, or holds
            values XML cannot carry where they appear
        InvalidTagNameError: If a key is not a valid XML name
    """
    if kind_of(value) not in (ValueKind.MAP, ValueKind.LIST):
        raise UnsupportedShapeError(
            f"XML encoding needs a map or list at the root, got {kind_of(value).value}"
        )

    root = _new_element(root_node)
    if isinstance(value, dict) and VALUE_KEY in value:
        _set_text(root, value[VALUE_KEY], VALUE_KEY)
    lossy: List[str] = []
    _append_entries(root, value, prev_key, lossy)
    for tag in lossy:
        warnings.warn(
            f"List under {tag!r} mixes scalars and containers and will not round-trip through XML",
            LossyConversionWarning,
            stacklevel=2,
        )

    body = etree.tostring(root, encoding="unicode", pretty_print=pretty)
    return f"{XML_DECLARATION}\n{body}"


__all__ = [
    "ATTRIBUTES_KEY",
    "VALUE_KEY",
    "DEFAULT_ROOT_NODE",
    "DEFAULT_PREV_KEY",
    "xml_to_value",
    "value_to_xml",
]
