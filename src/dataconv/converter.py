"""
DataConverter - stateful facade over the codec modules.

Holds one value per representation ("slot") and converts between them:

    array_data   generic value (dict / list / scalar)
    csv_data     CSV text
    json_data    JSON text
    object_data  DataObject (or list of DataObjects)
    xml_data     XML text
    yaml_data    YAML text

Each conversion reads one slot and writes another. Slots are independent:
setting one never clears the others, so keeping them consistent is up to
the caller. Reading a slot that was never set raises UninitializedSlotError.

Two-hop conversions (csv_to_xml, json_to_csv, ...) go through the array
slot and leave the intermediate value there.

Not safe for concurrent use: use one converter per conversion.

Example:
    converter = DataConverter()
    converter.csv_data = "name;age\\nAl;9"
    converter.csv_to_xml(root_node="people", prev_key="person")
    print(converter.xml_data)
"""
from __future__ import annotations

import logging
from typing import Any

from . import __version__
from .csv_codec import DEFAULT_DELIMITER, DEFAULT_ENCLOSURE, csv_to_records, records_to_csv
from .errors import UninitializedSlotError
from .fileio import read_text_file, write_text_file
from .json_codec import json_to_value, value_to_json, value_to_yaml, yaml_to_value
from .objects import object_to_json, object_to_value, value_to_object
from .xml_codec import DEFAULT_PREV_KEY, DEFAULT_ROOT_NODE, value_to_xml, xml_to_value

logger = logging.getLogger(__name__)

_UNSET = object()


def _slot(name: str, label: str) -> property:
    attr = f"_{name}"

    def getter(self):
        value = getattr(self, attr)
        if value is _UNSET:
            raise UninitializedSlotError(label)
        return value

    def setter(self, value):
        setattr(self, attr, value)

    return property(getter, setter, doc=f"The current {label}.")


class DataConverter:
    """Converts one dataset between array, CSV, JSON, object, XML and YAML forms."""

    array_data = _slot("array_data", "array data")
    csv_data = _slot("csv_data", "CSV data")
    json_data = _slot("json_data", "JSON data")
    object_data = _slot("object_data", "object data")
    xml_data = _slot("xml_data", "XML data")
    yaml_data = _slot("yaml_data", "YAML data")

    def __init__(self):
        self._array_data: Any = _UNSET
        self._csv_data: Any = _UNSET
        self._json_data: Any = _UNSET
        self._object_data: Any = _UNSET
        self._xml_data: Any = _UNSET
        self._yaml_data: Any = _UNSET

    @staticmethod
    def version() -> str:
        return __version__

    # =========================================================================
    # TO ARRAY
    # =========================================================================

    def csv_to_array(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        header_mode: bool = True,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        """
        Parse the CSV slot into the array slot.

        Args:
            delimiter: Field separator
            header_mode: First row names the fields (records become dicts);
                if False every row becomes a list of strings
            enclosure: Quote character
        """
        self.array_data = csv_to_records(
            self.csv_data, delimiter=delimiter, header_mode=header_mode, enclosure=enclosure
        )
        logger.debug("csv -> array: %d records", len(self._array_data))
        return self

    def json_to_array(self) -> DataConverter:
        self.array_data = json_to_value(self.json_data)
        logger.debug("json -> array")
        return self

    def object_to_array(self) -> DataConverter:
        self.array_data = object_to_value(self.object_data)
        logger.debug("object -> array")
        return self

    def xml_to_array(self) -> DataConverter:
        self.array_data = xml_to_value(self.xml_data)
        logger.debug("xml -> array")
        return self

    def yaml_to_array(self) -> DataConverter:
        self.array_data = yaml_to_value(self.yaml_data)
        logger.debug("yaml -> array")
        return self

    # =========================================================================
    # FROM ARRAY
    # =========================================================================

    def array_to_csv(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        """Write the array slot (a non-empty list of dict records) as CSV."""
        self.csv_data = records_to_csv(self.array_data, delimiter=delimiter, enclosure=enclosure)
        logger.debug("array -> csv")
        return self

    def array_to_json(self, pretty: bool = False) -> DataConverter:
        self.json_data = value_to_json(self.array_data, pretty=pretty)
        logger.debug("array -> json")
        return self

    def array_to_object(self) -> DataConverter:
        self.object_data = value_to_object(self.array_data)
        logger.debug("array -> object")
        return self

    def array_to_xml(
        self,
        root_node: str = DEFAULT_ROOT_NODE,
        prev_key: str = DEFAULT_PREV_KEY,
        pretty: bool = False,
    ) -> DataConverter:
        """
        Write the array slot as an XML document.

        Args:
            root_node: Tag of the document element
            prev_key: Tag for top-level positional entries (e.g. CSV records)
            pretty: Indent nested elements
        """
        self.xml_data = value_to_xml(
            self.array_data, root_node=root_node, prev_key=prev_key, pretty=pretty
        )
        logger.debug("array -> xml (root=%s)", root_node)
        return self

    def array_to_yaml(self) -> DataConverter:
        self.yaml_data = value_to_yaml(self.array_data)
        logger.debug("array -> yaml")
        return self

    # =========================================================================
    # TWO-HOP CONVERSIONS
    # =========================================================================

    def csv_to_json(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        header_mode: bool = True,
        enclosure: str = DEFAULT_ENCLOSURE,
        pretty: bool = False,
    ) -> DataConverter:
        self.csv_to_array(delimiter=delimiter, header_mode=header_mode, enclosure=enclosure)
        return self.array_to_json(pretty=pretty)

    def csv_to_object(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        header_mode: bool = True,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        self.csv_to_array(delimiter=delimiter, header_mode=header_mode, enclosure=enclosure)
        return self.array_to_object()

    def csv_to_xml(
        self,
        root_node: str = DEFAULT_ROOT_NODE,
        prev_key: str = DEFAULT_PREV_KEY,
        delimiter: str = DEFAULT_DELIMITER,
        header_mode: bool = True,
        enclosure: str = DEFAULT_ENCLOSURE,
        pretty: bool = False,
    ) -> DataConverter:
        self.csv_to_array(delimiter=delimiter, header_mode=header_mode, enclosure=enclosure)
        return self.array_to_xml(root_node=root_node, prev_key=prev_key, pretty=pretty)

    def json_to_csv(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        self.json_to_array()
        return self.array_to_csv(delimiter=delimiter, enclosure=enclosure)

    def json_to_object(self) -> DataConverter:
        self.json_to_array()
        return self.array_to_object()

    def json_to_xml(
        self,
        root_node: str = DEFAULT_ROOT_NODE,
        prev_key: str = DEFAULT_PREV_KEY,
        pretty: bool = False,
    ) -> DataConverter:
        self.json_to_array()
        return self.array_to_xml(root_node=root_node, prev_key=prev_key, pretty=pretty)

    def object_to_csv(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        self.object_to_array()
        return self.array_to_csv(delimiter=delimiter, enclosure=enclosure)

    def object_to_json(self, pretty: bool = False) -> DataConverter:
        """Serialize the object slot straight to JSON; the array slot is untouched."""
        self.json_data = object_to_json(self.object_data, pretty=pretty)
        logger.debug("object -> json")
        return self

    def object_to_xml(
        self,
        root_node: str = DEFAULT_ROOT_NODE,
        prev_key: str = DEFAULT_PREV_KEY,
        pretty: bool = False,
    ) -> DataConverter:
        self.object_to_array()
        return self.array_to_xml(root_node=root_node, prev_key=prev_key, pretty=pretty)

    def xml_to_csv(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        enclosure: str = DEFAULT_ENCLOSURE,
    ) -> DataConverter:
        self.xml_to_array()
        return self.array_to_csv(delimiter=delimiter, enclosure=enclosure)

    def xml_to_json(self, pretty: bool = False) -> DataConverter:
        self.xml_to_array()
        return self.array_to_json(pretty=pretty)

    def xml_to_object(self) -> DataConverter:
        self.xml_to_array()
        return self.array_to_object()

    # =========================================================================
    # FILES
    # =========================================================================

    def load_csv(self, path, encoding: str = "utf-8") -> DataConverter:
        self.csv_data = read_text_file(path, encoding=encoding)
        return self

    def save_csv(self, path, encoding: str = "utf-8") -> DataConverter:
        write_text_file(path, self.csv_data, encoding=encoding)
        return self

    def load_json(self, path, encoding: str = "utf-8") -> DataConverter:
        self.json_data = read_text_file(path, encoding=encoding)
        return self

    def save_json(self, path, encoding: str = "utf-8") -> DataConverter:
        write_text_file(path, self.json_data, encoding=encoding)
        return self

    def load_xml(self, path, encoding: str = "utf-8") -> DataConverter:
        self.xml_data = read_text_file(path, encoding=encoding)
        return self

    def save_xml(self, path, encoding: str = "utf-8") -> DataConverter:
        write_text_file(path, self.xml_data, encoding=encoding)
        return self

    def load_yaml(self, path, encoding: str = "utf-8") -> DataConverter:
        self.yaml_data = read_text_file(path, encoding=encoding)
        return self

    def save_yaml(self, path, encoding: str = "utf-8") -> DataConverter:
        write_text_file(path, self.yaml_data, encoding=encoding)
        return self


__all__ = ["DataConverter"]
