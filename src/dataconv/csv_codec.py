"""
CSV codec (CSV text <-> list of records).

Text format:
    - rows separated by newline, one record per line
    - fields separated by a delimiter (default ";")
    - fields optionally quoted with an enclosure (default '"'),
      a doubled enclosure inside a quoted field is a literal enclosure

Decode modes:
    - header mode     : first non-blank row names the fields,
                        every later row becomes a dict
    - positional mode : every row becomes a list of strings

Blank lines are skipped. No type coercion: every decoded value is a str.
"""

import csv
from io import StringIO
from typing import Any, Dict, List, Union

from .errors import MalformedRowError, ParseError, UnsupportedShapeError
from .values import ValueKind, kind_of, scalar_to_text


DEFAULT_DELIMITER = ";"
DEFAULT_ENCLOSURE = '"'

Record = Union[Dict[str, str], List[str]]


def _check_format(delimiter: str, enclosure: str) -> None:
    for name, char in (("delimiter", delimiter), ("enclosure", enclosure)):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"CSV {name} must be a single character, got {char!r}")


def _parse_line(line: str, line_number: int, delimiter: str, enclosure: str) -> List[str]:
    """Parse a single CSV line into its fields."""
    reader = csv.reader([line], delimiter=delimiter, quotechar=enclosure, strict=True)
    try:
        return next(reader)
    except csv.Error as e:
        raise ParseError(f"Error parsing CSV line {line_number}: {str(e)}") from e


def csv_to_records(
    text: str,
    delimiter: str = DEFAULT_DELIMITER,
    header_mode: bool = True,
    enclosure: str = DEFAULT_ENCLOSURE,
) -> List[Record]:
    """
    Parse CSV text into a list of records.

    Args:
        text: CSV content
        delimiter: Field separator
        header_mode: If True the first row supplies field names and each
            later row becomes a dict, otherwise every row is a list
        enclosure: Quote character

    Returns:
        List of dicts (header mode) or lists of strings (positional mode)

    Raises:
        MalformedRowError: If a data row length differs from the header
        ParseError: If a line is not valid CSV or the header repeats a name
        ValueError: If delimiter or enclosure is not a single character
    """
    _check_format(delimiter, enclosure)
    header = None
    records: List[Record] = []

    for line_number, line in enumerate(text.split("\n"), start=1):
        if line.strip() == "":
            continue
        if line.endswith("\r"):
            line = line[:-1]

        row = _parse_line(line, line_number, delimiter, enclosure)

        if not header_mode:
            records.append(row)
        elif header is None:
            duplicates = sorted({name for name in row if row.count(name) > 1})
            if duplicates:
                raise ParseError(f"Duplicate CSV header names on line {line_number}: {duplicates}")
            header = row
        elif len(row) != len(header):
            raise MalformedRowError(line_number, expected=len(header), actual=len(row))
        else:
            records.append(dict(zip(header, row)))

    return records


def _field_text(value: Any, column: str) -> str:
    if kind_of(value) in (ValueKind.LIST, ValueKind.MAP):
        raise UnsupportedShapeError(
            f"Field {column!r} holds a nested {kind_of(value).value}, CSV fields must be scalars"
        )
    return scalar_to_text(value)


def _unwrap_records(value: Any) -> Any:
    """
    Unwrap a single-entry map holding the records, e.g. {"data": [{...}, ...]}.

    This is the shape XML written from a record list decodes back to.
    """
    if isinstance(value, dict) and len(value) == 1:
        (inner,) = value.values()
        if isinstance(inner, dict):
            return [inner]
        if isinstance(inner, list):
            return inner
    return value


def records_to_csv(
    records: Any,
    delimiter: str = DEFAULT_DELIMITER,
    enclosure: str = DEFAULT_ENCLOSURE,
) -> str:
    """
    Serialize a list of dict records as CSV text.

    The header row is the key list of the first record. Later records may
    leave keys out (written as empty fields) but may not add new ones.
    A map with a single entry holding a record or a list of records is
    unwrapped first.

    Raises:
        UnsupportedShapeError: If there is no first record, a record is not
            a dict, a record has unknown keys, or a field is nested
        ValueError: If delimiter or enclosure is not a single character
    """
    _check_format(delimiter, enclosure)
    records = _unwrap_records(records)
    if not isinstance(records, (list, tuple)) or not records:
        raise UnsupportedShapeError("CSV encoding needs a non-empty list of records")
    if not isinstance(records[0], dict):
        raise UnsupportedShapeError(
            f"CSV header is taken from the first record, which must be a map "
            f"(got {type(records[0]).__name__})"
        )
    if not records[0]:
        raise UnsupportedShapeError("The first record has no keys, no CSV header can be derived")

    header = [str(key) for key in records[0].keys()]
    known = set(header)

    output = StringIO()
    writer = csv.writer(
        output,
        delimiter=delimiter,
        quotechar=enclosure,
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
    )
    writer.writerow(header)

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise UnsupportedShapeError(
                f"Record {index} is a {type(record).__name__}, expected a map"
            )
        extra = [key for key in record if str(key) not in known]
        if extra:
            raise UnsupportedShapeError(
                f"Record {index} has keys not in the header: {extra}"
            )
        fields = {str(key): value for key, value in record.items()}
        writer.writerow([_field_text(fields.get(column), column) for column in header])

    csv_text = output.getvalue()
    if csv_text.endswith("\n"):
        csv_text = csv_text[:-1]
    return csv_text


__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCLOSURE",
    "csv_to_records",
    "records_to_csv",
]
