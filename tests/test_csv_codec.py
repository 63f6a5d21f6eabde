"""
Tests for the CSV codec.

Covers:
    - header mode and positional mode decoding
    - blank line skipping and CRLF input
    - quoting rules on both sides
    - shape errors on encoding
"""

import pytest
from dataconv.csv_codec import csv_to_records, records_to_csv
from dataconv.errors import MalformedRowError, ParseError, UnsupportedShapeError


class TestDecodeHeaderMode:
    """First row names the fields."""

    def test_records_keyed_by_header(self):
        result = csv_to_records("a;b\n1;2\n3;4", delimiter=";")
        assert result == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_header_order_preserved(self):
        result = csv_to_records("z;a\n1;2")
        assert list(result[0].keys()) == ["z", "a"]

    def test_blank_lines_skipped(self):
        """Blank and whitespace-only lines never produce records."""
        result = csv_to_records("a;b\n1;2\n\n   \n3;4\n")
        assert result == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_leading_blank_line_before_header(self):
        result = csv_to_records("\na;b\n1;2")
        assert result == [{"a": "1", "b": "2"}]

    def test_crlf_line_endings(self):
        result = csv_to_records("a;b\r\n1;2\r\n")
        assert result == [{"a": "1", "b": "2"}]

    def test_header_only(self):
        assert csv_to_records("a;b\n") == []

    def test_empty_text(self):
        assert csv_to_records("") == []

    def test_values_stay_strings(self):
        result = csv_to_records("n;flag\n42;true")
        assert result == [{"n": "42", "flag": "true"}]

    def test_comma_delimiter(self):
        result = csv_to_records("a,b\n1,2", delimiter=",")
        assert result == [{"a": "1", "b": "2"}]

    def test_short_row_is_malformed(self):
        with pytest.raises(MalformedRowError) as exc_info:
            csv_to_records("a;b\n1;2\n3")
        assert exc_info.value.line_number == 3
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_long_row_is_malformed(self):
        with pytest.raises(ParseError):
            csv_to_records("a;b\n1;2;3")


class TestDecodePositionalMode:
    """Every row, including the first, becomes a list."""

    def test_all_rows_are_lists(self):
        result = csv_to_records("a;b\n1;2\n3;4", delimiter=";", header_mode=False)
        assert result == [["a", "b"], ["1", "2"], ["3", "4"]]

    def test_ragged_rows_allowed(self):
        result = csv_to_records("a;b;c\n1", header_mode=False)
        assert result == [["a", "b", "c"], ["1"]]


class TestDecodeQuoting:
    """Enclosure handling."""

    def test_quoted_delimiter(self):
        result = csv_to_records('a;b\n"x;y";2')
        assert result == [{"a": "x;y", "b": "2"}]

    def test_doubled_enclosure(self):
        result = csv_to_records('a\n"say ""hi"""')
        assert result == [{"a": 'say "hi"'}]

    def test_custom_enclosure(self):
        result = csv_to_records("a;b\n'x;y';2", enclosure="'")
        assert result == [{"a": "x;y", "b": "2"}]

    def test_unterminated_quote(self):
        with pytest.raises(ParseError):
            csv_to_records('a\n"abc')


class TestEncode:
    """records_to_csv output."""

    def test_simple_record(self):
        result = records_to_csv([{"name": "Al", "age": "9"}], delimiter=";", enclosure='"')
        assert result == "name;age\nAl;9"

    def test_no_trailing_newline(self):
        result = records_to_csv([{"a": "1"}, {"a": "2"}])
        assert result == "a\n1\n2"

    def test_field_with_delimiter_is_quoted(self):
        assert records_to_csv([{"t": "x;y"}]) == 't\n"x;y"'

    def test_enclosure_is_doubled(self):
        assert records_to_csv([{"t": 'say "hi"'}]) == 't\n"say ""hi"""'

    def test_field_with_newline_is_quoted(self):
        assert records_to_csv([{"t": "a\nb"}]) == 't\n"a\nb"'

    def test_missing_keys_written_empty(self):
        result = records_to_csv([{"a": "1", "b": "2"}, {"a": "3"}])
        assert result == "a;b\n1;2\n3;"

    def test_values_follow_header_order(self):
        result = records_to_csv([{"a": "1", "b": "2"}, {"b": "4", "a": "3"}])
        assert result == "a;b\n1;2\n3;4"

    def test_scalar_rendering(self):
        result = records_to_csv([{"n": 9, "ok": True, "x": None}])
        assert result == "n;ok;x\n9;true;"

    def test_comma_delimiter(self):
        result = records_to_csv([{"a": "1", "b": "x,y"}], delimiter=",")
        assert result == 'a,b\n1,"x,y"'

    def test_single_entry_map_is_unwrapped(self):
        """Shape produced by decoding XML written from records."""
        value = {"data": [{"a": "1"}, {"a": "2"}]}
        assert records_to_csv(value) == "a\n1\n2"

    def test_single_record_under_map_is_unwrapped(self):
        assert records_to_csv({"row": {"a": "1"}}) == "a\n1"

    def test_roundtrip(self):
        text = 'name;note\nAl;"x;y"\nBo;plain'
        assert records_to_csv(csv_to_records(text)) == text


class TestEncodeShapes:
    """Inputs that cannot become CSV."""

    def test_empty_dataset(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([])

    def test_positional_rows(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([["a", "b"], ["1", "2"]])

    def test_scalar(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv("a;b")

    def test_multi_key_map_root(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv({"a": "1", "b": "2"})

    def test_later_record_not_a_map(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([{"a": "1"}, ["2"]])

    def test_unknown_key(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([{"a": "1"}, {"a": "2", "b": "3"}])

    def test_nested_field(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([{"a": {"b": "1"}}])


class TestFormatCharacters:
    """Delimiter and enclosure must be single characters."""

    @pytest.mark.parametrize("delimiter", [";;", ""])
    def test_decode_rejects_bad_delimiter(self, delimiter):
        """Checked up front, even when there is nothing to parse."""
        with pytest.raises(ValueError):
            csv_to_records("a;b\n1;2", delimiter=delimiter)
        with pytest.raises(ValueError):
            csv_to_records("", delimiter=delimiter)

    def test_decode_rejects_bad_enclosure(self):
        with pytest.raises(ValueError):
            csv_to_records("a;b\n1;2", enclosure="''")

    def test_encode_rejects_bad_delimiter(self):
        with pytest.raises(ValueError):
            records_to_csv([{"a": "1"}], delimiter=";;")

    def test_encode_rejects_bad_enclosure(self):
        with pytest.raises(ValueError):
            records_to_csv([{"a": "1"}], enclosure="")


class TestHeaderEdgeCases:
    """Headers that cannot name every column."""

    def test_duplicate_header_names(self):
        """A repeated name would silently drop a column."""
        with pytest.raises(ParseError) as exc_info:
            csv_to_records("a;a\n1;2")
        assert "a" in str(exc_info.value)

    def test_duplicate_names_allowed_in_positional_mode(self):
        assert csv_to_records("a;a\n1;2", header_mode=False) == [["a", "a"], ["1", "2"]]

    def test_first_record_without_keys(self):
        """No keys means no header, same as an empty dataset."""
        with pytest.raises(UnsupportedShapeError):
            records_to_csv([{}])

    def test_first_record_without_keys_after_unwrap(self):
        with pytest.raises(UnsupportedShapeError):
            records_to_csv({"data": {}})
