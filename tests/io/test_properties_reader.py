"""Unit tests for loading properties files."""

from pathlib import Path

import pytest

from bundle_translator.core import PropertiesStore
from bundle_translator.errors import FileReadError, ParseError
from bundle_translator.io import load_properties, parse_properties


@pytest.fixture
def write_props(tmp_path):
    """Write text to a .properties file in a temp directory and return its path."""
    def _write(text: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / "messages.properties"
        path.write_bytes(text.encode(encoding))
        return path
    return _write


class TestLoadProperties:
    """Tests for load_properties file handling."""

    def test_loads_simple_file(self, write_props):
        """Should parse key = value lines into a store."""
        path = write_props("greeting = Hello\nfarewell = Goodbye\n")

        store = load_properties(path)

        assert isinstance(store, PropertiesStore)
        assert dict(store) == {"greeting": "Hello", "farewell": "Goodbye"}

    def test_missing_file_raises_file_read_error(self, tmp_path):
        """A missing source file is a FileReadError carrying the path."""
        path = tmp_path / "missing.properties"

        with pytest.raises(FileReadError) as excinfo:
            load_properties(path)

        assert excinfo.value.path == path

    def test_directory_raises_file_read_error(self, tmp_path):
        """A directory cannot be read as a properties file."""
        with pytest.raises(FileReadError):
            load_properties(tmp_path)

    def test_invalid_utf8_raises_file_read_error(self, write_props):
        """Non UTF-8 bytes are reported as a read failure."""
        path = write_props("name = caf\xe9\n", encoding="latin-1")

        with pytest.raises(FileReadError):
            load_properties(path)

    def test_malformed_line_raises_parse_error_with_line_number(self, write_props):
        """A line without separator is malformed."""
        path = write_props("# header\na = 1\njust some words\n")

        with pytest.raises(ParseError) as excinfo:
            load_properties(path)

        assert excinfo.value.line_number == 3
        assert "messages.properties:3" in str(excinfo.value)

    def test_empty_file_gives_empty_store(self, write_props):
        assert len(load_properties(write_props(""))) == 0


class TestParseProperties:
    """Tests for the properties syntax."""

    def test_equals_and_colon_separators(self):
        assert parse_properties("a=1\nb: 2\nc = 3\n") == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_first_separator_splits(self):
        """Only the first separator splits; later ones belong to the value."""
        assert parse_properties("url = http://example.com/?a=b\n") == [("url", "http://example.com/?a=b")]

    def test_comments_and_blank_lines_are_ignored(self):
        text = "# comment\n! also comment\n\n   \n   # indented comment\nkey = value\n"
        assert parse_properties(text) == [("key", "value")]

    def test_whitespace_around_key_and_before_value_is_stripped(self):
        assert parse_properties("   key   =    value\n") == [("key", "value")]

    def test_empty_value_is_allowed(self):
        assert parse_properties("empty =\n") == [("empty", "")]

    def test_duplicates_kept_in_file_order(self):
        """parse_properties keeps every pair; the store applies last-wins."""
        assert parse_properties("a = 1\na = 2\n") == [("a", "1"), ("a", "2")]

    def test_crlf_line_endings(self):
        assert parse_properties("a = 1\r\nb = 2\r\n") == [("a", "1"), ("b", "2")]

    def test_continuation_lines_are_joined(self):
        """A trailing backslash continues the value on the next line."""
        text = "message = first part, \\\n    second part\nnext = x\n"
        assert parse_properties(text) == [("message", "first part, second part"), ("next", "x")]

    def test_escaped_backslash_does_not_continue(self):
        assert parse_properties("path = C:\\\\\nnext = x\n") == [("path", "C:\\"), ("next", "x")]

    def test_unicode_escapes_are_decoded(self):
        assert parse_properties("title = salt\\u00f3\n") == [("title", "saltó")]

    def test_surrogate_pair_escapes_are_joined(self):
        assert parse_properties("smile = \\ud83d\\ude00\n") == [("smile", "😀")]

    def test_escaped_separator_in_key(self):
        assert parse_properties("a\\=b = c\n") == [("a=b", "c")]

    def test_escaped_trailing_space_in_key(self):
        assert parse_properties("key\\  = value\n") == [("key ", "value")]

    def test_simple_escapes(self):
        assert parse_properties("tab = a\\tb\\nc\n") == [("tab", "a\tb\nc")]

    def test_malformed_unicode_escape(self):
        with pytest.raises(ParseError) as excinfo:
            parse_properties("a = \\u12\n")
        assert excinfo.value.line_number == 1

    def test_utf8_values_are_kept(self):
        assert parse_properties("cat = 猫\n") == [("cat", "猫")]
