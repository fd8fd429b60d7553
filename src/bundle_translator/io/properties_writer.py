"""Properties Writer - owns the destination file handle for one run."""

import logging
from pathlib import Path
from typing import Optional, TextIO

from bundle_translator.core import PropertyEntry
from bundle_translator.errors import FileCreateError, FileWriteError
from bundle_translator.services.text_processing import escape_non_ascii

logger = logging.getLogger(__name__)

_CONTROL_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}
_KEY_ESCAPES = dict(_CONTROL_ESCAPES, **{"=": "\\=", ":": "\\:", " ": "\\ "})


def escape_key(key: str) -> str:
    """
    Escape a key so the loader splits the line at the right separator.

    Backslash, control characters, `=`, `:` and every space are escaped, as
    java.util.Properties.store does. A leading `#` or `!` is escaped so the
    line is not read back as a comment.
    """
    escaped = "".join(_KEY_ESCAPES.get(char, char) for char in key)
    if escaped[:1] in ("#", "!"):
        escaped = "\\" + escaped
    return escaped


def escape_value(value: str) -> str:
    """
    Escape a value for the right-hand side of a `key = value` line.

    Backslash and control characters are escaped, and so is a leading space
    (it would otherwise be stripped on load). Non-ASCII characters become
    `\\uxxxx` escapes.
    """
    escaped = "".join(_CONTROL_ESCAPES.get(char, char) for char in value)
    if escaped.startswith(" "):
        escaped = "\\" + escaped
    return escape_non_ascii(escaped)


def format_entry(entry: PropertyEntry) -> str:
    """Render an entry as one `key = value` line."""
    return f"{escape_key(entry.key)} = {escape_value(entry.value)}\n"


class PropertiesWriter:
    """
    Incremental `key = value` writer.

    The file is created (or truncated) when opened and released exactly once,
    either by `close()` or by leaving the `with` block, including on errors.
    Entries are written with `format_entry`, so raw text goes in and a file
    `load_properties` reads back to the same mapping comes out.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.lines_written = 0
        self._handle: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> "PropertiesWriter":
        """
        Create or truncate the destination file.

        Raises:
            FileCreateError: if the file cannot be opened for writing.
        """
        try:
            self._handle = open(self.path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise FileCreateError(self.path, e.strerror or str(e)) from e
        logger.debug("Opened %s for writing", self.path)
        return self

    def write_entry(self, entry: PropertyEntry) -> bool:
        """
        Append one entry as a line.

        Entries with an empty key or value are skipped silently.

        Returns:
            True if a line was written.

        Raises:
            FileWriteError: if the line cannot be written (e.g. disk full).
        """
        if self._handle is None:
            raise ValueError(f"{self.path} is not open for writing")
        if entry.is_blank:
            return False
        try:
            self._handle.write(format_entry(entry))
        except OSError as e:
            raise FileWriteError(self.path, e.strerror or str(e)) from e
        self.lines_written += 1
        return True

    def close(self) -> None:
        if self._handle is None:
            return
        try:
            self._handle.close()
        except OSError as e:
            raise FileWriteError(self.path, e.strerror or str(e)) from e
        finally:
            self._handle = None
        logger.debug("Closed %s after %d lines", self.path, self.lines_written)

    def __enter__(self) -> "PropertiesWriter":
        if self._handle is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
