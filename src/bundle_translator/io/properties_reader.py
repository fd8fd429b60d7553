"""Properties Reader - parses Java-style .properties files into a PropertiesStore."""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Tuple

from bundle_translator.core import PropertiesStore
from bundle_translator.errors import FileReadError, ParseError

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def load_properties(path: Path) -> PropertiesStore:
    """
    Load a properties file into an immutable PropertiesStore.

    Accepted syntax:
    - `key = value`, `key=value` or `key: value` (first unescaped `=` or `:`)
    - blank lines and lines starting with `#` or `!` are ignored
    - a line ending in an odd number of backslashes continues on the next line
    - `\\uXXXX` and the usual single-character escapes are decoded

    Args:
        path: Path to the source .properties file (read as UTF-8).

    Returns:
        PropertiesStore holding every key found (last occurrence wins).

    Raises:
        FileReadError: if the file is missing, unreadable, or not UTF-8.
        ParseError: if a logical line is malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e

    store = PropertiesStore(parse_properties(text, path))
    logger.debug("Loaded %d properties from %s", len(store), path)
    return store


def parse_properties(text: str, path: Path = Path("<string>")) -> List[Tuple[str, str]]:
    """Parse properties text into (key, value) pairs in file order."""
    pairs = []
    for line_number, line in _logical_lines(text):
        pairs.append(_parse_line(line, path, line_number))
    return pairs


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (first physical line number, joined logical line), skipping comments."""
    physical = _LINE_BREAK.split(text)
    index = 0
    while index < len(physical):
        line_number = index + 1
        line = physical[index].lstrip(_WHITESPACE)
        index += 1

        if not line or line[0] in "#!":
            continue

        while _ends_with_continuation(line):
            line = line[:-1]
            if index >= len(physical):
                break
            line += physical[index].lstrip(_WHITESPACE)
            index += 1

        yield line_number, line


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _parse_line(line: str, path: Path, line_number: int) -> Tuple[str, str]:
    separator = _find_separator(line)
    if separator < 0:
        raise ParseError(path, line_number, "expected 'key = value' or 'key: value'")

    raw_key = _rstrip_unescaped(line[:separator])
    raw_value = line[separator + 1:].lstrip(_WHITESPACE)
    return (
        _unescape(raw_key, path, line_number),
        _unescape(raw_value, path, line_number),
    )


def _find_separator(line: str) -> int:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS:
            return index
        index += 1
    return -1


def _rstrip_unescaped(text: str) -> str:
    """Strip trailing whitespace, keeping a whitespace char protected by a backslash."""
    stripped = text.rstrip(_WHITESPACE)
    if len(stripped) < len(text) and _ends_with_continuation(stripped):
        return text[:len(stripped) + 1]
    return stripped


def _unescape(text: str, path: Path, line_number: int) -> str:
    if "\\" not in text:
        return text

    out = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue

        if index + 1 >= len(text):
            # Dangling backslash at end of file.
            break
        code = text[index + 1]
        if code == "u":
            digits = text[index + 2:index + 6]
            if len(digits) != 4 or not all(d in "0123456789abcdefABCDEF" for d in digits):
                raise ParseError(path, line_number, f"malformed \\uxxxx escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            index += 6
        else:
            out.append(_SIMPLE_ESCAPES.get(code, code))
            index += 2

    decoded = "".join(out)
    try:
        # Re-pair UTF-16 surrogates written as two \u escapes.
        return decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise ParseError(path, line_number, "unpaired surrogate in \\u escape") from e
