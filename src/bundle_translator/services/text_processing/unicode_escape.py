"""Unicode escaping for Java resource bundles."""


def escape_non_ascii(text: str) -> str:
    """
    Escape every non-ASCII character as `\\uxxxx` (lowercase hex).

    Rules:
    - ASCII characters (U+0000..U+007F) pass through unchanged, so any
      ASCII-only string is returned as-is
    - BMP characters become a single `\\uxxxx` escape
    - Characters above U+FFFF become a UTF-16 surrogate pair of two escapes,
      which is what PropertyResourceBundle decodes back to one character

    Args:
        text: Text to make ASCII-safe.

    Returns:
        Escaped text.
    """
    if text.isascii():
        return text

    out = []
    for char in text:
        code = ord(char)
        if code < 0x80:
            out.append(char)
        elif code <= 0xFFFF:
            out.append(f"\\u{code:04x}")
        else:
            code -= 0x10000
            out.append(f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}")
    return "".join(out)
