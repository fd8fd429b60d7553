"""Text processing services - escaping for properties output."""

from bundle_translator.services.text_processing.unicode_escape import escape_non_ascii

__all__ = [
    "escape_non_ascii",
]
