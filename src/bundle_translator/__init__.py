"""
Bundle Translator - translate Java ResourceBundle properties files.

This package reads a `.properties` file, translates every value with the
Google Translate v2 API, and writes a new bundle with non-ASCII characters
escaped as `\\uxxxx`, keys in sorted order.
"""

__version__ = "0.1.1"

# Make key components available at package level
from bundle_translator.core import PropertiesStore, PropertyEntry, sorted_keys
from bundle_translator.io import PropertiesWriter, load_properties
from bundle_translator.services.text_processing import escape_non_ascii

__all__ = [
    "PropertiesStore",
    "PropertyEntry",
    "sorted_keys",
    "PropertiesWriter",
    "load_properties",
    "escape_non_ascii",
]
