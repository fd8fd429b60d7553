"""I/O layer - reading and writing properties files."""

from .properties_reader import load_properties, parse_properties
from .properties_writer import PropertiesWriter, escape_key, escape_value, format_entry

__all__ = [
    "load_properties",
    "parse_properties",
    "PropertiesWriter",
    "escape_key",
    "escape_value",
    "format_entry",
]
