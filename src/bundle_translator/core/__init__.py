"""Domain layer - Pure entities representing resource bundle content."""

from .property_entry import PropertyEntry
from .properties_store import PropertiesStore, sorted_keys

__all__ = ["PropertyEntry", "PropertiesStore", "sorted_keys"]
