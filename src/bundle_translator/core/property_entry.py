"""PropertyEntry entity - a single key/value pair of a resource bundle."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyEntry:
    """One `key = value` line of a properties file."""

    key: str
    value: str

    @property
    def is_blank(self) -> bool:
        """True when either side is empty; such entries are never written out."""
        return not self.key or not self.value
