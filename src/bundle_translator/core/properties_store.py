"""PropertiesStore entity - immutable key/value view of a loaded bundle."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, List, Tuple

from .property_entry import PropertyEntry


class PropertiesStore(Mapping):
    """
    Read-only mapping of property keys to values.

    Built once from the pairs found in a source file. When a key occurs more
    than once, the last occurrence wins, as with java.util.Properties.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        data = {}
        for key, value in pairs:
            data[key] = value
        self._data = MappingProxyType(data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PropertiesStore({len(self)} keys)"

    def sorted_keys(self) -> List[str]:
        """Keys in ascending code point order, so output files stay diff-stable."""
        return sorted(self._data)

    def entries(self) -> List[PropertyEntry]:
        """All entries, in sorted key order."""
        return [PropertyEntry(key, self._data[key]) for key in self.sorted_keys()]


def sorted_keys(store: Mapping) -> List[str]:
    """Return the keys of any mapping in strict lexicographic order."""
    return sorted(store.keys())
