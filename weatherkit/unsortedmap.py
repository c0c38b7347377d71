"""A mapping that keeps its entries in insertion order without hashing keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Optional, Tuple

_MISSING_KEY = "invalid map<K, T> key"


class UnsortedMap(MutableMapping):
    """Insertion-ordered map backed by a list of key/value pairs.

    Keys are compared with ``==`` only, so they need not be hashable.
    Lookups are linear, which suits the small maps this is meant for.
    """

    def __init__(self, items: Optional[Iterable[Tuple[Any, Any]] | Mapping] = None) -> None:
        self._pairs: list[list[Any]] = []
        if items is None:
            return
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self.insert(key, value)

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        index = self.find(key)
        if index is None:
            self._pairs.append([key, value])
        else:
            self._pairs[index][1] = value

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._pairs)
        return f"{type(self).__name__}({{{body}}})"

    def insert(self, key: Any, value: Any) -> int:
        """Add the pair unless the key exists; return the key's position."""
        index = self.find(key)
        if index is not None:
            return index
        self._pairs.append([key, value])
        return len(self._pairs) - 1

    def at(self, key: Any) -> Any:
        """Return the value stored for key, raising KeyError if absent."""
        index = self.find(key)
        if index is None:
            raise KeyError(_MISSING_KEY)
        return self._pairs[index][1]

    def find(self, key: Any) -> Optional[int]:
        """Return the position of key, or None if it is not present."""
        return next(
            (index for index, (stored, _) in enumerate(self._pairs) if stored == key),
            None,
        )

    def upper_bound(self, key: Any) -> Optional[int]:
        """Return the position after key, or None if key is absent or last."""
        index = self.find(key)
        if index is None or index + 1 >= len(self._pairs):
            return None
        return index + 1

    def count(self, key: Any) -> int:
        """Return 1 if key is present, otherwise 0."""
        index = self.find(key)
        if index is None:
            return 0
        return 1

    def erase(self, key: Any) -> int:
        """Remove key; return the number of entries removed (0 or 1)."""
        index = self.find(key)
        if index is None:
            return 0
        del self._pairs[index]
        return 1

    def swap(self, other: "UnsortedMap") -> None:
        """Exchange the contents of this map with another."""
        self._pairs, other._pairs = other._pairs, self._pairs