"""Bounded memo for search results."""

from collections import OrderedDict
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Protocol


class SearchCache(Protocol):
    """Cache interface for memoized search results."""

    def get(self, key: Hashable) -> object | None:
        """Return a cached value if present."""

    def set(self, key: Hashable, value: object) -> None:
        """Store a cached value."""

    def clear(self) -> None:
        """Drop every cached value."""


@dataclass
class LruSearchCache(SearchCache):
    """In-memory least-recently-used cache."""

    max_entries: int
    _entries: OrderedDict[Hashable, object]

    def __init__(self, max_entries: int = 256) -> None:
        self.max_entries = max_entries
        self._entries = OrderedDict()

    def get(self, key: Hashable) -> object | None:
        """Return a cached value and mark it as recently used."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: Hashable, value: object) -> None:
        """Store a value, evicting the least recently used entry when full."""
        if self.max_entries <= 0:
            return
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
