"""Least-recently-used cache of string values."""

from __future__ import annotations

from collections import OrderedDict


class LRUCache:
    """A bounded cache that evicts the least recently used entry.

    A capacity of zero disables the cache entirely.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: OrderedDict[str, str] = OrderedDict()

    def get(self, key: str) -> str:
        """Return the cached value and mark it recent, or ``""`` if absent."""
        if self._capacity == 0 or key not in self._items:
            return ""
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: str, value: str) -> None:
        """Insert or update ``key``, evicting the oldest entry when full."""
        if self._capacity == 0:
            return
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        if len(self._items) >= self._capacity:
            self._items.popitem(last=False)
        self._items[key] = value

    def contains(self, key: str) -> bool:
        """Return whether ``key`` is cached, without changing recency."""
        return self._capacity != 0 and key in self._items

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def remove(self, key: str) -> bool:
        """Drop ``key``; return whether it was cached."""
        if self._capacity == 0 or key not in self._items:
            return False
        del self._items[key]
        return True

    def __len__(self) -> int:
        return len(self._items)