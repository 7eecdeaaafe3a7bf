"""String-to-string hash map with separate chaining."""

from __future__ import annotations

_SIZE_T_MASK = (1 << 64) - 1


class HashMap:
    """A fixed-capacity hash table mapping strings to strings."""

    def __init__(self, capacity: int = 101) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._buckets: list[list[list[str]]] = [[] for _ in range(capacity)]
        self._size = 0

    def _index(self, key: str) -> int:
        h = 0
        for b in key.encode("utf-8"):
            c = b - 256 if b > 127 else b
            h = ((h * 31 + c) & _SIZE_T_MASK) % self._capacity
        return h

    def _bucket(self, key: str) -> list[list[str]]:
        return self._buckets[self._index(key)]

    def set(self, key: str, value: str) -> None:
        """Insert a key or update its value."""
        bucket = self._bucket(key)
        for node in bucket:
            if node[0] == key:
                node[1] = value
                return
        bucket.append([key, value])
        self._size += 1

    def get(self, key: str) -> str:
        """Return the value for ``key``, or an empty string if absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return ""

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def contains(self, key: str) -> bool:
        """Return whether ``key`` is stored."""
        return any(stored_key == key for stored_key, _ in self._bucket(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        return self._size