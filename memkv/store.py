"""In-memory key-value store combining a hash map, trie, LRU cache and Bloom filter."""

from __future__ import annotations

from memkv.bloom_filter import BloomFilter
from memkv.hash_map import HashMap
from memkv.lru_cache import LRUCache
from memkv.trie import Trie

DEFAULT_HASH_MAP_CAPACITY = 101
DEFAULT_CACHE_CAPACITY = 100
DEFAULT_BLOOM_FILTER_SIZE = 1000
DEFAULT_BLOOM_FILTER_HASHES = 3


class KVStore:
    """A string key-value store with prefix search and a fast negative check."""

    def __init__(
        self,
        hash_map_capacity: int = DEFAULT_HASH_MAP_CAPACITY,
        cache_capacity: int = DEFAULT_CACHE_CAPACITY,
        bloom_filter_size: int = DEFAULT_BLOOM_FILTER_SIZE,
        bloom_filter_num_hashes: int = DEFAULT_BLOOM_FILTER_HASHES,
    ) -> None:
        self._store = HashMap(hash_map_capacity)
        self._keys = Trie()
        self._cache = LRUCache(cache_capacity)
        self._filter = BloomFilter(bloom_filter_size, bloom_filter_num_hashes)

    def set(self, key: str, value: str) -> None:
        """Insert or update ``key``."""
        self._store.set(key, value)
        self._keys.insert(key)
        self._cache.put(key, value)
        self._filter.add(key)

    def get(self, key: str) -> str:
        """Return the value for ``key``, or an empty string if absent."""
        if not self._filter.possibly_contains(key):
            return ""
        cached = self._cache.get(key)
        if cached or key in self._cache:
            return cached
        stored = self._store.get(key)
        if stored or key in self._store:
            self._cache.put(key, stored)
            return stored
        return ""

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was stored."""
        if not self._filter.possibly_contains(key):
            return False
        removed = self._store.remove(key)
        if removed:
            self._keys.remove(key)
            self._cache.remove(key)
        return removed

    def prefix_search(self, prefix: str) -> list[str]:
        """Return every stored key beginning with ``prefix``."""
        return self._keys.search_prefix(prefix)

    def might_contain(self, key: str) -> bool:
        """Return the Bloom filter's answer for ``key``."""
        return self._filter.possibly_contains(key)