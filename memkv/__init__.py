"""In-memory key-value store with a hash map, LRU cache, trie prefix search and a Bloom filter."""

__version__ = "0.1.0"