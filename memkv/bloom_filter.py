"""Bloom filter for probabilistic membership checks on string keys."""

from __future__ import annotations

from collections.abc import Callable

from memkv.hashing import djb2_hash, multiplicative_hash, sdbm_hash

_HASH_FUNCTIONS: tuple[Callable[[str], int], ...] = (
    djb2_hash,
    sdbm_hash,
    multiplicative_hash,
)


class BloomFilter:
    """A fixed-size bit array probed by up to three hash functions.

    A negative answer is certain; a positive answer may be a false positive.
    Asking for more hash functions than are available uses all of them.
    """

    def __init__(self, size: int, num_hashes: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if num_hashes < 0:
            raise ValueError("num_hashes must not be negative")
        self._size = size
        self._bits = bytearray(size)
        self._hashes = _HASH_FUNCTIONS[:num_hashes]

    def _positions(self, key: str):
        return (hash_fn(key) % self._size for hash_fn in self._hashes)

    def add(self, key: str) -> None:
        """Record ``key`` in the filter; a zero-size filter records nothing."""
        if self._size == 0:
            return
        for position in self._positions(key):
            self._bits[position] = 1

    def possibly_contains(self, key: str) -> bool:
        """Return False if ``key`` was certainly never added, else True."""
        if self._size == 0:
            return False
        return all(self._bits[position] for position in self._positions(key))