"""32-bit string hash functions used by the Bloom filter."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF

__all__ = ["djb2_hash", "sdbm_hash", "multiplicative_hash"]


def _signed_bytes(key: str | bytes) -> list[int]:
    """Return the key's bytes as signed 8-bit values."""
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    return [b - 256 if b > 127 else b for b in data]


def djb2_hash(key: str | bytes) -> int:
    """DJB2 hash: ``h = h * 33 + c`` starting from 5381, modulo 2**32."""
    h = 5381
    for c in _signed_bytes(key):
        h = ((h << 5) + h + c) & _MASK32
    return h


def sdbm_hash(key: str | bytes) -> int:
    """SDBM hash: ``h = c + (h << 6) + (h << 16) - h``, modulo 2**32."""
    h = 0
    for c in _signed_bytes(key):
        h = (c + (h << 6) + (h << 16) - h) & _MASK32
    return h


def multiplicative_hash(key: str | bytes) -> int:
    """Polynomial hash: ``h = h * 31 + c``, modulo 2**32."""
    h = 0
    for c in _signed_bytes(key):
        h = (h * 31 + c) & _MASK32
    return h