"""Fowler-Noll-Vo hash functions producing 64-bit values."""

FNV_OFFSET_BASIS = 14695981039346656037
FNV_PRIME = 1099511628211

_MASK64 = (1 << 64) - 1


def fnv1(data: bytes) -> int:
    """Return the 64-bit FNV-1 hash of ``data`` (multiply, then XOR)."""
    value = FNV_OFFSET_BASIS
    for byte in data:
        value = (value * FNV_PRIME) & _MASK64
        value ^= byte
    return value


def fnv1a(data: bytes) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (XOR, then multiply)."""
    value = FNV_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * FNV_PRIME) & _MASK64
    return value