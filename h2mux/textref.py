"""Byte-string hashing and binary size helpers."""

from __future__ import annotations

__all__ = ["fnv1a_hash", "kib", "mib", "gib"]

_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


def fnv1a_hash(data: str | bytes) -> int:
    """Return the 32-bit FNV-1a hash of *data*; strings are hashed as UTF-8."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    h = _FNV_OFFSET_BASIS
    for byte in raw:
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK32
    return h


def _scaled(n: int, shift: int) -> int:
    if n < 0:
        raise ValueError(f"negative size: {n}")
    return n << shift


def kib(n: int) -> int:
    """Return *n* kibibytes in bytes."""
    return _scaled(n, 10)


def mib(n: int) -> int:
    """Return *n* mebibytes in bytes."""
    return _scaled(n, 20)


def gib(n: int) -> int:
    """Return *n* gibibytes in bytes."""
    return _scaled(n, 30)