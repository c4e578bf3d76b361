"""Ready-made comparators for the key types a skip list usually holds.

A comparator takes two keys and returns a negative number, zero or a positive
number when the first key orders before, equal to or after the second one.
The skip list never validates it: an inconsistent comparator yields an
undefined ordering, not an error.
"""
from __future__ import annotations

from typing import Any, Callable

__all__ = [
    "Comparator",
    "natural_comparator",
    "bytes_comparator",
    "str_comparator",
    "int32_comparator",
    "int64_comparator",
]

Comparator = Callable[[Any, Any], int]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _to_signed(v: int, bits: int) -> int:
    v &= (1 << bits) - 1
    if v >= 1 << (bits - 1):
        v -= 1 << bits
    return v


def natural_comparator(a: Any, b: Any) -> int:
    """Order keys with Python's own ``<`` / ``>`` operators."""
    return _cmp(a, b)


def bytes_comparator(a: bytes, b: bytes) -> int:
    """Lexicographic byte order (same as ``bytes.__lt__``)."""
    return _cmp(a, b)


def str_comparator(a: str, b: str) -> int:
    return _cmp(a, b)


def int32_comparator(a: int, b: int) -> int:
    """Signed 32-bit order; values outside the range wrap like an ``int32``."""
    return _cmp(_to_signed(a, 32), _to_signed(b, 32))


def int64_comparator(a: int, b: int) -> int:
    return _cmp(_to_signed(a, 64), _to_signed(b, 64))
